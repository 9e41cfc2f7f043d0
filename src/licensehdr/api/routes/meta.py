"""Service metadata and repository health endpoints."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Response

from ...settings import get_baseline
from .. import __version__
from ..models import Baseline, HealthResponse, VersionResponse, validate_repo_path
from . import changes as changes_routes

router = APIRouter(tags=["meta"])

logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
def health_check(response: Response, repo_path: Optional[str] = None) -> HealthResponse:
    """Liveness, and whether ``repo_path`` can be queried as a git working tree.

    An unusable working tree answers 503 with the error that git raised.
    """
    if repo_path is None:
        return HealthResponse(status="healthy", version=__version__)

    try:
        repo_path = validate_repo_path(repo_path)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    error = changes_routes.change_service.check_repository(repo_path)
    logger.info(
        "Repository health checked",
        extra={"repo": repo_path, "repository_ok": error is None},
    )
    if error is None:
        return HealthResponse(
            status="healthy", version=__version__, repo_path=repo_path, repository_ok=True
        )

    response.status_code = 503
    return HealthResponse(
        status="unhealthy",
        version=__version__,
        repo_path=repo_path,
        repository_ok=False,
        error=error.to_dict(),
    )


@router.get("/version", response_model=VersionResponse)
def version_info() -> VersionResponse:
    """Package version and the baseline requests default to."""
    remote, branch = get_baseline()
    return VersionResponse(
        version=__version__,
        api_version="v1",
        default_baseline=Baseline(remote=remote, branch=branch),
    )


@router.get("/", include_in_schema=False)
def root() -> Dict[str, Any]:
    return {
        "name": "licensehdr API",
        "version": __version__,
        "endpoints": {
            "changes": "POST /changes - List changed files with copyright years",
            "health": "GET /health?repo_path=... - Service and working tree health",
            "version": "GET /version - Version and default baseline",
        },
    }
