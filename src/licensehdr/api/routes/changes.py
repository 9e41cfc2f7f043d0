"""Change discovery routes for the licensehdr API."""

import logging
from typing import Any, Dict

from fastapi import APIRouter

from ...settings import get_baseline
from ..models import ChangesRequest
from ..services import ChangeService

router = APIRouter(tags=["changes"])

logger = logging.getLogger(__name__)

change_service = ChangeService()


@router.post("/changes")
def list_changes(request: ChangesRequest) -> Dict[str, Any]:
    """List changed files with their copyright years."""
    default_remote, default_branch = get_baseline()
    remote = request.remote or default_remote
    branch = request.branch or default_branch
    logger.info(
        "Received changes request",
        extra={"repo": request.repo_path, "remote": remote, "branch": branch},
    )

    result = change_service.process_changes_request(
        repo_path=request.repo_path,
        remote=remote,
        branch=branch,
        committed_only=request.committed_only,
    )
    logger.info(
        "Changes request completed",
        extra={"repo": request.repo_path, "ok": result["ok"]},
    )
    return result
