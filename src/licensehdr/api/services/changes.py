"""Service layer for the licensehdr API."""

import logging
from typing import Any, Callable, Dict, Optional

from ...config import HeaderConfig
from ...errors import LicenseHeaderError
from ...main import process_changes
from ...serialize import ChangeSerializer
from ...vcs import GitVcs, Vcs

logger = logging.getLogger(__name__)


class ChangeService:
    """Runs change discovery for API requests."""

    def __init__(self, vcs_factory: Optional[Callable[[HeaderConfig], Vcs]] = None):
        """Initialize with the factory building a ``Vcs`` for each request."""
        self.vcs_factory = vcs_factory or GitVcs

    def process_changes_request(
        self,
        repo_path: str,
        remote: str = "origin",
        branch: str = "master",
        committed_only: bool = False,
    ) -> Dict[str, Any]:
        """Process a changes request and return the complete JSON response."""
        logger.info(
            "Processing changes request",
            extra={"repo": repo_path, "remote": remote, "branch": branch},
        )
        try:
            config = HeaderConfig(
                repo_path=repo_path,
                remote=remote,
                branch=branch,
                committed_only=committed_only,
            )
            payload = process_changes(config, vcs=self.vcs_factory(config))
            return ChangeSerializer(config).create_success_envelope(payload)

        except LicenseHeaderError as e:
            logger.warning(
                "Changes request failed",
                extra={"repo": repo_path, "code": e.code},
            )
            serializer = ChangeSerializer(HeaderConfig())
            return serializer.create_error_envelope(e.code, e.message, e.details)

    def check_repository(self, repo_path: str) -> Optional[LicenseHeaderError]:
        """Query the working tree at ``repo_path``, returning the error raised if any."""
        config = HeaderConfig(repo_path=repo_path)
        try:
            self.vcs_factory(config).status(["--porcelain"])
        except LicenseHeaderError as e:
            logger.warning(
                "Repository check failed",
                extra={"repo": repo_path, "code": e.code},
            )
            return e
        return None
