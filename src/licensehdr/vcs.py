"""Version control system operations for licensehdr."""

import logging
import subprocess
from typing import List, Protocol, Sequence, runtime_checkable

from .config import HeaderConfig
from .errors import ExecutionError

logger = logging.getLogger(__name__)


@runtime_checkable
class Vcs(Protocol):
    """The three version control queries change discovery relies on.

    Each operation receives the arguments following the sub-command name and
    returns the command's standard output verbatim, or raises
    ``ExecutionError``.
    """

    def diff(self, args: Sequence[str]) -> str:
        """Changes between two revisions."""
        ...

    def status(self, args: Sequence[str]) -> str:
        """Working tree changes."""
        ...

    def log(self, args: Sequence[str]) -> str:
        """Commit history."""
        ...


class GitVcs:
    """Git command line implementation of ``Vcs``."""

    def __init__(self, config: HeaderConfig):
        """Initialize with configuration."""
        self.config = config

    def diff(self, args: Sequence[str]) -> str:
        return self._run_git("diff", args)

    def status(self, args: Sequence[str]) -> str:
        return self._run_git("status", args)

    def log(self, args: Sequence[str]) -> str:
        return self._run_git("log", args)

    def _run_git(self, subcommand: str, args: Sequence[str]) -> str:
        """Run git command with proper environment and error handling."""
        # Enforce deterministic git behavior across platforms
        cmd: List[str] = [
            "git",
            "-c",
            "core.autocrlf=false",
            "-c",
            "color.ui=false",
            "-c",
            "core.quotepath=false",
            subcommand,
        ] + list(args)
        logger.debug("Running git", extra={"command": cmd, "cwd": self.config.repo_path})
        try:
            result = subprocess.run(
                cmd,
                cwd=self.config.repo_path,
                env=self.config.git_env,
                timeout=self.config.git_timeout,
                check=True,
                capture_output=True,
                # Non-UTF-8 path bytes survive as lone surrogates
                encoding="utf-8",
                errors="surrogateescape",
            )
        except subprocess.TimeoutExpired as e:
            raise ExecutionError(
                cmd, f"timed out after {self.config.git_timeout}s"
            ) from e
        except subprocess.CalledProcessError as e:
            raise ExecutionError(
                cmd,
                f"exited with status {e.returncode}",
                returncode=e.returncode,
                stderr=e.stderr,
            ) from e
        except OSError as e:
            raise ExecutionError(cmd, f"could not be started: {e}") from e
        return result.stdout
