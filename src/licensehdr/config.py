"""Configuration management for licensehdr."""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class HeaderConfig:
    """Configuration for change discovery and header insertion."""

    # Repository and baseline
    repo_path: str = "."
    remote: str = "origin"
    branch: str = "master"

    # Ignore the working tree, report only commits ahead of the baseline
    committed_only: bool = False

    # Header insertion
    header_file: Optional[str] = None
    includes: Tuple[str, ...] = ()

    # Output options
    json_output_path: Optional[str] = None

    # Seconds; None waits for git indefinitely
    git_timeout: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("remote", "branch"):
            value = getattr(self, name)
            if not value:
                raise ValueError(f"{name} cannot be empty")
            if any(ch.isspace() for ch in value) or ".." in value:
                raise ValueError(f"{name} is not a valid git reference name: {value!r}")
        if self.git_timeout is not None and self.git_timeout <= 0:
            raise ValueError("git_timeout must be positive")
        if self.includes and not self.header_file:
            raise ValueError("includes require a header_file")

    @property
    def baseline(self) -> str:
        """Remote-tracking reference the committed changes are diffed against."""
        return f"{self.remote}/{self.branch}"

    @property
    def git_env(self) -> Dict[str, str]:
        """Get Git environment variables for deterministic output."""
        env = os.environ.copy()

        # Use platform-appropriate null device
        null_device = "NUL" if os.name == "nt" else "/dev/null"

        # Only repository-local configuration may shape the parsed output
        env.update(
            {
                "LC_ALL": "C",
                "GIT_CONFIG_GLOBAL": null_device,
                "GIT_CONFIG_SYSTEM": null_device,
                "GIT_TERMINAL_PROMPT": "0",
                "GIT_PAGER": "cat",
                "GIT_OPTIONAL_LOCKS": "0",
            }
        )
        return env

    def to_provenance_dict(self) -> Dict[str, Any]:
        """Convert config to provenance dictionary for output."""
        return {
            "repo_path": self.repo_path,
            "baseline": {
                "remote": self.remote,
                "branch": self.branch,
            },
            "committed_only": self.committed_only,
            "header_file": self.header_file,
            "includes": list(self.includes),
            "env_locks": {
                "LC_ALL": "C",
                "color": "off",
                "core.autocrlf": "false",
                "core.quotepath": "false",
                "global_config": "ignored",
            },
        }
