"""Pydantic models for licensehdr API requests and responses."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


def validate_repo_path(value: str) -> str:
    """Strip ``value`` and require an absolute path."""
    value = value.strip()
    if not value:
        raise ValueError("repo_path cannot be empty")
    if not (value.startswith("/") or (len(value) > 2 and value[1] == ":")):
        raise ValueError("repo_path must be an absolute path")
    return value


class ChangesRequest(BaseModel):
    """Request model for the changes endpoint."""

    repo_path: str = Field(
        ...,
        description="Absolute path of the git working tree's top level directory",
        examples=["/srv/checkouts/project"],
    )
    remote: Optional[str] = Field(
        None,
        description="Baseline remote name, defaults to the configured baseline",
        examples=["origin"],
    )
    branch: Optional[str] = Field(
        None,
        description="Baseline branch name, defaults to the configured baseline",
        examples=["main"],
    )
    committed_only: bool = Field(
        False,
        description="Ignore the working tree, report only commits ahead of the baseline",
    )

    @field_validator("repo_path")
    @classmethod
    def repo_path_must_be_absolute(cls, v):
        """Basic validation for the repository path."""
        return validate_repo_path(v)

    @field_validator("remote", "branch")
    @classmethod
    def ref_name_must_be_valid(cls, v):
        """Reject names git would not accept as a remote-tracking reference."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("reference name cannot be empty")
        if any(ch.isspace() for ch in v) or ".." in v:
            raise ValueError("reference name cannot contain whitespace or '..'")
        return v


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["1.0.0"])
    repo_path: Optional[str] = Field(
        None,
        description="Working tree checked, when one was given",
        examples=["/srv/checkouts/project"],
    )
    repository_ok: Optional[bool] = Field(None, examples=[True])
    error: Optional[Dict[str, Any]] = Field(
        None, description="Error raised while querying the working tree"
    )


class Baseline(BaseModel):
    """Remote-tracking branch changes are compared against."""

    remote: str = Field(..., examples=["origin"])
    branch: str = Field(..., examples=["master"])


class VersionResponse(BaseModel):
    """Response model for version endpoint."""

    version: str = Field(..., examples=["1.0.0"])
    api_version: str = Field(..., examples=["v1"])
    default_baseline: Baseline
    supported_features: List[str] = Field(
        default_factory=lambda: [
            "committed_changes",
            "uncommitted_changes",
            "rename_detection",
            "copyright_years",
        ]
    )
