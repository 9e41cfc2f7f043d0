"""Service layer for the licensehdr API."""

from .changes import ChangeService

__all__ = ["ChangeService"]
