"""API route registration for licensehdr."""

from fastapi import APIRouter

from . import changes, meta

router = APIRouter()
router.include_router(meta.router)
router.include_router(changes.router)

__all__ = ["router"]
