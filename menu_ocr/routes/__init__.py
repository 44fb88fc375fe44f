"""HTTP routes for the menu parsing service."""

from fastapi import APIRouter

from . import menu

router = APIRouter()
router.include_router(menu.router)

__all__ = ["router"]
