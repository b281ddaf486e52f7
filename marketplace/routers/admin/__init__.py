"""
Admin API Router

Combines admin sub-routers into a single router with tag "admin".
Everything except login/logout goes through the admin gate.
"""
from fastapi import APIRouter

from .auth import router as auth_router
from .dashboard import router as dashboard_router
from .users import router as users_router

router = APIRouter(tags=["admin"])

router.include_router(auth_router)
router.include_router(dashboard_router)
router.include_router(users_router)

__all__ = ["router"]
