"""
FastAPI Routers Package

All routers are included in api/index.py.
"""

from marketplace.routers.admin import router as admin_router
from marketplace.routers.cart import router as cart_router

__all__ = ["admin_router", "cart_router"]
