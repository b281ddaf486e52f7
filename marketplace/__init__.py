"""
Medicine Marketplace Core Package

This package contains the marketplace API building blocks:
- cart: in-memory session cart store and product enrichment
- auth: admin gate with pluggable credential sources
- db: Supabase client
- services: storage facade (repositories + Database)
- routers: FastAPI routers mounted by api/index.py

Note: Imports are lazy to keep module loading cheap in serverless environments.
"""

__all__ = [
    "get_supabase",
    "get_cart_store",
    "get_database",
]


def __getattr__(name):
    """Lazy attribute access for clean serverless loading."""
    if name == "get_supabase":
        from marketplace.db import get_supabase
        return get_supabase
    if name == "get_cart_store":
        from marketplace.cart import get_cart_store
        return get_cart_store
    if name == "get_database":
        from marketplace.services.database import get_database
        return get_database
    raise AttributeError(f"module 'marketplace' has no attribute '{name}'")
