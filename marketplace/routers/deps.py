"""
Shared Dependencies for Routers

Handlers receive the cart store and the cart service through these so tests
can swap them with app.dependency_overrides. The cart service loads the
process database lazily (see marketplace.services.database.set_database);
admin routes take it through get_database_async.
"""
from fastapi import Depends

from marketplace.cart import CartService, CartStore, get_cart_store


def get_store() -> CartStore:
    """Process cart store."""
    return get_cart_store()


def get_cart_service(store: CartStore = Depends(get_store)) -> CartService:
    return CartService(store)
