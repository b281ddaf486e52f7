"""Cart package: line models, session store, and product enrichment."""
from .models import CartLine, SelectedPackage
from .store import CartStore, InMemoryCartStore, get_cart_store, set_cart_store
from .service import CartService

__all__ = [
    "CartLine",
    "SelectedPackage",
    "CartStore",
    "InMemoryCartStore",
    "get_cart_store",
    "set_cart_store",
    "CartService",
]
