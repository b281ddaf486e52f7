"""
Session cart store.

Carts live in process memory only: one dict keyed by user id, each value an
ordered list of CartLine. Nothing is persisted and a restart empties every
cart. The store is shared by all requests of a worker without locking; no
operation awaits between reading and writing a user's list, so on a single
event loop each call is atomic. Across workers carts are independent.

Usage:
    store = get_cart_store()
    lines = await store.add(user_id, product_id, 2, SelectedPackage("small", "10"))
    await store.clear(user_id)
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from marketplace.config import QuantityPolicy
from marketplace.errors import ValidationError
from marketplace.logging import get_logger, sanitize_id_for_logging

from .models import CartLine, SelectedPackage

logger = get_logger(__name__)


class CartStore(ABC):
    """Per-user cart lines with merge-on-add semantics."""

    @abstractmethod
    async def get(self, user_id: str) -> List[CartLine]:
        """Lines for the user in insertion order; empty list if unknown."""

    @abstractmethod
    async def add(
        self,
        user_id: str,
        product_id: str,
        quantity: int,
        package: SelectedPackage,
    ) -> List[CartLine]:
        """Add or merge a line and return the user's full cart."""

    @abstractmethod
    async def remove(self, user_id: str, line_id: str) -> List[CartLine]:
        """Drop one line (no-op if absent) and return the user's cart."""

    @abstractmethod
    async def update(self, user_id: str, line_id: str, quantity: int) -> Optional[CartLine]:
        """Replace a line's quantity; None if the user has no such line."""

    @abstractmethod
    async def clear(self, user_id: str) -> None:
        """Remove every line of the user."""


class InMemoryCartStore(CartStore):
    """
    Dict-backed cart store.

    Args:
        zero_quantity_policy: what update() does with quantity <= 0
        max_line_quantity: optional cap on a line's accumulated quantity;
            None leaves it unbounded
    """

    def __init__(
        self,
        zero_quantity_policy: QuantityPolicy = QuantityPolicy.ACCEPT,
        max_line_quantity: Optional[int] = None,
    ):
        self._carts: Dict[str, List[CartLine]] = {}
        self.zero_quantity_policy = zero_quantity_policy
        self.max_line_quantity = max_line_quantity

    def _check_limit(self, quantity: int) -> None:
        if self.max_line_quantity is not None and quantity > self.max_line_quantity:
            raise ValidationError(
                f"quantity must not exceed {self.max_line_quantity}",
                errors=[{"field": "quantity", "message": "Quantity limit exceeded", "code": "too_big"}],
            )

    async def get(self, user_id: str) -> List[CartLine]:
        return list(self._carts.get(user_id, []))

    async def add(
        self,
        user_id: str,
        product_id: str,
        quantity: int,
        package: SelectedPackage,
    ) -> List[CartLine]:
        user_cart = self._carts.get(user_id, [])

        existing = next(
            (line for line in user_cart if line.matches(product_id, package.name)),
            None,
        )

        if existing:
            new_quantity = existing.quantity + quantity
            self._check_limit(new_quantity)
            existing.quantity = new_quantity
            logger.debug(
                "Merged cart line %s for user %s (quantity=%s)",
                existing.id, sanitize_id_for_logging(user_id), new_quantity,
            )
        else:
            self._check_limit(quantity)
            line = CartLine(
                user_id=user_id,
                product_id=product_id,
                quantity=quantity,
                selected_package=package,
            )
            user_cart.append(line)
            self._carts[user_id] = user_cart
            logger.debug("Added cart line %s for user %s", line.id, sanitize_id_for_logging(user_id))

        return list(user_cart)

    async def remove(self, user_id: str, line_id: str) -> List[CartLine]:
        user_cart = self._carts.get(user_id)
        if not user_cart:
            return []
        updated = [line for line in user_cart if line.id != line_id]
        self._carts[user_id] = updated
        return list(updated)

    async def update(self, user_id: str, line_id: str, quantity: int) -> Optional[CartLine]:
        user_cart = self._carts.get(user_id, [])
        line = next((item for item in user_cart if item.id == line_id), None)
        if line is None:
            return None

        if quantity <= 0:
            if self.zero_quantity_policy == QuantityPolicy.REJECT:
                raise ValidationError(
                    "quantity must be a positive integer",
                    errors=[{"field": "quantity", "message": "Must be greater than 0", "code": "too_small"}],
                )
            if self.zero_quantity_policy == QuantityPolicy.REMOVE:
                self._carts[user_id] = [item for item in user_cart if item.id != line_id]
                line.quantity = quantity
                logger.debug("Removed cart line %s on zero quantity", line_id)
                return line
        else:
            self._check_limit(quantity)

        line.quantity = quantity
        return line

    async def clear(self, user_id: str) -> None:
        self._carts.pop(user_id, None)
        logger.debug("Cleared cart for user %s", sanitize_id_for_logging(user_id))


# Process-wide instance
_cart_store: Optional[CartStore] = None


def get_cart_store() -> CartStore:
    """Get the process cart store, creating it from settings on first use."""
    global _cart_store
    if _cart_store is None:
        from marketplace.config import get_settings

        settings = get_settings()
        _cart_store = InMemoryCartStore(
            zero_quantity_policy=settings.zero_quantity_policy,
            max_line_quantity=settings.max_line_quantity,
        )
    return _cart_store


def set_cart_store(store: Optional[CartStore]) -> None:
    """Replace the process cart store (None resets to lazy creation)."""
    global _cart_store
    _cart_store = store
