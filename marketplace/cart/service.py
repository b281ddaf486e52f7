"""Cart service: cart store lines enriched with product data."""
import asyncio
from typing import List, Optional

from marketplace.logging import get_logger, sanitize_id_for_logging
from marketplace.services.database import Database, get_database_async

from .models import CartLine
from .store import CartStore

logger = get_logger(__name__)


class CartService:
    """
    Reads and mutates a CartStore and renders lines for the storefront.

    Each rendered line is CartLine.to_dict() plus a "product" key when the
    product still exists. Lines whose product is gone are returned as-is.

    The database is only reached when there is something to render; without
    an explicit `db` the process database is loaded on first use.
    """

    def __init__(self, store: CartStore, db: Optional[Database] = None):
        self.store = store
        self._db = db

    async def database(self) -> Database:
        if self._db is None:
            self._db = await get_database_async()
        return self._db

    async def render(self, lines: List[CartLine]) -> List[dict]:
        """Attach product details to each line (lookups run concurrently)."""
        if not lines:
            return []

        db = await self.database()
        products = await asyncio.gather(*[db.get_product_by_id(line.product_id) for line in lines])

        rendered = []
        for line, product in zip(lines, products):
            item = line.to_dict()
            if product:
                item["product"] = product.to_cart_dict()
            else:
                logger.debug("Product %s missing for cart line %s", sanitize_id_for_logging(line.product_id), line.id)
            rendered.append(item)
        return rendered

    async def get_cart(self, user_id: str) -> List[dict]:
        return await self.render(await self.store.get(user_id))
