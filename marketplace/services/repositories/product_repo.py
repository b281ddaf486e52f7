"""Product Repository - Product catalog lookups."""
from typing import Optional

from marketplace.services.models import Product

from .base import BaseRepository


class ProductRepository(BaseRepository):
    """Product database operations."""

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        result = await self.client.table("products").select("*").eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None
