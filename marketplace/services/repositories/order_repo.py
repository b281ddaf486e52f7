"""Order Repository - order and payment figures for the admin dashboard."""
from typing import Optional

from marketplace.services.models import OrderSummary

from .base import BaseRepository

RECENT_ORDER_COLUMNS = "id, user_id, status, total_price, payment_method, created_at, users(full_name, email)"


class OrderRepository(BaseRepository):
    """Read-only order queries."""

    async def _count(self, table: str, status: Optional[str]) -> int:
        query = self.client.table(table).select("id", count="exact")
        if status:
            query = query.eq("status", status)
        result = await query.execute()
        return result.count or 0

    async def count(self, status: Optional[str] = None) -> int:
        """Count orders, optionally only those in one status."""
        return await self._count("orders", status)

    async def count_payment_requests(self, status: Optional[str] = None) -> int:
        return await self._count("payment_requests", status)

    async def revenue(self, status: str = "delivered") -> float:
        """Sum of total_price over orders in the given status."""
        result = await self.client.table("orders").select("total_price").eq("status", status).execute()
        return sum(float(row.get("total_price") or 0) for row in (result.data or []))

    async def get_recent(self, limit: int = 10) -> list[OrderSummary]:
        """Newest orders first, joined with the ordering user."""
        result = await (
            self.client.table("orders")
            .select(RECENT_ORDER_COLUMNS)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [OrderSummary.from_row(row) for row in (result.data or [])]
