"""User Repository - marketplace users as seen by the admin panel."""

from marketplace.logging import get_logger, sanitize_string_for_logging
from marketplace.services.models import MarketplaceUser

from .base import BaseRepository

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """User database operations."""

    async def list_users(
        self, page: int = 1, limit: int = 50, search: str = ""
    ) -> tuple[list[MarketplaceUser], int]:
        """Page through users, newest first. Returns (users, total matching)."""
        offset = (page - 1) * limit
        query = self.client.table("users").select("*", count="exact")

        if search:
            # PostgREST or-filter; commas and parens would split the expression
            term = search.replace(",", " ").replace("(", " ").replace(")", " ").strip()
            logger.debug("Searching users for %s", sanitize_string_for_logging(term))
            query = query.or_(
                f"email.ilike.%{term}%,full_name.ilike.%{term}%,phone_number.ilike.%{term}%"
            )

        result = await query.order("created_at", desc=True).range(offset, offset + limit - 1).execute()
        users = [MarketplaceUser(**row) for row in (result.data or [])]
        return users, result.count or 0

    async def count(self) -> int:
        result = await self.client.table("users").select("id", count="exact").execute()
        return result.count or 0

    async def set_partner_status(self, user_id: str, is_active: bool) -> None:
        """Turn a user's partner status on or off."""
        await (
            self.client.table("users")
            .update({"is_partner": is_active})
            .eq("id", user_id)
            .execute()
        )
