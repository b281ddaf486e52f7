"""Admin Repository - admins table lookups and login."""

from datetime import UTC, datetime

from marketplace.logging import get_logger
from marketplace.services.models import AdminUser

from .base import BaseRepository

logger = get_logger(__name__)


class AdminRepository(BaseRepository):
    """Admin database operations."""

    async def get_by_id(self, admin_id: str) -> AdminUser | None:
        """Get admin by ID."""
        result = await self.client.table("admins").select("*").eq("id", admin_id).limit(1).execute()
        return AdminUser(**result.data[0]) if result.data else None

    async def login_check(self, email: str, password: str) -> AdminUser | None:
        """Check admin credentials via the admin_login_check database function.

        Password hashing and comparison happen inside the database.
        """
        result = await self.client.rpc(
            "admin_login_check", {"p_email": email, "p_password": password}
        ).execute()
        if not result.data:
            return None
        return AdminUser(**result.data[0])

    async def touch_last_login(self, admin_id: str) -> None:
        """Record a successful login."""
        await (
            self.client.table("admins")
            .update({"last_login": datetime.now(UTC).isoformat()})
            .eq("id", admin_id)
            .execute()
        )
