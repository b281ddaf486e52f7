"""
Supabase Database Service

Provides Database class with the operations the API needs, delegating to
repositories.

Usage:
    from marketplace.services.database import get_database

    # At FastAPI startup (lifespan) or lazily:
    await init_database()

    db = get_database()
    product = await db.get_product_by_id("...")
"""

import asyncio
from typing import Optional

from supabase._async.client import AsyncClient

from marketplace.db import get_supabase
from marketplace.logging import get_logger
from marketplace.services.models import AdminUser, DashboardStats, MarketplaceUser, Product
from marketplace.services.repositories import (
    AdminRepository,
    OrderRepository,
    ProductRepository,
    UserRepository,
)

logger = get_logger(__name__)


class Database:
    """
    Supabase storage facade.

    Must be built from an AsyncClient, either directly (tests) or through
    init_database().
    """

    def __init__(self, client: AsyncClient):
        self.client = client
        self._admins_repo = AdminRepository(self.client)
        self._orders_repo = OrderRepository(self.client)
        self._products_repo = ProductRepository(self.client)
        self._users_repo = UserRepository(self.client)

    @classmethod
    async def create(cls) -> "Database":
        """Async factory method: connect and build repositories."""
        client = await get_supabase()
        return cls(client)

    # ==================== ADMIN OPERATIONS ====================

    async def get_admin_by_id(self, admin_id: str) -> AdminUser | None:
        return await self._admins_repo.get_by_id(admin_id)

    async def admin_login_check(self, email: str, password: str) -> AdminUser | None:
        return await self._admins_repo.login_check(email, password)

    async def touch_admin_login(self, admin_id: str) -> None:
        await self._admins_repo.touch_last_login(admin_id)

    # ==================== PRODUCT OPERATIONS ====================

    async def get_product_by_id(self, product_id: str) -> Product | None:
        return await self._products_repo.get_by_id(product_id)

    # ==================== USER OPERATIONS ====================

    async def list_users(
        self, page: int = 1, limit: int = 50, search: str = ""
    ) -> tuple[list[MarketplaceUser], int]:
        return await self._users_repo.list_users(page, limit, search)

    async def set_user_partner_status(self, user_id: str, is_active: bool) -> None:
        await self._users_repo.set_partner_status(user_id, is_active)

    # ==================== DASHBOARD ====================

    async def get_dashboard_stats(self, recent_limit: int = 10) -> DashboardStats:
        """Headline figures for the admin dashboard; the queries run concurrently."""
        (
            total_users,
            total_orders,
            total_revenue,
            pending_orders,
            pending_payments,
            recent_orders,
        ) = await asyncio.gather(
            self._users_repo.count(),
            self._orders_repo.count(),
            self._orders_repo.revenue("delivered"),
            self._orders_repo.count("pending"),
            self._orders_repo.count_payment_requests("pending"),
            self._orders_repo.get_recent(recent_limit),
        )
        return DashboardStats(
            total_users=total_users,
            total_orders=total_orders,
            total_revenue=total_revenue,
            pending_orders=pending_orders,
            pending_payments=pending_payments,
            recent_orders=recent_orders,
        )


# ==================== SINGLETON ====================

_db: Database | None = None
_db_lock: Optional[asyncio.Lock] = None


def _get_lock() -> asyncio.Lock:
    global _db_lock
    if _db_lock is None:
        _db_lock = asyncio.Lock()
    return _db_lock


async def init_database() -> Database:
    """Initialize the database singleton (idempotent)."""
    global _db
    if _db is not None:
        return _db

    async with _get_lock():
        if _db is None:
            logger.info("Initializing async Supabase client...")
            _db = await Database.create()
            logger.info("Async Supabase client initialized successfully")
    return _db


async def get_database_async() -> Database:
    """Get database instance, initializing it on first use."""
    if _db is None:
        return await init_database()
    return _db


def get_database() -> Database:
    """Get database instance (sync accessor).

    Raises:
        RuntimeError: If init_database() has not run
    """
    if _db is None:
        raise RuntimeError(
            "Database not initialized. Use 'await get_database_async()' for lazy init, "
            "or call 'await init_database()' at startup."
        )
    return _db


def set_database(db: Database | None) -> None:
    """Replace the singleton (tests, or None to force re-initialization)."""
    global _db
    _db = db
