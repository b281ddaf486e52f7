"""
Supabase client.

Provides a lazily created async Supabase client for the storage facade.
Credentials come from SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY.
"""

from typing import Optional

from supabase._async.client import AsyncClient, create_client as acreate_client

from marketplace.config import get_settings

_async_supabase_client: Optional[AsyncClient] = None


async def get_supabase() -> AsyncClient:
    """Get async Supabase client (singleton)."""
    global _async_supabase_client

    if _async_supabase_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        _async_supabase_client = await acreate_client(
            settings.supabase_url, settings.supabase_service_role_key
        )

    return _async_supabase_client
