"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock, AsyncMock

from fastapi import Request

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")

from marketplace.auth import set_session_store
from marketplace.cart import InMemoryCartStore, set_cart_store
from marketplace.config import get_settings
from marketplace.services.database import set_database
from marketplace.services.models import DashboardStats


@pytest.fixture(autouse=True)
def reset_singletons():
    """Every test starts with fresh settings, cart store, sessions and no database."""
    get_settings.cache_clear()
    set_cart_store(None)
    set_session_store(None)
    set_database(None)
    yield
    get_settings.cache_clear()
    set_cart_store(None)
    set_session_store(None)
    set_database(None)


@pytest.fixture
def cart_store():
    """Isolated in-memory cart store"""
    return InMemoryCartStore()


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client (query builders chain, execute() is awaited)"""
    client = Mock()

    table_mock = Mock()
    for method in ("select", "insert", "update", "delete", "eq", "or_", "limit", "order", "range"):
        getattr(table_mock, method).return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[], count=0))

    client.table.return_value = table_mock
    client.rpc.return_value = table_mock

    return client


@pytest.fixture
def sample_admin():
    """Sample admins row"""
    return {
        "id": "admin-123",
        "full_name": "Medicine Store Admin",
        "email": "admin@example.com",
        "password": "hashed-secret",
        "is_active": True,
        "role": "admin",
        "permissions": ["products", "orders"],
        "department": "operations",
        "last_login": None,
        "created_at": "2025-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_product():
    """Sample products row"""
    return {
        "id": "product-123",
        "name": "Paracetamol 500mg",
        "description": "Pain relief",
        "category_id": "cat-1",
        "images": ["https://cdn.example.com/p.png"],
        "rating": 4.5,
        "variants": [{"name": "small", "price": "10"}],
        "in_stock": True,
    }


@pytest.fixture
def mock_db():
    """Mock Database facade"""
    db = Mock()
    db.get_admin_by_id = AsyncMock(return_value=None)
    db.admin_login_check = AsyncMock(return_value=None)
    db.touch_admin_login = AsyncMock()
    db.get_product_by_id = AsyncMock(return_value=None)
    db.list_users = AsyncMock(return_value=([], 0))
    db.set_user_partner_status = AsyncMock()
    db.get_dashboard_stats = AsyncMock(return_value=DashboardStats())
    return db


def make_request(cookies: dict | None = None, headers: dict | None = None) -> Request:
    """Build a bare Starlette request carrying the given cookies and headers."""
    raw_headers = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    if cookies:
        cookie_header = "; ".join(f"{k}={v}" for k, v in cookies.items())
        raw_headers.append((b"cookie", cookie_header.encode()))
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "query_string": b"",
        "headers": raw_headers,
    }
    return Request(scope)


@pytest.fixture
def request_factory():
    """Factory for bare requests: request_factory(cookies={...}, headers={...})"""
    return make_request
