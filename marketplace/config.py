"""
Runtime configuration from environment variables.

Usage:
    from marketplace.config import get_settings
    settings = get_settings()
    if settings.admin_auth_mode == AdminAuthMode.SESSION: ...

get_settings() is cached; tests call get_settings.cache_clear() after
changing the environment.
"""
import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import FrozenSet, Optional


class QuantityPolicy(str, Enum):
    """
    What a cart update does with a quantity of zero or less.

    - accept: store the value as given
    - reject: raise ValidationError
    - remove: drop the line
    """
    ACCEPT = "accept"
    REJECT = "reject"
    REMOVE = "remove"


class AdminAuthMode(str, Enum):
    """Which request evidence the admin gate reads."""
    COOKIE = "cookie"    # admin-id + admin-email cookie pair
    SESSION = "session"  # opaque session token


# Cookie names shared by the login route and the credential sources
ADMIN_ID_COOKIE = "admin-id"
ADMIN_EMAIL_COOKIE = "admin-email"
ADMIN_SESSION_COOKIE = "admin-session"

DEFAULT_ELEVATED_ROLES = "admin,super_admin"


@dataclass(frozen=True)
class Settings:
    supabase_url: str
    supabase_service_role_key: str
    admin_auth_mode: AdminAuthMode
    elevated_roles: FrozenSet[str]
    session_ttl_hours: int
    zero_quantity_policy: QuantityPolicy
    max_line_quantity: Optional[int]


def _parse_enum(enum_cls, env_name: str, default: str):
    raw = os.environ.get(env_name, default).strip().lower()
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"{env_name} must be one of: {allowed} (got {raw!r})")


def _parse_int(env_name: str, default: Optional[int], minimum: int) -> Optional[int]:
    raw = os.environ.get(env_name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{env_name} must be an integer (got {raw!r})")
    if value < minimum:
        raise ValueError(f"{env_name} must be >= {minimum} (got {value})")
    return value


def _parse_roles(env_name: str) -> FrozenSet[str]:
    raw = os.environ.get(env_name, DEFAULT_ELEVATED_ROLES)
    roles = frozenset(role.strip() for role in raw.split(",") if role.strip())
    if not roles:
        raise ValueError(f"{env_name} must name at least one role")
    return roles


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings from the current environment (cached)."""
    return Settings(
        supabase_url=os.environ.get("SUPABASE_URL", ""),
        supabase_service_role_key=os.environ.get("SUPABASE_SERVICE_ROLE_KEY", ""),
        admin_auth_mode=_parse_enum(AdminAuthMode, "ADMIN_AUTH_MODE", AdminAuthMode.COOKIE.value),
        elevated_roles=_parse_roles("ADMIN_ELEVATED_ROLES"),
        session_ttl_hours=_parse_int("ADMIN_SESSION_TTL_HOURS", 168, minimum=1),
        zero_quantity_policy=_parse_enum(
            QuantityPolicy, "CART_ZERO_QUANTITY_POLICY", QuantityPolicy.ACCEPT.value
        ),
        # No upper bound unless the host sets one
        max_line_quantity=_parse_int("CART_MAX_LINE_QUANTITY", None, minimum=1),
    )
