"""
Admin gate.

Usage:
    @router.get("/users")
    async def admin_get_users(admin: AdminPrincipal = Depends(verify_admin)):
        ...
"""
from typing import Iterable

from fastapi import Depends, Request

from marketplace.config import AdminAuthMode, get_settings
from marketplace.errors import ERROR_FORBIDDEN, ERROR_UNAUTHORIZED, Forbidden, Unauthorized
from marketplace.logging import get_logger, sanitize_id_for_logging
from marketplace.services.database import Database, get_database_async

from .principal import AdminPrincipal
from .session import get_session_store
from .sources import CredentialSource, PairCredentials, SessionCredentials

logger = get_logger(__name__)


class AdminGate:
    """
    Lets a request through only for an active principal with an elevated role.

    Unauthorized: nothing resolved, or the principal is disabled.
    Forbidden: resolved and active, but the role is not elevated.
    """

    def __init__(self, source: CredentialSource, elevated_roles: Iterable[str]):
        self.source = source
        self.elevated_roles = frozenset(elevated_roles)

    async def check(self, request: Request) -> AdminPrincipal:
        principal = await self.source.resolve(request)

        if not principal.is_active:
            logger.warning("Admin gate: principal %s is disabled", sanitize_id_for_logging(principal.id))
            raise Unauthorized(ERROR_UNAUTHORIZED)

        if not principal.is_elevated(self.elevated_roles):
            logger.warning(
                "Admin gate: principal %s has role %r, admin required",
                sanitize_id_for_logging(principal.id), principal.role,
            )
            raise Forbidden(ERROR_FORBIDDEN)

        return principal


def build_admin_gate(db: Database) -> AdminGate:
    """Gate for the configured ADMIN_AUTH_MODE."""
    settings = get_settings()

    if settings.admin_auth_mode == AdminAuthMode.SESSION:
        source: CredentialSource = SessionCredentials(db, get_session_store())
    else:
        source = PairCredentials(db)

    return AdminGate(source, settings.elevated_roles)


async def verify_admin(
    request: Request,
    db: Database = Depends(get_database_async),
) -> AdminPrincipal:
    """FastAPI dependency: the gated principal, or Unauthorized/Forbidden."""
    gate = build_admin_gate(db)
    return await gate.check(request)
