"""
Credential sources for the admin gate.

A source turns request-scoped evidence into an AdminPrincipal or raises
Unauthorized. Role checks are left to AdminGate so both sources share one
failure taxonomy.

- PairCredentials: admin-id + admin-email cookies, checked against the admins table
- SessionCredentials: opaque session token (Bearer header or admin-session cookie)
"""
from abc import ABC, abstractmethod
from typing import Optional

from fastapi import Request

from marketplace.config import ADMIN_EMAIL_COOKIE, ADMIN_ID_COOKIE, ADMIN_SESSION_COOKIE
from marketplace.errors import ERROR_NOT_AUTHENTICATED, ERROR_UNAUTHORIZED, Unauthorized
from marketplace.logging import get_logger, sanitize_id_for_logging

from .principal import AdminPrincipal
from .session import SessionStore

logger = get_logger(__name__)


class CredentialSource(ABC):
    """Resolves the caller of a privileged request."""

    def __init__(self, db):
        # Anything with `async get_admin_by_id(id) -> AdminUser | None`
        self.db = db

    async def _load(self, principal_id: str) -> Optional[AdminPrincipal]:
        admin = await self.db.get_admin_by_id(principal_id)
        return AdminPrincipal.from_admin(admin) if admin else None

    @abstractmethod
    async def resolve(self, request: Request) -> AdminPrincipal:
        """Return the principal or raise Unauthorized."""


class PairCredentials(CredentialSource):
    """
    Identifier + secondary value pair carried in cookies.

    Every failure (missing value, unknown id, email mismatch, inactive
    admin) surfaces as the same Unauthorized; only the log says which.
    """

    def __init__(self, db, id_cookie: str = ADMIN_ID_COOKIE, email_cookie: str = ADMIN_EMAIL_COOKIE):
        super().__init__(db)
        self.id_cookie = id_cookie
        self.email_cookie = email_cookie

    async def resolve(self, request: Request) -> AdminPrincipal:
        admin_id = request.cookies.get(self.id_cookie)
        admin_email = request.cookies.get(self.email_cookie)

        if not admin_id or not admin_email:
            logger.warning(
                "Admin verification failed: missing cookies (id=%s, email=%s)",
                bool(admin_id), bool(admin_email),
            )
            raise Unauthorized(ERROR_UNAUTHORIZED)

        principal = await self._load(admin_id)
        if principal is None:
            logger.warning("Admin verification failed: admin %s not found", sanitize_id_for_logging(admin_id))
            raise Unauthorized(ERROR_UNAUTHORIZED)

        if principal.email != admin_email:
            logger.warning("Admin verification failed: email mismatch")
            raise Unauthorized(ERROR_UNAUTHORIZED)

        if not principal.is_active:
            logger.warning("Admin verification failed: admin %s not active", sanitize_id_for_logging(admin_id))
            raise Unauthorized(ERROR_UNAUTHORIZED)

        return principal


class SessionCredentials(CredentialSource):
    """Opaque session token looked up in a SessionStore."""

    def __init__(self, db, sessions: SessionStore, cookie_name: str = ADMIN_SESSION_COOKIE):
        super().__init__(db)
        self.sessions = sessions
        self.cookie_name = cookie_name

    def _token(self, request: Request) -> Optional[str]:
        authorization = request.headers.get("Authorization")
        if authorization:
            parts = authorization.split(" ")
            if len(parts) == 2 and parts[0].lower() == "bearer":
                return parts[1]
        return request.cookies.get(self.cookie_name)

    async def resolve(self, request: Request) -> AdminPrincipal:
        token = self._token(request)
        if not token:
            raise Unauthorized(ERROR_NOT_AUTHENTICATED)

        session = self.sessions.get(token)
        if not session:
            logger.warning("Admin verification failed: invalid or expired session")
            raise Unauthorized(ERROR_NOT_AUTHENTICATED)

        principal = await self._load(session["principal_id"])
        if principal is None:
            logger.warning(
                "Admin verification failed: session principal %s not found",
                sanitize_id_for_logging(session["principal_id"]),
            )
            raise Unauthorized(ERROR_NOT_AUTHENTICATED)

        return principal
