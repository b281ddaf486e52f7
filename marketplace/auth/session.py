"""Admin web sessions (in-memory)."""
import secrets
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from .principal import AdminPrincipal


class SessionStore:
    """Opaque token -> session data, with expiry checked on read."""

    def __init__(self, ttl_hours: int = 168):
        self.ttl = timedelta(hours=ttl_hours)
        self._sessions: Dict[str, dict] = {}

    def create(self, principal: AdminPrincipal) -> str:
        """Create a new session and return the token."""
        token = secrets.token_urlsafe(32)
        now = datetime.now(timezone.utc)
        self._sessions[token] = {
            "principal_id": principal.id,
            "role": principal.role,
            "created_at": now.isoformat(),
            "expires_at": (now + self.ttl).isoformat(),
        }
        return token

    def get(self, token: str) -> Optional[dict]:
        """Return session data, or None if unknown or expired."""
        session = self._sessions.get(token)
        if not session:
            return None

        expires_at = datetime.fromisoformat(session["expires_at"])
        if datetime.now(timezone.utc) > expires_at:
            del self._sessions[token]
            return None

        return session

    def revoke(self, token: str) -> None:
        self._sessions.pop(token, None)


_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get the process session store."""
    global _session_store
    if _session_store is None:
        from marketplace.config import get_settings

        _session_store = SessionStore(ttl_hours=get_settings().session_ttl_hours)
    return _session_store


def set_session_store(store: Optional[SessionStore]) -> None:
    global _session_store
    _session_store = store
