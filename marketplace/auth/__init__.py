"""Authentication package: principals, credential sources, and the admin gate."""
from .principal import AdminPrincipal
from .session import SessionStore, get_session_store, set_session_store
from .sources import CredentialSource, PairCredentials, SessionCredentials
from .gate import AdminGate, build_admin_gate, verify_admin

__all__ = [
    "AdminPrincipal",
    "SessionStore",
    "get_session_store",
    "set_session_store",
    "CredentialSource",
    "PairCredentials",
    "SessionCredentials",
    "AdminGate",
    "build_admin_gate",
    "verify_admin",
]
