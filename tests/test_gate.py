"""Tests for the admin gate and its credential sources"""
from datetime import datetime, timedelta, timezone

import pytest

from marketplace.auth import (
    AdminGate,
    AdminPrincipal,
    PairCredentials,
    SessionCredentials,
    SessionStore,
    build_admin_gate,
)
from marketplace.errors import Forbidden, Unauthorized
from marketplace.services.models import AdminUser

ELEVATED = {"admin", "super_admin"}


def _admin(sample_admin, **overrides) -> AdminUser:
    return AdminUser(**{**sample_admin, **overrides})


def _pair_cookies(admin_id="admin-123", email="admin@example.com"):
    cookies = {}
    if admin_id is not None:
        cookies["admin-id"] = admin_id
    if email is not None:
        cookies["admin-email"] = email
    return cookies


# ==================== PAIR CREDENTIALS ====================

class TestPairCredentials:

    @pytest.mark.asyncio
    async def test_valid_pair_passes(self, mock_db, sample_admin, request_factory):
        mock_db.get_admin_by_id.return_value = _admin(sample_admin)
        gate = AdminGate(PairCredentials(mock_db), ELEVATED)

        principal = await gate.check(request_factory(cookies=_pair_cookies()))

        assert principal.id == "admin-123"
        assert principal.email == "admin@example.com"
        mock_db.get_admin_by_id.assert_awaited_once_with("admin-123")

    @pytest.mark.asyncio
    async def test_missing_id_cookie(self, mock_db, sample_admin, request_factory):
        mock_db.get_admin_by_id.return_value = _admin(sample_admin)
        gate = AdminGate(PairCredentials(mock_db), ELEVATED)

        with pytest.raises(Unauthorized):
            await gate.check(request_factory(cookies=_pair_cookies(admin_id=None)))
        mock_db.get_admin_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_email_cookie(self, mock_db, sample_admin, request_factory):
        mock_db.get_admin_by_id.return_value = _admin(sample_admin)
        gate = AdminGate(PairCredentials(mock_db), ELEVATED)

        with pytest.raises(Unauthorized):
            await gate.check(request_factory(cookies=_pair_cookies(email=None)))

    @pytest.mark.asyncio
    async def test_principal_not_found(self, mock_db, request_factory):
        mock_db.get_admin_by_id.return_value = None
        gate = AdminGate(PairCredentials(mock_db), ELEVATED)

        with pytest.raises(Unauthorized):
            await gate.check(request_factory(cookies=_pair_cookies()))

    @pytest.mark.asyncio
    async def test_email_mismatch(self, mock_db, sample_admin, request_factory):
        mock_db.get_admin_by_id.return_value = _admin(sample_admin)
        gate = AdminGate(PairCredentials(mock_db), ELEVATED)

        with pytest.raises(Unauthorized):
            await gate.check(request_factory(cookies=_pair_cookies(email="someone@example.com")))

    @pytest.mark.asyncio
    async def test_email_match_is_exact(self, mock_db, sample_admin, request_factory):
        mock_db.get_admin_by_id.return_value = _admin(sample_admin)
        gate = AdminGate(PairCredentials(mock_db), ELEVATED)

        with pytest.raises(Unauthorized):
            await gate.check(request_factory(cookies=_pair_cookies(email="ADMIN@example.com")))

    @pytest.mark.asyncio
    async def test_inactive_admin(self, mock_db, sample_admin, request_factory):
        mock_db.get_admin_by_id.return_value = _admin(sample_admin, is_active=False)
        gate = AdminGate(PairCredentials(mock_db), ELEVATED)

        with pytest.raises(Unauthorized):
            await gate.check(request_factory(cookies=_pair_cookies()))

    @pytest.mark.asyncio
    async def test_non_elevated_role_is_forbidden(self, mock_db, sample_admin, request_factory):
        mock_db.get_admin_by_id.return_value = _admin(sample_admin, role="manager")
        gate = AdminGate(PairCredentials(mock_db), ELEVATED)

        with pytest.raises(Forbidden):
            await gate.check(request_factory(cookies=_pair_cookies()))


# ==================== SESSION CREDENTIALS ====================

class TestSessionCredentials:

    @pytest.mark.asyncio
    async def test_bearer_token_passes(self, mock_db, sample_admin, request_factory):
        admin = _admin(sample_admin)
        mock_db.get_admin_by_id.return_value = admin
        sessions = SessionStore()
        token = sessions.create(AdminPrincipal.from_admin(admin))
        gate = AdminGate(SessionCredentials(mock_db, sessions), ELEVATED)

        principal = await gate.check(request_factory(headers={"Authorization": f"Bearer {token}"}))

        assert principal.id == "admin-123"

    @pytest.mark.asyncio
    async def test_session_cookie_passes(self, mock_db, sample_admin, request_factory):
        admin = _admin(sample_admin)
        mock_db.get_admin_by_id.return_value = admin
        sessions = SessionStore()
        token = sessions.create(AdminPrincipal.from_admin(admin))
        gate = AdminGate(SessionCredentials(mock_db, sessions), ELEVATED)

        principal = await gate.check(request_factory(cookies={"admin-session": token}))

        assert principal.role == "admin"

    @pytest.mark.asyncio
    async def test_no_token_is_unauthorized(self, mock_db, request_factory):
        gate = AdminGate(SessionCredentials(mock_db, SessionStore()), ELEVATED)

        with pytest.raises(Unauthorized):
            await gate.check(request_factory())

    @pytest.mark.asyncio
    async def test_unknown_token_is_unauthorized(self, mock_db, request_factory):
        gate = AdminGate(SessionCredentials(mock_db, SessionStore()), ELEVATED)

        with pytest.raises(Unauthorized):
            await gate.check(request_factory(headers={"Authorization": "Bearer nope"}))

    @pytest.mark.asyncio
    async def test_principal_gone_is_unauthorized(self, mock_db, sample_admin, request_factory):
        sessions = SessionStore()
        token = sessions.create(AdminPrincipal.from_admin(_admin(sample_admin)))
        mock_db.get_admin_by_id.return_value = None
        gate = AdminGate(SessionCredentials(mock_db, sessions), ELEVATED)

        with pytest.raises(Unauthorized):
            await gate.check(request_factory(headers={"Authorization": f"Bearer {token}"}))

    @pytest.mark.asyncio
    async def test_non_elevated_role_is_forbidden_not_unauthorized(self, mock_db, sample_admin, request_factory):
        staff = _admin(sample_admin, role="user")
        mock_db.get_admin_by_id.return_value = staff
        sessions = SessionStore()
        token = sessions.create(AdminPrincipal.from_admin(staff))
        gate = AdminGate(SessionCredentials(mock_db, sessions), ELEVATED)

        with pytest.raises(Forbidden):
            await gate.check(request_factory(headers={"Authorization": f"Bearer {token}"}))

    @pytest.mark.asyncio
    async def test_role_is_read_fresh_each_request(self, mock_db, sample_admin, request_factory):
        sessions = SessionStore()
        token = sessions.create(AdminPrincipal.from_admin(_admin(sample_admin)))
        # Demoted after the session was created
        mock_db.get_admin_by_id.return_value = _admin(sample_admin, role="manager")
        gate = AdminGate(SessionCredentials(mock_db, sessions), ELEVATED)

        with pytest.raises(Forbidden):
            await gate.check(request_factory(headers={"Authorization": f"Bearer {token}"}))

    @pytest.mark.asyncio
    async def test_inactive_principal_is_unauthorized(self, mock_db, sample_admin, request_factory):
        admin = _admin(sample_admin, is_active=False)
        mock_db.get_admin_by_id.return_value = admin
        sessions = SessionStore()
        token = sessions.create(AdminPrincipal.from_admin(admin))
        gate = AdminGate(SessionCredentials(mock_db, sessions), ELEVATED)

        with pytest.raises(Unauthorized):
            await gate.check(request_factory(headers={"Authorization": f"Bearer {token}"}))


# ==================== SESSION STORE ====================

class TestSessionStore:

    def test_expired_session_is_evicted(self, sample_admin):
        sessions = SessionStore(ttl_hours=1)
        token = sessions.create(AdminPrincipal.from_admin(_admin(sample_admin)))
        past = datetime.now(timezone.utc) - timedelta(minutes=1)
        sessions._sessions[token]["expires_at"] = past.isoformat()

        assert sessions.get(token) is None
        assert token not in sessions._sessions

    def test_revoke(self, sample_admin):
        sessions = SessionStore()
        token = sessions.create(AdminPrincipal.from_admin(_admin(sample_admin)))

        sessions.revoke(token)

        assert sessions.get(token) is None


# ==================== GATE FACTORY ====================

class TestBuildAdminGate:

    def test_cookie_mode_by_default(self, mock_db):
        gate = build_admin_gate(mock_db)

        assert isinstance(gate.source, PairCredentials)
        assert gate.elevated_roles == frozenset({"admin", "super_admin"})

    def test_session_mode(self, mock_db, monkeypatch):
        monkeypatch.setenv("ADMIN_AUTH_MODE", "session")
        monkeypatch.setenv("ADMIN_ELEVATED_ROLES", "admin, owner")

        gate = build_admin_gate(mock_db)

        assert isinstance(gate.source, SessionCredentials)
        assert gate.elevated_roles == frozenset({"admin", "owner"})

    def test_unknown_mode_is_rejected(self, mock_db, monkeypatch):
        monkeypatch.setenv("ADMIN_AUTH_MODE", "magic")

        with pytest.raises(ValueError, match="ADMIN_AUTH_MODE"):
            build_admin_gate(mock_db)
