"""
Admin Auth Router

Login sets both kinds of evidence the gate understands: the admin-id /
admin-email cookie pair and an opaque session token (returned in the body
and set as the admin-session cookie).
"""
from fastapi import APIRouter, Depends, Request, Response

from marketplace.auth import AdminPrincipal, get_session_store, verify_admin
from marketplace.config import ADMIN_EMAIL_COOKIE, ADMIN_ID_COOKIE, ADMIN_SESSION_COOKIE, get_settings
from marketplace.errors import ERROR_INVALID_CREDENTIALS, Unauthorized
from marketplace.logging import get_logger, sanitize_id_for_logging
from marketplace.routers.models import AdminLoginRequest
from marketplace.services.database import Database, get_database_async

logger = get_logger(__name__)

router = APIRouter(tags=["admin-auth"])


@router.post("/login")
async def admin_login(
    request: AdminLoginRequest,
    response: Response,
    db: Database = Depends(get_database_async),
):
    """Check credentials and start an admin session."""
    admin = await db.admin_login_check(request.email, request.password)
    if admin is None or not admin.is_active:
        logger.info("Admin login rejected")
        raise Unauthorized(ERROR_INVALID_CREDENTIALS)

    principal = AdminPrincipal.from_admin(admin)
    token = get_session_store().create(principal)
    await db.touch_admin_login(admin.id)

    max_age = get_settings().session_ttl_hours * 3600
    cookie_options = {"httponly": True, "samesite": "lax", "max_age": max_age}
    response.set_cookie(ADMIN_ID_COOKIE, admin.id, **cookie_options)
    response.set_cookie(ADMIN_EMAIL_COOKIE, admin.email, **cookie_options)
    response.set_cookie(ADMIN_SESSION_COOKIE, token, **cookie_options)

    logger.info("Admin %s logged in", sanitize_id_for_logging(admin.id))
    return {"isAdmin": True, "user": principal.to_public_dict(), "token": token}


@router.post("/logout")
async def admin_logout(request: Request, response: Response):
    """Clear admin cookies and revoke the session token, if any."""
    token = request.cookies.get(ADMIN_SESSION_COOKIE)
    authorization = request.headers.get("Authorization", "")
    if authorization.lower().startswith("bearer "):
        token = authorization[7:]
    if token:
        get_session_store().revoke(token)

    response.delete_cookie(ADMIN_ID_COOKIE)
    response.delete_cookie(ADMIN_EMAIL_COOKIE)
    response.delete_cookie(ADMIN_SESSION_COOKIE)
    return {"message": "Logged out successfully", "success": True}


@router.get("/check")
async def admin_check(admin: AdminPrincipal = Depends(verify_admin)):
    """Who is the gated caller."""
    return {"isAdmin": True, "user": admin.to_public_dict()}
