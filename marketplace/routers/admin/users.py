"""
Admin Users Router

User listing and partner status for the admin panel.
"""
import math

from fastapi import APIRouter, Depends, Query

from marketplace.auth import AdminPrincipal, verify_admin
from marketplace.logging import get_logger, sanitize_id_for_logging
from marketplace.routers.models import ToggleUserRequest
from marketplace.services.database import Database, get_database_async

logger = get_logger(__name__)

router = APIRouter(tags=["admin-users"])


@router.get("/users")
async def admin_get_users(
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    search: str = "",
    admin: AdminPrincipal = Depends(verify_admin),
    db: Database = Depends(get_database_async),
):
    """Page through users, newest first."""
    users, total = await db.list_users(page=page, limit=limit, search=search.strip())

    return {
        "users": [user.to_admin_dict() for user in users],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "totalPages": math.ceil(total / limit),
        },
    }


@router.patch("/users/{user_id}/toggle")
async def admin_toggle_user(
    user_id: str,
    request: ToggleUserRequest,
    admin: AdminPrincipal = Depends(verify_admin),
    db: Database = Depends(get_database_async),
):
    """Turn a user's partner status on or off."""
    await db.set_user_partner_status(user_id, request.is_active)
    logger.info(
        "Admin %s set partner status of %s to %s",
        sanitize_id_for_logging(admin.id), sanitize_id_for_logging(user_id), request.is_active,
    )
    return {"message": "User status updated successfully"}
