"""
Admin Dashboard Router

Headline figures for the admin panel landing page.
"""
from fastapi import APIRouter, Depends

from marketplace.auth import AdminPrincipal, verify_admin
from marketplace.services.database import Database, get_database_async

router = APIRouter(tags=["admin-dashboard"])


@router.get("/dashboard/stats")
async def admin_dashboard_stats(
    admin: AdminPrincipal = Depends(verify_admin),
    db: Database = Depends(get_database_async),
):
    """User/order counts, delivered revenue, pending work and the 10 newest orders."""
    stats = await db.get_dashboard_stats()
    return stats.to_dict()
