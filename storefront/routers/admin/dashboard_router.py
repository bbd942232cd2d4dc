# storefront/routers/admin/dashboard_router.py
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.schemas.admin_schemas import AdminStats
from storefront.schemas.activity_schemas import (
    UserActivityOut,
    UserActivityFilters,
    UserActivityListResponse,
)
from storefront.services.admin_service import get_admin_stats
from storefront.services.activity_service import get_user_activities
from storefront.utils.get_user import get_current_user
from storefront.utils.check_roles import require_role

router = APIRouter(tags=["Admin: Dashboard"])


# --------------------------
# DASHBOARD COUNTERS
# --------------------------
@router.get("/stats", response_model=AdminStats)
@require_role(["admin"])
async def read_stats(
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await get_admin_stats(db)


# --------------------------
# AUDIT LOG
# --------------------------
@router.get("/activities", response_model=UserActivityListResponse)
@require_role(["admin"])
async def list_activities(
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
    user_id: Optional[int] = Query(None),
    username: Optional[str] = Query(None),
    search: Optional[str] = Query(None, description="Substring of the activity message"),
    since: Optional[datetime] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    sort_by: str = Query("created_at"),
    order: str = Query("desc"),
):
    filters = UserActivityFilters(
        user_id=user_id,
        username=username,
        search=search,
        since=since,
        sort_by=sort_by,
        order=order,
    )
    total, activities = await get_user_activities(db, page=page, page_size=page_size, **filters.model_dump())
    return UserActivityListResponse(
        message="Activities fetched successfully",
        total=total,
        page=page,
        page_size=page_size,
        filters=filters,
        data=[UserActivityOut.model_validate(a) for a in activities],
    )
