# storefront/services/activity_service.py
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import select, desc, asc, func
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.activity_models import UserActivity

ALLOWED_SORT_FIELDS = {"id", "user_id", "username", "created_at"}


def _activity_filters(
    user_id: Optional[int],
    username: Optional[str],
    search: Optional[str],
    since: Optional[datetime],
) -> list:
    filters = []
    if user_id:
        filters.append(UserActivity.user_id == user_id)
    if username:
        filters.append(UserActivity.username.ilike(f"%{username}%"))
    if search:
        filters.append(UserActivity.message.ilike(f"%{search}%"))
    if since:
        filters.append(UserActivity.created_at >= since)
    return filters


async def get_user_activities(
    db: AsyncSession,
    user_id: Optional[int] = None,
    username: Optional[str] = None,
    search: Optional[str] = None,
    since: Optional[datetime] = None,
    page: int = 1,
    page_size: int = 20,
    sort_by: str = "created_at",
    order: str = "desc",
) -> Tuple[int, List[UserActivity]]:
    """
    Audit rows written by admin mutations and auth events, newest first by
    default. Unknown sort fields fall back to ``created_at``.
    """
    column = getattr(UserActivity, sort_by if sort_by in ALLOWED_SORT_FIELDS else "created_at")
    direction = asc if order.lower() == "asc" else desc
    filters = _activity_filters(user_id, username, search, since)

    total = (await db.execute(select(func.count(UserActivity.id)).where(*filters))).scalar() or 0

    result = await db.execute(
        select(UserActivity)
        .where(*filters)
        .order_by(direction(column), direction(UserActivity.id))
        .offset((page - 1) * page_size)
        .limit(page_size)
    )
    return total, result.scalars().all()
