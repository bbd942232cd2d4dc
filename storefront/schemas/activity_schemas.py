# storefront/schemas/activity_schemas.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional, List


class UserActivityOut(BaseModel):
    id: int
    user_id: Optional[int] = None
    username: str
    message: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserActivityFilters(BaseModel):
    """Filters applied to an audit-log page, echoed back to the dashboard."""
    user_id: Optional[int] = None
    username: Optional[str] = None
    search: Optional[str] = None
    since: Optional[datetime] = None
    sort_by: str = "created_at"
    order: str = "desc"


class UserActivityListResponse(BaseModel):
    message: str
    total: int
    page: int = 1
    page_size: int = 20
    filters: UserActivityFilters = UserActivityFilters()
    data: List[UserActivityOut]
