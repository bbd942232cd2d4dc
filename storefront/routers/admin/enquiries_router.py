# storefront/routers/admin/enquiries_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.models.enquiry_models import EnquiryPriority
from storefront.schemas.enquiry_schemas import EnquiryListResponse
from storefront.services.enquiry_service import list_enquiries
from storefront.utils.get_user import get_current_user
from storefront.utils.check_roles import require_role

router = APIRouter(prefix="/enquiries", tags=["Admin: Parts Enquiries"])


@router.get("", response_model=EnquiryListResponse)
@require_role(["admin"])
async def list_enquiries_route(
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
    priority: Optional[EnquiryPriority] = Query(None),
):
    return await list_enquiries(db, priority)
