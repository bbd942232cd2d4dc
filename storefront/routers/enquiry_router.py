# storefront/routers/enquiry_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.schemas.enquiry_schemas import EnquiryCreate, EnquiryResponse
from storefront.services.enquiry_service import create_enquiry

router = APIRouter(prefix="/enquiries", tags=["Parts Enquiries"])


@router.post("", response_model=EnquiryResponse, status_code=status.HTTP_201_CREATED)
async def create_enquiry_route(data: EnquiryCreate, db: AsyncSession = Depends(get_db)):
    """Parts enquiry / price request from the booking form."""
    return await create_enquiry(db, data)
