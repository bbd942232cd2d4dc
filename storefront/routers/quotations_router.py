# storefront/routers/quotations_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.schemas.quotation_schema import QuotationSubmit, QuotationResponse
from storefront.services.quotation_service import submit_quotation

router = APIRouter(prefix="/quotations", tags=["Quotations"])


# --------------------------
# SUBMIT QUOTATION (client-held cart)
# --------------------------
@router.post("", response_model=QuotationResponse, status_code=status.HTTP_201_CREATED)
async def submit_quotation_route(data: QuotationSubmit, db: AsyncSession = Depends(get_db)):
    return await submit_quotation(db, data.items, data.customer)
