# storefront/routers/admin/quotations_router.py
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.schemas.quotation_schema import (
    QuotationResponse,
    QuotationListResponse,
    QuotationStatusUpdate,
)
from storefront.services.quotation_service import (
    list_quotations,
    get_quotation,
    get_quotation_or_404,
    update_quotation_status,
)
from storefront.utils.get_user import get_current_user
from storefront.utils.check_roles import require_role
from storefront.utils.pdf_generators.quotation_pdf import generate_quotation_pdf

router = APIRouter(prefix="/quotations", tags=["Admin: Quotations"])


# --------------------------
# LIST QUOTATIONS
# --------------------------
@router.get("", response_model=QuotationListResponse)
@require_role(["admin"])
async def list_quotations_route(
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
    status: str = Query("all"),
):
    return await list_quotations(db, status)


# --------------------------
# GET SINGLE QUOTATION BY ID
# --------------------------
@router.get("/{quotation_id}", response_model=QuotationResponse)
@require_role(["admin"])
async def get_quotation_route(
    quotation_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await get_quotation(db, quotation_id)


# --------------------------
# CHANGE STATUS
# --------------------------
@router.put("/{quotation_id}/status", response_model=QuotationResponse)
@require_role(["admin"])
async def update_quotation_status_route(
    quotation_id: int,
    data: QuotationStatusUpdate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await update_quotation_status(db, quotation_id, data.status, _user)


# --------------------------
# QUOTATION PDF
# --------------------------
@router.get("/{quotation_id}/pdf", response_class=Response)
@require_role(["admin"])
async def download_quotation_pdf(
    quotation_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    quotation = await get_quotation_or_404(db, quotation_id)
    return Response(
        content=generate_quotation_pdf(quotation),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{quotation.quotation_number}.pdf"'},
    )
