# storefront/routers/admin/new_arrivals_router.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.services.new_arrival_service import (
    load_new_arrivals_panel,
    create_new_arrival,
    update_new_arrival,
    delete_new_arrival,
)
from storefront.schemas.new_arrival_schemas import (
    NewArrivalCreate,
    NewArrivalUpdate,
    NewArrivalResponse,
    NewArrivalPanelResponse,
)
from storefront.schemas.product_schemas import MessageResponse
from storefront.utils.get_user import get_current_user
from storefront.utils.check_roles import require_role

router = APIRouter(prefix="/new-arrivals", tags=["Admin: New Arrivals"])


@router.get("", response_model=NewArrivalPanelResponse)
@require_role(["admin"])
async def list_new_arrivals_route(
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await load_new_arrivals_panel(db)


@router.post("", response_model=NewArrivalResponse, status_code=status.HTTP_201_CREATED)
@require_role(["admin"])
async def create_new_arrival_route(
    data: NewArrivalCreate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await create_new_arrival(db, data, _user)


@router.put("/{arrival_id}", response_model=NewArrivalResponse)
@require_role(["admin"])
async def update_new_arrival_route(
    arrival_id: int,
    data: NewArrivalUpdate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await update_new_arrival(db, arrival_id, data, _user)


@router.delete("/{arrival_id}", response_model=MessageResponse)
@require_role(["admin"])
async def delete_new_arrival_route(
    arrival_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await delete_new_arrival(db, arrival_id, _user)
