# storefront/routers/admin/products_router.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.services.product_service import (
    load_product_panel,
    create_product,
    get_product,
    update_product,
    delete_product,
)
from storefront.schemas.product_schemas import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductPanelResponse,
    MessageResponse,
)
from storefront.utils.get_user import get_current_user
from storefront.utils.check_roles import require_role

router = APIRouter(prefix="/products", tags=["Admin: Products"])


# -----------------------------------------------------------
# LIST PRODUCTS (+ brand / category lookups)
# -----------------------------------------------------------
@router.get("", response_model=ProductPanelResponse)
@require_role(["admin"])
async def list_products_route(
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await load_product_panel(db)


# -----------------------------------------------------------
# CREATE PRODUCT
# -----------------------------------------------------------
@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
@require_role(["admin"])
async def create_product_route(
    data: ProductCreate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await create_product(db, data, _user)


# -----------------------------------------------------------
# GET PRODUCT BY ID
# -----------------------------------------------------------
@router.get("/{product_id}", response_model=ProductResponse)
@require_role(["admin"])
async def get_product_route(
    product_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await get_product(db, product_id)


# -----------------------------------------------------------
# UPDATE PRODUCT
# -----------------------------------------------------------
@router.put("/{product_id}", response_model=ProductResponse)
@require_role(["admin"])
async def update_product_route(
    product_id: int,
    data: ProductUpdate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await update_product(db, product_id, data, _user)


# -----------------------------------------------------------
# DELETE PRODUCT
# -----------------------------------------------------------
@router.delete("/{product_id}", response_model=MessageResponse)
@require_role(["admin"])
async def delete_product_route(
    product_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
):
    return await delete_product(db, product_id, _user)
