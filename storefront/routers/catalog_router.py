# storefront/routers/catalog_router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from storefront.core.db import get_db
from storefront.schemas.product_schemas import CatalogResponse, FilterOptionsResponse
from storefront.schemas.new_arrival_schemas import NewArrivalListResponse
from storefront.services.catalog_service import (
    ALL,
    list_catalog,
    get_filter_options,
    list_public_new_arrivals,
)

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("/products", response_model=CatalogResponse)
async def list_catalog_products(
    db: AsyncSession = Depends(get_db),
    search: Optional[str] = Query(None),
    category: str = Query(ALL),
    brand: str = Query(ALL),
):
    """
    Storefront product grid filtered by free text (name or brand), category and brand.
    """
    return await list_catalog(db, search, category, brand)


@router.get("/filters", response_model=FilterOptionsResponse)
async def list_filter_options(db: AsyncSession = Depends(get_db)):
    return await get_filter_options(db)


@router.get("/new-arrivals", response_model=NewArrivalListResponse)
async def list_new_arrivals(
    db: AsyncSession = Depends(get_db),
    featured: bool = Query(False),
):
    return await list_public_new_arrivals(db, featured_only=featured)
