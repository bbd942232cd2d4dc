# --------------------------
# File: storefront/services/catalog_service.py
# Description: Public catalog listing and in-memory filtering
# --------------------------

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.catalog_models import Brand, Category, Product, NewArrival
from storefront.schemas.product_schemas import CatalogProduct, CatalogResponse, FilterOptionsResponse
from storefront.schemas.new_arrival_schemas import NewArrivalOut, NewArrivalListResponse

ALL = "All"


def matches_filters(product: CatalogProduct, search: str = "", category: str = ALL, brand: str = ALL) -> bool:
    term = (search or "").lower()
    matches_search = (
        not term
        or term in product.name.lower()
        or term in (product.brand or "").lower()
    )
    matches_category = category in (None, "", ALL) or product.category == category
    matches_brand = brand in (None, "", ALL) or product.brand == brand
    return matches_search and matches_category and matches_brand


def filter_products(
    products: Iterable[CatalogProduct],
    search: str = "",
    category: str = ALL,
    brand: str = ALL,
) -> List[CatalogProduct]:
    return [p for p in products if matches_filters(p, search, category, brand)]


def to_catalog_product(product: Product) -> CatalogProduct:
    return CatalogProduct(
        id=product.id,
        name=product.name,
        brand=product.brand_name or "",
        category=product.category_name or "",
        price=product.price,
        image_url=product.image_url,
        in_stock=product.in_stock,
    )


# --------------------------
# LIST CATALOG
# --------------------------
async def list_catalog(
    db: AsyncSession,
    search: Optional[str] = None,
    category: str = ALL,
    brand: str = ALL,
) -> CatalogResponse:
    result = await db.execute(select(Product).order_by(Product.name))
    products = [to_catalog_product(p) for p in result.scalars().all()]
    filtered = filter_products(products, search or "", category, brand)
    return CatalogResponse(message="Products fetched successfully", total=len(filtered), data=filtered)


async def get_filter_options(db: AsyncSession) -> FilterOptionsResponse:
    categories = (await db.execute(select(Category.name).order_by(Category.name))).scalars().all()
    brands = (await db.execute(select(Brand.name).order_by(Brand.name))).scalars().all()
    return FilterOptionsResponse(categories=[ALL, *categories], brands=[ALL, *brands])


async def list_public_new_arrivals(db: AsyncSession, featured_only: bool = False) -> NewArrivalListResponse:
    stmt = select(NewArrival)
    if featured_only:
        stmt = stmt.where(NewArrival.is_featured.is_(True))
    result = await db.execute(stmt.order_by(NewArrival.arrival_date.desc()))
    arrivals = result.scalars().all()
    return NewArrivalListResponse(
        message="New arrivals fetched successfully",
        data=[NewArrivalOut.model_validate(a) for a in arrivals],
    )
