# --------------------------
# File: storefront/services/product_service.py
# Description: Service layer for admin Product CRUD
# --------------------------

import logging

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from storefront.core.errors import RemoteOperationError
from storefront.models.catalog_models import Brand, Category, Product
from storefront.schemas.product_schemas import (
    BrandOut,
    CategoryOut,
    ProductCreate,
    ProductUpdate,
    ProductOut,
    ProductPanelResponse,
)
from storefront.utils.activity_helpers import log_user_activity

logger = logging.getLogger(__name__)

# null in a partial update means "leave as is" for these
REQUIRED_FIELDS = {"name", "price", "in_stock", "stock_quantity"}


async def _ensure_lookups_exist(db: AsyncSession, brand_id, category_id):
    if brand_id is not None and not await db.get(Brand, brand_id):
        raise HTTPException(status_code=404, detail=f"Brand {brand_id} not found")
    if category_id is not None and not await db.get(Category, category_id):
        raise HTTPException(status_code=404, detail=f"Category {category_id} not found")


async def _get_product_or_404(db: AsyncSession, product_id: int) -> Product:
    result = await db.execute(select(Product).where(Product.id == product_id))
    product = result.scalars().first()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


async def _reload(db: AsyncSession, product_id: int) -> Product:
    result = await db.execute(
        select(Product)
        .where(Product.id == product_id)
        .execution_options(populate_existing=True)
    )
    return result.scalars().one()


# --------------------------
# LOAD PANEL (products + lookups)
# --------------------------
async def load_product_panel(db: AsyncSession) -> ProductPanelResponse:
    """
    Products newest first, with the brand and category lookup lists the
    edit form needs.
    """
    products = (
        await db.execute(select(Product).order_by(Product.created_at.desc(), Product.id.desc()))
    ).scalars().all()
    brands = (await db.execute(select(Brand).order_by(Brand.name))).scalars().all()
    categories = (await db.execute(select(Category).order_by(Category.name))).scalars().all()

    return ProductPanelResponse(
        message="Products fetched successfully",
        data=[ProductOut.model_validate(p) for p in products],
        brands=[BrandOut.model_validate(b) for b in brands],
        categories=[CategoryOut.model_validate(c) for c in categories],
    )


# --------------------------
# CREATE PRODUCT
# --------------------------
async def create_product(db: AsyncSession, data: ProductCreate, current_user):
    await _ensure_lookups_exist(db, data.brand_id, data.category_id)

    try:
        product = Product(**data.model_dump())
        db.add(product)
        await db.flush()  # ensures product.id is available

        await log_user_activity(
            db,
            current_user,
            message=f"Admin created product '{product.name}' (ID: {product.id})"
        )
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Error creating product '%s'", data.name)
        raise RemoteOperationError("Error saving product")

    product = await _reload(db, product.id)
    return {"message": "Product created successfully", "data": ProductOut.model_validate(product)}


# --------------------------
# GET SINGLE PRODUCT
# --------------------------
async def get_product(db: AsyncSession, product_id: int) -> dict:
    product = await _get_product_or_404(db, product_id)
    return {"message": "Product fetched successfully", "data": ProductOut.model_validate(product)}


# --------------------------
# UPDATE PRODUCT
# --------------------------
async def update_product(db: AsyncSession, product_id: int, data: ProductUpdate, current_user):
    product = await _get_product_or_404(db, product_id)
    updates = {
        key: value
        for key, value in data.model_dump(exclude_unset=True).items()
        if value is not None or key not in REQUIRED_FIELDS
    }
    await _ensure_lookups_exist(db, updates.get("brand_id"), updates.get("category_id"))

    # Track changes
    changes = []
    for key, value in updates.items():
        old_val = getattr(product, key)
        if old_val != value:
            changes.append(f"{key}: {old_val} → {value}")
            setattr(product, key, value)

    if not changes:
        return {"message": "Product updated successfully", "data": ProductOut.model_validate(product)}

    try:
        await log_user_activity(
            db,
            current_user,
            message=f"Admin updated product '{product.name}' (ID: {product.id}): {', '.join(changes)}"
        )
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Error updating product %s", product_id)
        raise RemoteOperationError("Error saving product")

    product = await _reload(db, product_id)
    return {"message": "Product updated successfully", "data": ProductOut.model_validate(product)}


# --------------------------
# DELETE PRODUCT
# --------------------------
async def delete_product(db: AsyncSession, product_id: int, current_user):
    """
    Hard delete. Quotation items keep their product name snapshot, and the
    product's new-arrival entries are removed by the foreign key cascade.
    """
    product = await _get_product_or_404(db, product_id)
    name = product.name

    try:
        await db.delete(product)
        await log_user_activity(
            db,
            current_user,
            message=f"Admin deleted product '{name}' (ID: {product_id})"
        )
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Error deleting product %s", product_id)
        raise RemoteOperationError("Error deleting product")

    return {"message": f"Product '{name}' deleted successfully"}


async def count_products(db: AsyncSession) -> int:
    return (await db.execute(select(func.count(Product.id)))).scalar() or 0
