# --------------------------
# File: storefront/services/new_arrival_service.py
# Description: Admin curation of the "new arrivals" showcase
# --------------------------

from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.errors import RemoteOperationError
from storefront.models.catalog_models import NewArrival, Product
from storefront.schemas.new_arrival_schemas import (
    NewArrivalCreate,
    NewArrivalUpdate,
    NewArrivalOut,
    NewArrivalPanelResponse,
)
from storefront.schemas.product_schemas import ProductOut
from storefront.utils.activity_helpers import log_user_activity

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = {"product_id", "is_featured", "is_best_seller", "rating", "arrival_date"}


def calculate_discount(original_price: Optional[Decimal], sale_price: Optional[Decimal]) -> int:
    """Whole-percent discount of sale over original; 0 when either price is missing."""
    if not original_price or not sale_price:
        return 0
    ratio = (Decimal(original_price) - Decimal(sale_price)) / Decimal(original_price) * 100
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


async def _get_arrival_or_404(db: AsyncSession, arrival_id: int) -> NewArrival:
    arrival = await db.get(NewArrival, arrival_id)
    if not arrival:
        raise HTTPException(status_code=404, detail="New arrival not found")
    return arrival


async def _ensure_product_exists(db: AsyncSession, product_id: int) -> None:
    if not await db.get(Product, product_id):
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")


async def _reload(db: AsyncSession, arrival_id: int) -> NewArrival:
    result = await db.execute(
        select(NewArrival)
        .where(NewArrival.id == arrival_id)
        .execution_options(populate_existing=True)
    )
    return result.scalars().one()


# --------------------------
# LOAD PANEL
# --------------------------
async def load_new_arrivals_panel(db: AsyncSession) -> NewArrivalPanelResponse:
    arrivals = (
        await db.execute(select(NewArrival).order_by(NewArrival.arrival_date.desc()))
    ).scalars().all()
    products = (await db.execute(select(Product).order_by(Product.name))).scalars().all()

    return NewArrivalPanelResponse(
        message="New arrivals fetched successfully",
        data=[NewArrivalOut.model_validate(a) for a in arrivals],
        products=[ProductOut.model_validate(p) for p in products],
    )


# --------------------------
# CREATE NEW ARRIVAL
# --------------------------
async def create_new_arrival(db: AsyncSession, data: NewArrivalCreate, current_user):
    await _ensure_product_exists(db, data.product_id)

    values = data.model_dump()
    if values["discount_percentage"] is None:
        values["discount_percentage"] = calculate_discount(data.original_price, data.sale_price) or None
    if values["arrival_date"] is None:
        values["arrival_date"] = datetime.now(timezone.utc)

    try:
        arrival = NewArrival(**values)
        db.add(arrival)
        await db.flush()

        await log_user_activity(
            db,
            current_user,
            message=f"Admin added product {arrival.product_id} to new arrivals (ID: {arrival.id})",
        )
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Error creating new arrival for product %s", data.product_id)
        raise RemoteOperationError("Error saving new arrival")

    arrival = await _reload(db, arrival.id)
    return {"message": "New arrival created successfully", "data": NewArrivalOut.model_validate(arrival)}


# --------------------------
# UPDATE NEW ARRIVAL
# --------------------------
async def update_new_arrival(db: AsyncSession, arrival_id: int, data: NewArrivalUpdate, current_user):
    arrival = await _get_arrival_or_404(db, arrival_id)
    updates = {
        key: value
        for key, value in data.model_dump(exclude_unset=True).items()
        if value is not None or key not in REQUIRED_FIELDS
    }
    if "product_id" in updates:
        await _ensure_product_exists(db, updates["product_id"])

    for key, value in updates.items():
        setattr(arrival, key, value)

    prices_changed = "original_price" in updates or "sale_price" in updates
    if updates.get("discount_percentage") is None and (prices_changed or "discount_percentage" in updates):
        arrival.discount_percentage = calculate_discount(arrival.original_price, arrival.sale_price) or None

    try:
        await log_user_activity(
            db,
            current_user,
            message=f"Admin updated new arrival {arrival_id}: {', '.join(sorted(updates)) or 'no changes'}",
        )
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Error updating new arrival %s", arrival_id)
        raise RemoteOperationError("Error saving new arrival")

    arrival = await _reload(db, arrival_id)
    return {"message": "New arrival updated successfully", "data": NewArrivalOut.model_validate(arrival)}


# --------------------------
# DELETE NEW ARRIVAL
# --------------------------
async def delete_new_arrival(db: AsyncSession, arrival_id: int, current_user):
    arrival = await _get_arrival_or_404(db, arrival_id)

    try:
        await db.delete(arrival)
        await log_user_activity(
            db,
            current_user,
            message=f"Admin removed new arrival {arrival_id} (product {arrival.product_id})",
        )
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Error deleting new arrival %s", arrival_id)
        raise RemoteOperationError("Error removing new arrival")

    return {"message": "New arrival removed successfully"}
