from datetime import datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
import logging
from typing import NamedTuple, Optional, Sequence
from uuid import uuid4

from fastapi import HTTPException
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.core.config import TAX_RATE, QUOTATION_VALIDITY_DAYS
from storefront.core.errors import ValidationError, RemoteOperationError, StatusTransitionError
from storefront.models.quotation_models import (
    Quotation,
    QuotationItem,
    QuotationStatus,
    can_transition,
)
from storefront.schemas.cart_schemas import CartLineItem
from storefront.schemas.quotation_schema import (
    CustomerDetails,
    QuotationOut,
    QuotationResponse,
    QuotationListResponse,
)
from storefront.utils.activity_helpers import log_user_activity

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
# Numeric(12, 2) holds amounts below 10 billion
MAX_AMOUNT = Decimal("10000000000")

SUBMIT_FAILED_MESSAGE = "Failed to submit quotation. Please try again."


class QuotationTotals(NamedTuple):
    subtotal: Decimal
    tax: Decimal
    final: Decimal


def to_money(value) -> Decimal:
    return Decimal(str(value))


# --------------------------
# Totals
# --------------------------
def _check_amount(value: Decimal) -> Decimal:
    if not value.is_finite() or abs(value) >= MAX_AMOUNT:
        raise ValidationError("cart", "Cart amounts are too large to quote. Please contact us directly.")
    return value


def calculate_totals(items: Sequence[CartLineItem], tax_rate: Decimal = TAX_RATE) -> QuotationTotals:
    """
    subtotal = sum(unit price x quantity); tax = subtotal x tax_rate;
    final = subtotal + tax. Tax and final are rounded half-up to cents.
    Amounts that do not fit the money columns are rejected as a cart error.
    """
    line_totals = [_check_amount(to_money(item.price) * item.quantity) for item in items]
    subtotal = _check_amount(sum(line_totals, Decimal("0")))
    tax = (subtotal * to_money(tax_rate)).quantize(CENT, rounding=ROUND_HALF_UP)
    final = _check_amount((subtotal + tax).quantize(CENT, rounding=ROUND_HALF_UP))
    return QuotationTotals(subtotal=subtotal, tax=tax, final=final)


# --------------------------
# Validation
# --------------------------
def validate_customer_details(details: CustomerDetails) -> None:
    name = (details.name or "").strip()
    if len(name) < 2:
        raise ValidationError("name", "Please enter a valid name")
    if "@" not in (details.email or ""):
        raise ValidationError("email", "Please enter a valid email")
    phone = (details.phone or "").strip()
    if len(phone) < 10:
        raise ValidationError("phone", "Please enter a valid phone number")


def validate_submission(items: Sequence[CartLineItem], details: CustomerDetails) -> None:
    validate_customer_details(details)
    if not items:
        raise ValidationError("cart", "Please add items to your cart before submitting")
    ids = [item.id for item in items]
    if len(set(ids)) != len(ids):
        raise ValidationError("cart", "Each product may appear only once in the cart")


def format_quotation_number(quotation_id: int, issued_at: datetime) -> str:
    return f"Q-{issued_at:%Y%m%d}-{quotation_id:04d}"


def _product_id(cart_id: str) -> Optional[int]:
    return int(cart_id) if cart_id and cart_id.isdigit() else None


async def _load_quotation(db: AsyncSession, quotation_id: int) -> Optional[Quotation]:
    result = await db.execute(
        select(Quotation)
        .options(selectinload(Quotation.items))
        .where(Quotation.id == quotation_id)
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()


# --------------------------
# SUBMIT QUOTATION
# --------------------------
async def submit_quotation(
    db: AsyncSession,
    items: Sequence[CartLineItem],
    details: CustomerDetails,
    tax_rate: Decimal = TAX_RATE,
) -> QuotationResponse:
    """
    Validate, price and persist a quotation request.

    Header and line items go out in one transaction: either both are
    stored or neither is. The status is always ``pending`` on creation.
    """
    validate_submission(items, details)
    totals = calculate_totals(items, tax_rate)
    issued_at = datetime.now(timezone.utc)

    try:
        quotation = Quotation(
            quotation_number=f"TEMP-{uuid4().hex}",
            customer_name=details.name.strip(),
            customer_email=details.email.strip(),
            customer_phone=details.phone.strip(),
            customer_company=details.company or None,
            notes=details.notes or None,
            total_amount=totals.subtotal,
            tax_amount=totals.tax,
            final_amount=totals.final,
            status=QuotationStatus.pending,
            valid_until=issued_at + timedelta(days=QUOTATION_VALIDITY_DAYS),
            items=[
                QuotationItem(
                    product_id=_product_id(item.id),
                    product_name=item.name,
                    quantity=item.quantity,
                    unit_price=to_money(item.price),
                    total_price=to_money(item.price) * item.quantity,
                )
                for item in items
            ],
        )
        db.add(quotation)
        await db.flush()

        quotation.quotation_number = format_quotation_number(quotation.id, issued_at)
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Error submitting quotation for %s", details.email)
        raise RemoteOperationError(SUBMIT_FAILED_MESSAGE)

    quotation_db = await _load_quotation(db, quotation.id)
    logger.info(
        "Quotation %s submitted: %d items, final amount %s",
        quotation_db.quotation_number, len(items), quotation_db.final_amount,
    )
    return QuotationResponse(
        message=(
            "Your quotation has been submitted successfully. "
            f"Quotation number: {quotation_db.quotation_number}"
        ),
        data=QuotationOut.model_validate(quotation_db),
    )


# --------------------------
# LIST QUOTATIONS
# --------------------------
async def list_quotations(db: AsyncSession, status: str = "all") -> QuotationListResponse:
    stmt = select(Quotation).options(selectinload(Quotation.items))
    if status and status != "all":
        try:
            stmt = stmt.where(Quotation.status == QuotationStatus(status))
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Unknown quotation status '{status}'")

    result = await db.execute(stmt.order_by(Quotation.created_at.desc(), Quotation.id.desc()))
    quotations = result.scalars().all()
    return QuotationListResponse(
        message="Quotations retrieved successfully",
        total=len(quotations),
        data=[QuotationOut.model_validate(q) for q in quotations],
    )


# --------------------------
# GET SINGLE QUOTATION BY ID
# --------------------------
async def get_quotation_or_404(db: AsyncSession, quotation_id: int) -> Quotation:
    quotation = await _load_quotation(db, quotation_id)
    if not quotation:
        raise HTTPException(status_code=404, detail="Quotation not found")
    return quotation


async def get_quotation(db: AsyncSession, quotation_id: int) -> QuotationResponse:
    quotation = await get_quotation_or_404(db, quotation_id)
    return QuotationResponse(message="Quotation retrieved successfully", data=QuotationOut.model_validate(quotation))


# --------------------------
# UPDATE QUOTATION STATUS
# --------------------------
async def update_quotation_status(
    db: AsyncSession,
    quotation_id: int,
    new_status: QuotationStatus,
    current_user,
) -> QuotationResponse:
    quotation = await get_quotation_or_404(db, quotation_id)
    old_status = quotation.status

    if not can_transition(old_status, new_status):
        raise StatusTransitionError(old_status.value, new_status.value)

    try:
        quotation.status = new_status
        await log_user_activity(
            db,
            current_user,
            message=(
                f"Changed Quotation '{quotation.quotation_number}' status "
                f"from {old_status.value} to {new_status.value}. "
                f"Final Amount: {quotation.final_amount:.2f}."
            ),
        )
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Error updating status of quotation %s", quotation_id)
        raise RemoteOperationError("Error updating status")

    logger.info("Quotation %s moved %s -> %s", quotation.quotation_number, old_status.value, new_status.value)
    quotation = await _load_quotation(db, quotation_id)
    return QuotationResponse(
        message=f"Quotation status changed to {new_status.value}.",
        data=QuotationOut.model_validate(quotation),
    )


# --------------------------
# COUNTS (dashboard)
# --------------------------
async def count_quotations(db: AsyncSession, status: Optional[QuotationStatus] = None) -> int:
    stmt = select(func.count(Quotation.id))
    if status is not None:
        stmt = stmt.where(Quotation.status == status)
    return (await db.execute(stmt)).scalar() or 0
