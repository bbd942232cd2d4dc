# storefront/services/enquiry_service.py
from datetime import date
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.errors import ValidationError, RemoteOperationError
from storefront.models.enquiry_models import (
    PartsEnquiry,
    EnquiryPriority,
    VEHICLE_BRANDS,
    PART_CATEGORIES,
)
from storefront.schemas.enquiry_schemas import EnquiryCreate, EnquiryOut

logger = logging.getLogger(__name__)


def validate_enquiry(data: EnquiryCreate, today: date = None) -> None:
    """Checks run in form order; the first failing field is reported."""
    today = today or date.today()
    if len(data.name.strip()) < 2:
        raise ValidationError("name", "Please enter a valid name")
    if "@" not in data.email:
        raise ValidationError("email", "Please enter a valid email")
    if len(data.phone.strip()) < 10:
        raise ValidationError("phone", "Please enter a valid phone number")
    if data.vehicle_brand not in VEHICLE_BRANDS:
        raise ValidationError("vehicle_brand", "Please select your car model")
    if data.part_category not in PART_CATEGORIES:
        raise ValidationError("part_category", "Please select a product type")
    if data.response_date is None or data.response_date < today:
        raise ValidationError("response_date", "Please select a delivery date")
    if data.priority not in {p.value for p in EnquiryPriority}:
        raise ValidationError("priority", "Please select a priority level")


async def create_enquiry(db: AsyncSession, data: EnquiryCreate) -> dict:
    validate_enquiry(data)

    try:
        enquiry = PartsEnquiry(
            name=data.name.strip(),
            email=data.email.strip(),
            phone=data.phone.strip(),
            vehicle_brand=data.vehicle_brand,
            part_category=data.part_category,
            description=data.description or None,
            response_date=data.response_date,
            priority=EnquiryPriority(data.priority),
        )
        db.add(enquiry)
        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Error saving parts enquiry from %s", data.email)
        raise RemoteOperationError(
            "Failed to submit your enquiry. Please try again or contact us directly."
        )

    await db.refresh(enquiry)
    logger.info("Parts enquiry %s received (%s priority)", enquiry.id, enquiry.priority.value)
    return {
        "message": (
            f"Thank you {enquiry.name}! Your parts enquiry has been submitted. "
            "Our team will respond with a detailed quote shortly."
        ),
        "data": EnquiryOut.model_validate(enquiry),
    }


async def list_enquiries(db: AsyncSession, priority: EnquiryPriority = None) -> dict:
    stmt = select(PartsEnquiry)
    if priority:
        stmt = stmt.where(PartsEnquiry.priority == priority)
    result = await db.execute(stmt.order_by(PartsEnquiry.created_at.desc(), PartsEnquiry.id.desc()))
    return {
        "message": "Enquiries fetched successfully",
        "data": [EnquiryOut.model_validate(e) for e in result.scalars().all()],
    }
