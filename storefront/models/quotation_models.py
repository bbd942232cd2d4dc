# storefront/models/quotation_models.py
from sqlalchemy import (
    Column, Integer, String, ForeignKey, DateTime, Numeric, Enum as SAEnum, func
)
from sqlalchemy.orm import relationship
from storefront.core.db import Base
import enum


class QuotationStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    converted = "converted"


# rejected and converted are terminal
ALLOWED_TRANSITIONS = {
    QuotationStatus.pending: {QuotationStatus.approved, QuotationStatus.rejected},
    QuotationStatus.approved: {QuotationStatus.converted},
    QuotationStatus.rejected: set(),
    QuotationStatus.converted: set(),
}


def can_transition(current: QuotationStatus, requested: QuotationStatus) -> bool:
    return requested in ALLOWED_TRANSITIONS.get(current, set())


# ==================================================
# QUOTATION MODEL
# ==================================================
class Quotation(Base):
    __tablename__ = "quotations"

    id = Column(Integer, primary_key=True, index=True)
    quotation_number = Column(String, unique=True, nullable=False)

    # Customer snapshot
    customer_name = Column(String, nullable=False)
    customer_email = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False)
    customer_company = Column(String, nullable=True)

    # Financial fields
    total_amount = Column(Numeric(12, 2), nullable=False)   # subtotal of item totals
    tax_amount = Column(Numeric(12, 2), nullable=False)
    final_amount = Column(Numeric(12, 2), nullable=False)   # total_amount + tax_amount

    status = Column(SAEnum(QuotationStatus), default=QuotationStatus.pending, nullable=False, index=True)
    notes = Column(String, nullable=True)
    valid_until = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    items = relationship(
        "QuotationItem",
        back_populates="quotation",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="QuotationItem.id",
    )

    def __repr__(self):
        return f"<Quotation(id={self.id}, number='{self.quotation_number}', status='{self.status}')>"


# ==================================================
# QUOTATION ITEM MODEL
# ==================================================
class QuotationItem(Base):
    __tablename__ = "quotation_items"

    id = Column(Integer, primary_key=True, index=True)
    quotation_id = Column(Integer, ForeignKey("quotations.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, nullable=True)
    product_name = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(12, 2), nullable=False)
    total_price = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    quotation = relationship("Quotation", back_populates="items")
