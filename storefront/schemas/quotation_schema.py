# storefront/schemas/quotation_schema.py
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from storefront.models.quotation_models import QuotationStatus
from storefront.schemas.cart_schemas import CartLineItem


# --------------------------
# Submission Schemas
# --------------------------
class CustomerDetails(BaseModel):
    # Plain strings so the submitter can report which field is wrong
    name: str = ""
    email: str = ""
    phone: str = ""
    company: Optional[str] = None
    notes: Optional[str] = None


class QuotationSubmit(BaseModel):
    items: List[CartLineItem]
    customer: CustomerDetails


class QuotationStatusUpdate(BaseModel):
    status: QuotationStatus


# --------------------------
# Output Schemas
# --------------------------
class QuotationItemOut(BaseModel):
    id: int
    product_id: Optional[int] = None
    product_name: str
    quantity: int
    unit_price: Decimal
    total_price: Decimal

    class Config:
        from_attributes = True


class QuotationOut(BaseModel):
    id: int
    quotation_number: str
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_company: Optional[str] = None
    total_amount: Decimal
    tax_amount: Decimal
    final_amount: Decimal
    status: QuotationStatus
    notes: Optional[str] = None
    valid_until: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    items: List[QuotationItemOut] = []

    class Config:
        from_attributes = True


# --------------------------
# Response Schemas
# --------------------------
class QuotationResponse(BaseModel):
    message: Optional[str] = None
    data: Optional[QuotationOut] = None


class QuotationListResponse(BaseModel):
    message: str
    total: int = 0
    data: List[QuotationOut] = []
