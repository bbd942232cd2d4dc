# storefront/schemas/enquiry_schemas.py
from pydantic import BaseModel
from typing import List, Optional
from datetime import date, datetime

from storefront.models.enquiry_models import EnquiryPriority


class EnquiryCreate(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    vehicle_brand: str = ""
    part_category: str = ""
    description: Optional[str] = None
    response_date: Optional[date] = None
    priority: Optional[str] = None


class EnquiryOut(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    vehicle_brand: str
    part_category: str
    description: Optional[str] = None
    response_date: date
    priority: EnquiryPriority
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EnquiryResponse(BaseModel):
    message: str
    data: Optional[EnquiryOut] = None


class EnquiryListResponse(BaseModel):
    message: str
    data: List[EnquiryOut]
