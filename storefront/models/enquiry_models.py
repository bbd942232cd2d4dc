# storefront/models/enquiry_models.py
from sqlalchemy import Column, Integer, String, Date, DateTime, Enum as SAEnum, func
from storefront.core.db import Base
import enum

VEHICLE_BRANDS = ["BMW", "Mercedes-Benz", "Audi", "Volkswagen", "Other"]

PART_CATEGORIES = [
    "Engine Parts",
    "Brake System",
    "Transmission",
    "Suspension",
    "Electrical Components",
    "Cooling System",
    "Exhaust System",
    "Other",
]


class EnquiryPriority(str, enum.Enum):
    urgent = "urgent"   # same day
    high = "high"       # within 24 hours
    normal = "normal"   # within 48 hours
    low = "low"         # within a week


class PartsEnquiry(Base):
    __tablename__ = "parts_enquiries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    vehicle_brand = Column(String, nullable=False)
    part_category = Column(String, nullable=False)
    description = Column(String, nullable=True)
    response_date = Column(Date, nullable=False)
    priority = Column(SAEnum(EnquiryPriority), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
