# storefront/schemas/new_arrival_schemas.py
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from storefront.schemas.product_schemas import ProductOut


class NewArrivalCreate(BaseModel):
    product_id: int
    original_price: Optional[Decimal] = Field(default=None, ge=0)
    sale_price: Optional[Decimal] = Field(default=None, ge=0)
    discount_percentage: Optional[int] = Field(default=None, ge=0, le=100)
    is_featured: bool = False
    is_best_seller: bool = False
    rating: float = Field(default=0, ge=0, le=5)
    arrival_date: Optional[datetime] = None


class NewArrivalUpdate(BaseModel):
    product_id: Optional[int] = None
    original_price: Optional[Decimal] = Field(default=None, ge=0)
    sale_price: Optional[Decimal] = Field(default=None, ge=0)
    discount_percentage: Optional[int] = Field(default=None, ge=0, le=100)
    is_featured: Optional[bool] = None
    is_best_seller: Optional[bool] = None
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    arrival_date: Optional[datetime] = None


class NewArrivalOut(BaseModel):
    id: int
    product_id: int
    product_name: Optional[str] = None
    image_url: Optional[str] = None
    brand_name: Optional[str] = None
    category_name: Optional[str] = None
    original_price: Optional[Decimal] = None
    sale_price: Optional[Decimal] = None
    discount_percentage: Optional[int] = None
    is_featured: bool
    is_best_seller: bool
    rating: float
    arrival_date: datetime

    class Config:
        from_attributes = True


class NewArrivalResponse(BaseModel):
    message: str
    data: Optional[NewArrivalOut] = None


class NewArrivalListResponse(BaseModel):
    message: str
    data: List[NewArrivalOut]


class NewArrivalPanelResponse(BaseModel):
    message: str
    data: List[NewArrivalOut]
    products: List[ProductOut] = []
