# storefront/schemas/product_schemas.py

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal


class BrandOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class CategoryOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


# --------------------------
# Schema for creating Product
# --------------------------
class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    image_url: Optional[str] = None
    in_stock: bool = True
    stock_quantity: int = Field(default=0, ge=0)
    sku: Optional[str] = None
    brand_id: Optional[int] = None
    category_id: Optional[int] = None


# --------------------------
# Schema for updating Product
# --------------------------
class ProductUpdate(BaseModel):
    """
    All fields optional for partial updates.
    """
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    in_stock: Optional[bool] = None
    stock_quantity: Optional[int] = Field(default=None, ge=0)
    sku: Optional[str] = None
    brand_id: Optional[int] = None
    category_id: Optional[int] = None


# --------------------------
# Output schema for single Product
# --------------------------
class ProductOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    image_url: Optional[str] = None
    in_stock: bool
    stock_quantity: int
    sku: Optional[str] = None
    brand_id: Optional[int] = None
    category_id: Optional[int] = None
    brand_name: Optional[str] = None
    category_name: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# --------------------------
# Storefront card: what the public catalog filters over
# --------------------------
class CatalogProduct(BaseModel):
    id: int
    name: str
    brand: str = ""
    category: str = ""
    price: Decimal
    image_url: Optional[str] = None
    in_stock: bool = True


# --------------------------
# Response schemas
# --------------------------
class ProductResponse(BaseModel):
    message: str
    data: Optional[ProductOut] = None



class ProductPanelResponse(BaseModel):
    message: str
    data: List[ProductOut]
    brands: List[BrandOut] = []
    categories: List[CategoryOut] = []


class CatalogResponse(BaseModel):
    message: str
    total: int
    data: List[CatalogProduct]


class FilterOptionsResponse(BaseModel):
    categories: List[str]
    brands: List[str]


# --------------------------
# Generic Message Response
# --------------------------
class MessageResponse(BaseModel):
    message: str
