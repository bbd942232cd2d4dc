# storefront/schemas/cart_schemas.py
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class CartProduct(BaseModel):
    id: str
    name: str
    price: float
    image_url: Optional[str] = None

    @field_validator("id", mode="before")
    def id_as_string(cls, value):
        return str(value) if value is not None else value


class CartLineItem(CartProduct):
    quantity: int = Field(ge=1)


class CartQuantityUpdate(BaseModel):
    quantity: int


class CartOut(BaseModel):
    cart_id: str
    items: List[CartLineItem] = []
    total: float
    items_count: int
