# storefront/routers/cart_router.py
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import CART_STORAGE_DIR
from storefront.core.db import get_db
from storefront.schemas.cart_schemas import CartProduct, CartQuantityUpdate, CartOut
from storefront.schemas.quotation_schema import CustomerDetails, QuotationResponse
from storefront.services.cart_store import CartStore, JsonFileCartStorage
from storefront.services.quotation_service import submit_quotation

router = APIRouter(prefix="/cart", tags=["Cart"])

CART_ID_HEADER = "X-Cart-Id"


def get_cart_storage_dir() -> str:
    return CART_STORAGE_DIR


def get_cart_store(
    response: Response,
    x_cart_id: Optional[str] = Header(default=None),
    storage_dir: str = Depends(get_cart_storage_dir),
) -> CartStore:
    """Open the cart named by the X-Cart-Id header, issuing a new id when absent."""
    if x_cart_id:
        try:
            cart_id = str(uuid.UUID(x_cart_id))
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid cart id")
    else:
        cart_id = str(uuid.uuid4())

    response.headers[CART_ID_HEADER] = cart_id
    return CartStore(JsonFileCartStorage(storage_dir, cart_id), cart_id=cart_id)


def cart_out(store: CartStore) -> CartOut:
    return CartOut(
        cart_id=store.cart_id,
        items=store.items,
        total=store.get_cart_total(),
        items_count=store.get_cart_items_count(),
    )


# --------------------------
# GET CART
# --------------------------
@router.get("", response_model=CartOut)
def read_cart(store: CartStore = Depends(get_cart_store)):
    return cart_out(store)


# --------------------------
# ADD ITEM
# --------------------------
@router.post("/items", response_model=CartOut)
def add_item(product: CartProduct, store: CartStore = Depends(get_cart_store)):
    store.add_to_cart(product)
    return cart_out(store)


# --------------------------
# SET QUANTITY (<= 0 removes the line)
# --------------------------
@router.put("/items/{item_id}", response_model=CartOut)
def set_item_quantity(item_id: str, data: CartQuantityUpdate, store: CartStore = Depends(get_cart_store)):
    store.update_quantity(item_id, data.quantity)
    return cart_out(store)


# --------------------------
# REMOVE ITEM
# --------------------------
@router.delete("/items/{item_id}", response_model=CartOut)
def remove_item(item_id: str, store: CartStore = Depends(get_cart_store)):
    store.remove_from_cart(item_id)
    return cart_out(store)


# --------------------------
# CLEAR CART
# --------------------------
@router.delete("", response_model=CartOut)
def clear_cart(store: CartStore = Depends(get_cart_store)):
    store.clear_cart()
    return cart_out(store)


# --------------------------
# CHECKOUT -> QUOTATION
# --------------------------
@router.post("/checkout", response_model=QuotationResponse, status_code=status.HTTP_201_CREATED)
async def checkout(
    details: CustomerDetails,
    store: CartStore = Depends(get_cart_store),
    db: AsyncSession = Depends(get_db),
):
    """
    Submit the cart as a quotation request. The cart is only cleared once
    the quotation is stored; on any failure it is left as it was.
    """
    result = await submit_quotation(db, store.items, details)
    store.clear_cart()
    return result
