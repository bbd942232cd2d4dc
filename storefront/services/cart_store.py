# --------------------------
# File: storefront/services/cart_store.py
# Description: Shopping cart with pluggable durable storage
# --------------------------

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from storefront.schemas.cart_schemas import CartProduct, CartLineItem

logger = logging.getLogger(__name__)

DEFAULT_CART_KEY = "cart"


# --------------------------
# Storage backends
# --------------------------
class CartStorage(ABC):
    """Durable key-value slot holding one serialized cart."""

    @abstractmethod
    def load(self) -> List[dict]:
        ...

    @abstractmethod
    def save(self, items: List[dict]) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...


class MemoryCartStorage(CartStorage):
    def __init__(self, items: Optional[List[dict]] = None):
        self.record = None if items is None else json.dumps(items)

    def load(self) -> List[dict]:
        return json.loads(self.record) if self.record else []

    def save(self, items: List[dict]) -> None:
        self.record = json.dumps(items)

    def clear(self) -> None:
        self.record = None


class JsonFileCartStorage(CartStorage):
    """One JSON file per cart key under ``directory``."""

    def __init__(self, directory: str, key: str = DEFAULT_CART_KEY):
        self.key = key
        self.path = Path(directory) / f"{key}.json"

    def load(self) -> List[dict]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            logger.warning("Discarding unreadable cart record at %s", self.path)
            return []
        return data if isinstance(data, list) else []

    def save(self, items: List[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # each write gets its own temp file; the rename is atomic
        with tempfile.NamedTemporaryFile(
            "w", dir=self.path.parent, prefix=f"{self.key}.", suffix=".tmp", delete=False, encoding="utf-8"
        ) as tmp:
            json.dump(items, tmp)
        try:
            os.replace(tmp.name, self.path)
        except OSError:
            Path(tmp.name).unlink(missing_ok=True)
            raise

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


# --------------------------
# Cart store
# --------------------------
class CartStore:
    """
    Line items keyed by product id. Every mutation is written through to
    the storage; the storage is read once, when the store is built.
    """

    def __init__(self, storage: CartStorage, cart_id: str = DEFAULT_CART_KEY):
        self.storage = storage
        self.cart_id = cart_id
        self._items: List[CartLineItem] = [
            CartLineItem.model_validate(raw) for raw in storage.load()
        ]

    @property
    def items(self) -> List[CartLineItem]:
        return list(self._items)

    def _find(self, product_id: str) -> Optional[CartLineItem]:
        return next((item for item in self._items if item.id == product_id), None)

    def _persist(self) -> None:
        self.storage.save([item.model_dump() for item in self._items])

    def add_to_cart(self, product: CartProduct) -> CartLineItem:
        # price is taken as given; catalog prices are checked when products are saved
        existing = self._find(product.id)
        if existing:
            existing.quantity += 1
            line = existing
        else:
            line = CartLineItem(**product.model_dump(), quantity=1)
            self._items.append(line)
        self._persist()
        return line

    def update_quantity(self, product_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove_from_cart(product_id)
            return

        item = self._find(product_id)
        if item:
            item.quantity = quantity
        self._persist()

    def remove_from_cart(self, product_id: str) -> None:
        self._items = [item for item in self._items if item.id != product_id]
        self._persist()

    def get_cart_total(self) -> float:
        return sum(item.price * item.quantity for item in self._items)

    def get_cart_items_count(self) -> int:
        return sum(item.quantity for item in self._items)

    def clear_cart(self) -> None:
        self._items = []
        self.storage.clear()
