# catalog/store.py
import asyncio
import uuid
from typing import Any, Dict, Iterable, List, Optional

from .models import Product

# This file holds the in-memory product collection and the lock guarding it.

SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class ProductStore:
    """Ordered, in-memory product collection.

    Records are kept in insertion order. Every method hands out copies so no
    caller ever holds a reference into the collection. Mutations take
    ``self._lock`` for their whole duration.
    """

    def __init__(self) -> None:
        self._products: List[Dict[str, Any]] = []
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._products)

    def _index_of(self, product_id: str) -> Optional[int]:
        for i, p in enumerate(self._products):
            if p["id"] == product_id:
                return i
        return None

    def _new_record(self, draft: Dict[str, Any]) -> Dict[str, Any]:
        pid = uuid.uuid4().hex
        while self._index_of(pid) is not None:
            pid = uuid.uuid4().hex
        fields = {k: v for k, v in draft.items() if k != "id"}
        fields.setdefault("inStock", True)
        return Product(id=pid, **fields).model_dump(by_alias=True)

    # ---------------------------
    # Reads
    # ---------------------------
    async def list(self, category: Optional[str] = None, in_stock: Optional[bool] = None) -> List[Dict[str, Any]]:
        out = []
        for p in self._products:
            if category is not None:
                if p.get("category") is None or p["category"].lower() != category.lower():
                    continue
            if in_stock is not None and p["inStock"] is not in_stock:
                continue
            out.append(dict(p))
        return out

    async def get(self, product_id: str) -> Optional[Dict[str, Any]]:
        i = self._index_of(product_id)
        if i is None:
            return None
        return dict(self._products[i])

    # ---------------------------
    # Mutations
    # ---------------------------
    async def create(self, draft: Dict[str, Any]) -> Dict[str, Any]:
        await self._lock.acquire()
        try:
            record = self._new_record(draft)
            self._products.append(record)
            return dict(record)
        finally:
            self._lock.release()

    async def replace_fields(self, product_id: str, patch: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Overwrite every key present in ``patch`` (falsy values included), except ``id``."""
        await self._lock.acquire()
        try:
            i = self._index_of(product_id)
            if i is None:
                return None
            updated = dict(self._products[i])
            for key, value in patch.items():
                if key == "id":
                    continue
                updated[key] = value
            self._products[i] = updated
            return dict(updated)
        finally:
            self._lock.release()

    async def delete(self, product_id: str) -> Optional[Dict[str, Any]]:
        await self._lock.acquire()
        try:
            i = self._index_of(product_id)
            if i is None:
                return None
            return dict(self._products.pop(i))
        finally:
            self._lock.release()

    # ---------------------------
    # Startup
    # ---------------------------
    def seed(self, drafts: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        # only called from create_app, before the app serves anything
        created = []
        for draft in drafts:
            record = self._new_record(draft)
            self._products.append(record)
            created.append(dict(record))
        return created
