"""
In-memory product repository.
"""

import threading
from typing import Optional
from uuid import UUID

from app.domain.catalog.entities import Product
from app.domain.catalog.ports import ProductRepository
from app.domain.errors import Failure


class InMemoryProductRepository(ProductRepository):
    """Dict-backed ProductRepository; names are unique, case-insensitively."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._products: dict[UUID, Product] = {}
        self._names: set[str] = set()

    def add(self, product: Product) -> Optional[Failure]:
        key = product.name.casefold()
        with self._lock:
            if key in self._names:
                return Failure.duplicate_key(f"Duplicate key: name '{product.name}'")
            self._products[product.id] = product
            self._names.add(key)
        return None

    def get(self, product_id: UUID) -> Optional[Product]:
        return self._products.get(product_id)
