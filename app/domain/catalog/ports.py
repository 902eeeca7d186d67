"""
Port interfaces (ABCs) for the catalog bounded context.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from app.domain.catalog.entities import Product
from app.domain.errors import Failure


class ProductRepository(ABC):
    """Port for storing and retrieving products."""

    @abstractmethod
    def add(self, product: Product) -> Optional[Failure]:
        """Store a new product. Returns a DUPLICATE_KEY failure if the name is taken."""
        raise NotImplementedError

    @abstractmethod
    def get(self, product_id: UUID) -> Optional[Product]:
        """Return the product with this id, or None."""
        raise NotImplementedError
