"""
Pydantic response schemas for the catalog endpoints.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from app.application.catalog.dtos import ProductResult


class ProductResponse(BaseModel):
    """A catalog product."""

    id: UUID
    name: str
    price: Decimal
    category: str
    description: Optional[str]
    created_at: datetime

    @classmethod
    def from_result(cls, result: ProductResult) -> "ProductResponse":
        return cls(
            id=result.id,
            name=result.name,
            price=result.price,
            category=result.category,
            description=result.description,
            created_at=result.created_at,
        )
