"""
Data Transfer Objects for the catalog application layer.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class CreateProductCommand:
    """Input DTO for creating a product."""

    name: str
    price: Decimal
    category: str
    description: Optional[str] = None


@dataclass(frozen=True)
class ProductResult:
    """Output DTO describing a product."""

    id: UUID
    name: str
    price: Decimal
    category: str
    description: Optional[str]
    created_at: datetime
