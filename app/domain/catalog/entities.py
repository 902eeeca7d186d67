"""
Domain entities for the catalog bounded context.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class Product:
    """A product listed in the catalog.

    Attributes:
        id: Unique identifier.
        name: Product name, unique within the catalog (case-insensitive).
        price: Non-negative unit price.
        category: Free-form category label.
        description: Optional long description.
        created_at: Creation timestamp (UTC).
    """

    id: UUID
    name: str
    price: Decimal
    category: str
    description: Optional[str]
    created_at: datetime
