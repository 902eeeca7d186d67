"""
Use case: Add a product to the catalog.

Input: CreateProductCommand
Output: ProductResult
Side effects: Stores the product.
Failure cases: DUPLICATE_KEY when a product with the same name exists.
"""

import logging
from datetime import datetime, timezone
from typing import Union
from uuid import uuid4

from app.application.catalog.dtos import CreateProductCommand, ProductResult
from app.domain.catalog.entities import Product
from app.domain.catalog.ports import ProductRepository
from app.domain.errors import Failure

logger = logging.getLogger(__name__)


def to_result(product: Product) -> ProductResult:
    return ProductResult(
        id=product.id,
        name=product.name,
        price=product.price,
        category=product.category,
        description=product.description,
        created_at=product.created_at,
    )


class CreateProductUseCase:
    """Creates a catalog product."""

    def __init__(self, product_repository: ProductRepository) -> None:
        self._product_repository = product_repository

    def execute(self, command: CreateProductCommand) -> Union[ProductResult, Failure]:
        product = Product(
            id=uuid4(),
            name=command.name,
            price=command.price,
            category=command.category,
            description=command.description,
            created_at=datetime.now(timezone.utc),
        )
        failure = self._product_repository.add(product)
        if failure is not None:
            return failure

        logger.info("Created product id=%s", product.id)
        return to_result(product)
