"""
Use case: Fetch a product by id.

Failure cases: INVALID_ID for a malformed id, 404 when the product is unknown.
"""

from typing import Union

from app.application.catalog.create_product import to_result
from app.application.catalog.dtos import ProductResult
from app.application.identifiers import parse_id
from app.domain.catalog.ports import ProductRepository
from app.domain.errors import Failure

HTTP_404 = 404


class GetProductUseCase:
    def __init__(self, product_repository: ProductRepository) -> None:
        self._product_repository = product_repository

    def execute(self, raw_product_id: str) -> Union[ProductResult, Failure]:
        product_id = parse_id(raw_product_id, "product")
        if isinstance(product_id, Failure):
            return product_id

        product = self._product_repository.get(product_id)
        if product is None:
            return Failure.unclassified("Product not found", status_code=HTTP_404)
        return to_result(product)
