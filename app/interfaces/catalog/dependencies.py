"""
Dependency injection for the catalog bounded context.
"""

from fastapi import Request

from app.application.catalog.create_product import CreateProductUseCase
from app.application.catalog.get_product import GetProductUseCase


def get_create_product_use_case(request: Request) -> CreateProductUseCase:
    return CreateProductUseCase(product_repository=request.app.state.product_repository)


def get_product_use_case(request: Request) -> GetProductUseCase:
    return GetProductUseCase(product_repository=request.app.state.product_repository)
