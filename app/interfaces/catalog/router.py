"""
FastAPI router for the catalog bounded context.

All routes delegate to use cases. No business logic here.
"""

from decimal import Decimal
from typing import Any, Union

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from app.application.catalog.create_product import CreateProductUseCase
from app.application.catalog.dtos import CreateProductCommand
from app.application.catalog.get_product import GetProductUseCase
from app.domain.errors import Failure
from app.interfaces.catalog.dependencies import (
    get_create_product_use_case,
    get_product_use_case,
)
from app.interfaces.catalog.rules import PRODUCT_RULES, TRIMMED_FIELDS
from app.interfaces.catalog.schemas import ProductResponse
from app.shared.errors.handlers import ErrorResponder, get_responder
from app.shared.errors.schemas import ErrorEnvelope
from app.shared.validation.runner import trim_fields, validate_payload

router = APIRouter(prefix="/products", tags=["catalog"])


@router.post(
    "",
    status_code=201,
    response_model=ProductResponse,
    responses={400: {"model": ErrorEnvelope}},
    summary="Create a product",
)
async def create_product(
    request: Request,
    payload: dict[str, Any] = Body(...),
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
    responder: ErrorResponder = Depends(get_responder),
) -> Union[ProductResponse, JSONResponse]:
    """Validate the payload and add the product to the catalog."""
    payload = trim_fields(payload, TRIMMED_FIELDS)
    failure = await validate_payload(PRODUCT_RULES, payload)
    if failure is not None:
        return responder.respond(failure, request)

    result = use_case.execute(
        CreateProductCommand(
            name=payload["name"],
            price=Decimal(str(payload["price"]).strip()),
            category=payload["category"],
            description=payload.get("description"),
        )
    )
    if isinstance(result, Failure):
        return responder.respond(result, request)
    return ProductResponse.from_result(result)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
    summary="Get a product",
)
def get_product(
    product_id: str,
    request: Request,
    use_case: GetProductUseCase = Depends(get_product_use_case),
    responder: ErrorResponder = Depends(get_responder),
) -> Union[ProductResponse, JSONResponse]:
    result = use_case.execute(product_id)
    if isinstance(result, Failure):
        return responder.respond(result, request)
    return ProductResponse.from_result(result)
