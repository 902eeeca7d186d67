"""
FastAPI router for the accounts bounded context.

All routes delegate to use cases. No business logic here.
Payloads are checked by the rule sets before reaching a use case; every
Failure is handed to the error responder.
"""

from typing import Any, Union

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from app.application.accounts.dtos import LoginCommand, RegisterUserCommand
from app.application.accounts.get_user import GetUserUseCase
from app.application.accounts.login import LoginUseCase
from app.application.accounts.register_user import RegisterUserUseCase
from app.domain.accounts.entities import TokenClaims
from app.domain.errors import Failure
from app.interfaces.accounts.dependencies import (
    get_login_use_case,
    get_register_user_use_case,
    get_user_use_case,
)
from app.interfaces.accounts.rules import LOGIN_RULES, TRIMMED_FIELDS, USER_RULES
from app.interfaces.accounts.schemas import (
    AccessTokenResponse,
    AuthenticatedUser,
    ProtectedResponse,
    UserResponse,
)
from app.shared.errors.handlers import ErrorResponder, get_responder
from app.shared.errors.schemas import ErrorEnvelope
from app.shared.security.auth import require_claims
from app.shared.validation.runner import trim_fields, validate_payload

router = APIRouter(tags=["accounts"])


@router.post(
    "/users",
    status_code=201,
    response_model=UserResponse,
    responses={400: {"model": ErrorEnvelope}},
    summary="Register a user",
)
async def create_user(
    request: Request,
    payload: dict[str, Any] = Body(...),
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
    responder: ErrorResponder = Depends(get_responder),
) -> Union[UserResponse, JSONResponse]:
    """Validate the payload and register the user."""
    payload = trim_fields(payload, TRIMMED_FIELDS)
    failure = await validate_payload(USER_RULES, payload)
    if failure is not None:
        return responder.respond(failure, request)

    result = use_case.execute(
        RegisterUserCommand(
            name=payload["name"],
            email=payload["email"],
            password=payload["password"],
        )
    )
    if isinstance(result, Failure):
        return responder.respond(result, request)
    return UserResponse.from_result(result)


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
    summary="Get a user",
)
def get_user(
    user_id: str,
    request: Request,
    use_case: GetUserUseCase = Depends(get_user_use_case),
    responder: ErrorResponder = Depends(get_responder),
) -> Union[UserResponse, JSONResponse]:
    result = use_case.execute(user_id)
    if isinstance(result, Failure):
        return responder.respond(result, request)
    return UserResponse.from_result(result)


@router.post(
    "/auth/login",
    response_model=AccessTokenResponse,
    responses={400: {"model": ErrorEnvelope}, 401: {"model": ErrorEnvelope}},
    summary="Exchange credentials for a bearer token",
)
async def login(
    request: Request,
    payload: dict[str, Any] = Body(...),
    use_case: LoginUseCase = Depends(get_login_use_case),
    responder: ErrorResponder = Depends(get_responder),
) -> Union[AccessTokenResponse, JSONResponse]:
    payload = trim_fields(payload, ("email",))
    failure = await validate_payload(LOGIN_RULES, payload)
    if failure is not None:
        return responder.respond(failure, request)

    result = use_case.execute(
        LoginCommand(email=payload["email"], password=str(payload["password"]))
    )
    if isinstance(result, Failure):
        return responder.respond(result, request)
    return AccessTokenResponse.from_result(result)


@router.get(
    "/protected",
    response_model=ProtectedResponse,
    responses={401: {"model": ErrorEnvelope}},
    summary="Endpoint restricted to authenticated users",
)
def protected(claims: TokenClaims = Depends(require_claims)) -> ProtectedResponse:
    return ProtectedResponse(
        message="Access granted",
        user=AuthenticatedUser(id=claims.subject, email=claims.email),
    )
