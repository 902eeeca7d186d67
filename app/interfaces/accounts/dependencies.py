"""
Dependency injection for the accounts bounded context.

Wires the application-scoped adapters stored on app.state into use cases.
"""

from fastapi import Request

from app.application.accounts.get_user import GetUserUseCase
from app.application.accounts.login import LoginUseCase
from app.application.accounts.register_user import RegisterUserUseCase


def get_register_user_use_case(request: Request) -> RegisterUserUseCase:
    state = request.app.state
    return RegisterUserUseCase(
        user_repository=state.user_repository,
        password_hasher=state.password_hasher,
    )


def get_user_use_case(request: Request) -> GetUserUseCase:
    return GetUserUseCase(user_repository=request.app.state.user_repository)


def get_login_use_case(request: Request) -> LoginUseCase:
    state = request.app.state
    return LoginUseCase(
        user_repository=state.user_repository,
        password_hasher=state.password_hasher,
        token_service=state.token_service,
    )
