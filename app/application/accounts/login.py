"""
Use case: Exchange email and password for a bearer token.

Input: LoginCommand (email, password)
Output: AccessTokenResult
Side effects: None.
Failure cases: 401 for an unknown email or a wrong password. Both cases
share one message so callers cannot probe for registered emails.
"""

import logging
from typing import Union

from app.application.accounts.dtos import AccessTokenResult, LoginCommand
from app.application.accounts.register_user import normalize_email
from app.domain.accounts.ports import PasswordHasher, TokenService, UserRepository
from app.domain.errors import Failure

logger = logging.getLogger(__name__)

HTTP_401 = 401
INVALID_CREDENTIALS = "Invalid email or password"


class LoginUseCase:
    """Verifies credentials and issues a bearer token."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_service = token_service

    def execute(self, command: LoginCommand) -> Union[AccessTokenResult, Failure]:
        user = self._user_repository.get_by_email(normalize_email(command.email))
        if user is None or not self._password_hasher.verify(
            user.password_hash, command.password
        ):
            logger.info("Rejected login attempt")
            return Failure.unclassified(INVALID_CREDENTIALS, status_code=HTTP_401)

        return AccessTokenResult(
            access_token=self._token_service.issue(user),
            token_type="bearer",
            expires_in=self._token_service.lifetime_seconds,
        )
