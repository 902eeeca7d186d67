"""
Use case: Register a new user.

Input: RegisterUserCommand (name, email, password)
Output: UserResult
Side effects: Stores the user.
Failure cases: DUPLICATE_KEY when the email is already registered.
"""

import logging
from datetime import datetime, timezone
from typing import Union
from uuid import uuid4

from app.application.accounts.dtos import RegisterUserCommand, UserResult
from app.domain.accounts.entities import User
from app.domain.accounts.ports import PasswordHasher, UserRepository
from app.domain.errors import Failure

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class RegisterUserUseCase:
    """Creates a user with a hashed password."""

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self._user_repository = user_repository
        self._password_hasher = password_hasher

    def execute(self, command: RegisterUserCommand) -> Union[UserResult, Failure]:
        """Register the user described by the command.

        Args:
            command: Validated registration data.

        Returns:
            The created user, or a DUPLICATE_KEY failure.
        """
        user = User(
            id=uuid4(),
            name=command.name,
            email=normalize_email(command.email),
            password_hash=self._password_hasher.hash(command.password),
            created_at=datetime.now(timezone.utc),
        )
        failure = self._user_repository.add(user)
        if failure is not None:
            return failure

        logger.info("Registered user id=%s", user.id)
        return UserResult(
            id=user.id, name=user.name, email=user.email, created_at=user.created_at
        )
