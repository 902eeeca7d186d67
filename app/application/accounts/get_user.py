"""
Use case: Fetch a user by id.

Failure cases: INVALID_ID for a malformed id, 404 when the user is unknown.
"""

from typing import Union

from app.application.accounts.dtos import UserResult
from app.application.identifiers import parse_id
from app.domain.accounts.ports import UserRepository
from app.domain.errors import Failure

HTTP_404 = 404


class GetUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(self, raw_user_id: str) -> Union[UserResult, Failure]:
        user_id = parse_id(raw_user_id, "user")
        if isinstance(user_id, Failure):
            return user_id

        user = self._user_repository.get(user_id)
        if user is None:
            return Failure.unclassified("User not found", status_code=HTTP_404)
        return UserResult(
            id=user.id, name=user.name, email=user.email, created_at=user.created_at
        )
