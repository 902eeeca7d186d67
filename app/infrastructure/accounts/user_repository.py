"""
In-memory user repository.

Process-local storage for the demo endpoints. Data is lost on restart.
"""

import threading
from typing import Optional
from uuid import UUID

from app.domain.accounts.entities import User
from app.domain.accounts.ports import UserRepository
from app.domain.errors import Failure


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository with a unique email index."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[UUID, User] = {}
        self._ids_by_email: dict[str, UUID] = {}

    def add(self, user: User) -> Optional[Failure]:
        with self._lock:
            if user.email in self._ids_by_email:
                return Failure.duplicate_key(f"Duplicate key: email '{user.email}'")
            self._users[user.id] = user
            self._ids_by_email[user.email] = user.id
        return None

    def get(self, user_id: UUID) -> Optional[User]:
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        user_id = self._ids_by_email.get(email)
        return self._users.get(user_id) if user_id is not None else None
