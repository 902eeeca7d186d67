"""
Port interfaces (ABCs) for the accounts bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from app.domain.accounts.entities import TokenClaims, User
from app.domain.errors import Failure


class UserRepository(ABC):
    """Port for storing and retrieving users."""

    @abstractmethod
    def add(self, user: User) -> Optional[Failure]:
        """Store a new user. Returns a DUPLICATE_KEY failure if the email is taken."""
        raise NotImplementedError

    @abstractmethod
    def get(self, user_id: UUID) -> Optional[User]:
        """Return the user with this id, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user with this normalized email, or None."""
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def verify(self, password_hash: str, password: str) -> bool:
        raise NotImplementedError


class TokenService(ABC):
    """Port for issuing and verifying bearer tokens."""

    @abstractmethod
    def issue(self, user: User) -> str:
        """Return a signed token for the user."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> Union[TokenClaims, Failure]:
        """Return the token claims, or an INVALID_TOKEN / EXPIRED_TOKEN failure."""
        raise NotImplementedError

    @property
    @abstractmethod
    def lifetime_seconds(self) -> int:
        raise NotImplementedError
