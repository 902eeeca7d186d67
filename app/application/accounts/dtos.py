"""
Data Transfer Objects for the accounts application layer.

They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RegisterUserCommand:
    """Input DTO for registering a user."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class LoginCommand:
    """Input DTO for exchanging credentials for a token."""

    email: str
    password: str


@dataclass(frozen=True)
class UserResult:
    """Output DTO describing a user. Never carries the password hash."""

    id: UUID
    name: str
    email: str
    created_at: datetime


@dataclass(frozen=True)
class AccessTokenResult:
    """Output DTO for a successful login.

    Attributes:
        access_token: Signed bearer token.
        token_type: Always "bearer".
        expires_in: Token lifetime in seconds.
    """

    access_token: str
    token_type: str
    expires_in: int
