"""
Domain entities for the accounts bounded context.

They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class User:
    """A registered user.

    Attributes:
        id: Unique identifier.
        name: Display name.
        email: Normalized (lower-cased) email address, unique.
        password_hash: Opaque hash produced by the PasswordHasher port.
        created_at: Registration timestamp (UTC).
    """

    id: UUID
    name: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(frozen=True)
class TokenClaims:
    """Verified content of a bearer token."""

    subject: UUID
    email: str
    issued_at: datetime
    expires_at: datetime
