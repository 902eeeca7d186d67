"""
Pydantic response schemas for the accounts endpoints.

Request bodies are plain JSON objects checked by the rule sets in
app.interfaces.accounts.rules.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from app.application.accounts.dtos import AccessTokenResult, UserResult


class UserResponse(BaseModel):
    """A registered user. The password hash is never returned."""

    id: UUID
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_result(cls, result: UserResult) -> "UserResponse":
        return cls(
            id=result.id, name=result.name, email=result.email, created_at=result.created_at
        )


class AccessTokenResponse(BaseModel):
    access_token: str
    token_type: str
    expires_in: int

    @classmethod
    def from_result(cls, result: AccessTokenResult) -> "AccessTokenResponse":
        return cls(
            access_token=result.access_token,
            token_type=result.token_type,
            expires_in=result.expires_in,
        )


class AuthenticatedUser(BaseModel):
    id: UUID
    email: str


class ProtectedResponse(BaseModel):
    """Response of the protected endpoint."""

    message: str
    user: AuthenticatedUser
