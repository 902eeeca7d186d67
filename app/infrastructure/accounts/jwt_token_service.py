"""
Bearer token adapter built on PyJWT.

Signing and verification are delegated entirely to PyJWT; this module
only maps claims to TokenClaims and PyJWT errors to Failure values.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Union
from uuid import UUID

import jwt

from app.core.config import SecurityConfig
from app.domain.accounts.entities import TokenClaims, User
from app.domain.accounts.ports import TokenService
from app.domain.errors import Failure, FailureKind
from app.shared.errors.classifier import failure_from_exception

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["exp", "iat", "sub"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JwtTokenService(TokenService):
    """Issues and verifies HMAC-signed JWTs.

    Args:
        security: Secret, algorithm and lifetime of the tokens.
        clock: Source of the current time, used when issuing.
    """

    def __init__(
        self, security: SecurityConfig, clock: Callable[[], datetime] = _utcnow
    ) -> None:
        self._secret = security.jwt_secret
        self._algorithm = security.jwt_algorithm
        self._lifetime = security.jwt_expiration
        self._clock = clock

    @property
    def lifetime_seconds(self) -> int:
        return self._lifetime

    def issue(self, user: User) -> str:
        issued_at = self._clock()
        claims = {
            "sub": str(user.id),
            "email": user.email,
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self._lifetime),
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Union[TokenClaims, Failure]:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.InvalidTokenError as exc:
            logger.debug("Token rejected: %s", type(exc).__name__)
            return failure_from_exception(exc)

        try:
            subject = UUID(payload["sub"])
        except (TypeError, ValueError) as exc:
            return Failure(FailureKind.INVALID_TOKEN, "Token subject is not a user id", cause=exc)

        return TokenClaims(
            subject=subject,
            email=str(payload.get("email", "")),
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
