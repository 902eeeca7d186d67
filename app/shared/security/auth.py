"""
Bearer token authentication dependency.

authenticate returns the verified TokenClaims, or a Failure the route hands
to the error responder. require_claims raises that Failure as a
FailureError instead, for routes that only run when authenticated.
"""

from typing import Optional, Union

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.domain.accounts.entities import TokenClaims
from app.domain.errors import Failure, FailureError

HTTP_401 = 401

bearer_scheme = HTTPBearer(auto_error=False)


def authenticate(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Union[TokenClaims, Failure]:
    """Verify the Authorization: Bearer header of the request.

    Returns:
        The token claims, an UNCLASSIFIED 401 failure when no bearer token
        was sent, or the INVALID_TOKEN / EXPIRED_TOKEN failure reported by
        the token service.
    """
    if credentials is None or not credentials.credentials:
        return Failure.unclassified("Access token required", status_code=HTTP_401)
    return request.app.state.token_service.verify(credentials.credentials)


def require_claims(
    auth: Union[TokenClaims, Failure] = Depends(authenticate),
) -> TokenClaims:
    """Like authenticate, but aborts the request when it fails.

    Raises:
        FailureError: Carrying the authentication failure.
    """
    if isinstance(auth, Failure):
        raise FailureError(auth)
    return auth
