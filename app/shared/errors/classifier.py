"""
Failure classification.

Maps every Failure to a final (status code, message) pair and builds the
JSON error envelope. Also converts native exceptions raised by the
framework and libraries into Failure records.

Everything in this module is pure: identical input always produces an
identical result.
"""

import traceback
from dataclasses import dataclass
from typing import Any, Callable, Optional

import jwt
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.errors import Failure, FailureError, FailureKind, Violation

GENERIC_MESSAGE = "Internal Server Error"
DEFAULT_STATUS_CODE = 500
RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later"

_HTTP_MESSAGES = {
    404: "Route not found",
    405: "Method not allowed",
}


@dataclass(frozen=True)
class Classification:
    """Final HTTP outcome of a failure."""

    status_code: int
    message: str

    @property
    def status(self) -> str:
        """'fail' for client errors (4xx), 'error' for everything else."""
        return "fail" if str(self.status_code).startswith("4") else "error"


def _join_violations(failure: Failure) -> str:
    return ", ".join(v.message for v in failure.violations) or failure.message


# Ordered: the first matching kind wins.
_CLASSIFICATION_TABLE: tuple[tuple[FailureKind, int, Callable[[Failure], str]], ...] = (
    (FailureKind.INVALID_ID, 400, lambda _: "Invalid ID format"),
    (FailureKind.DUPLICATE_KEY, 400, lambda _: "Duplicate field value entered"),
    (FailureKind.VALIDATION, 400, _join_violations),
    (FailureKind.INVALID_TOKEN, 401, lambda _: "Invalid token"),
    (FailureKind.EXPIRED_TOKEN, 401, lambda _: "Token expired"),
)


def classify(failure: Failure) -> Classification:
    """Return the status code and client message for a failure."""
    for kind, status_code, message in _CLASSIFICATION_TABLE:
        if failure.kind is kind:
            return Classification(status_code=status_code, message=message(failure))
    return Classification(
        status_code=failure.status_code or DEFAULT_STATUS_CODE,
        message=failure.message or GENERIC_MESSAGE,
    )


def _format_stack(cause: Optional[BaseException]) -> Optional[str]:
    if cause is None:
        return None
    return "".join(traceback.format_exception(type(cause), cause, cause.__traceback__))


def build_envelope(
    failure: Failure, classification: Classification, *, production: bool
) -> dict[str, Any]:
    """Build the JSON body for an error response.

    Server errors never expose their raw message in production, and the
    errorDetail/stackTrace fields only exist outside production.

    Args:
        failure: The original failure.
        classification: Result of classify(failure).
        production: Whether the service runs in the production environment.

    Returns:
        A JSON-serializable dict.
    """
    message = classification.message
    if production and classification.status_code >= 500:
        message = GENERIC_MESSAGE

    body: dict[str, Any] = {"status": classification.status, "message": message}
    if failure.violations:
        body["errors"] = [
            {"field": v.field, "message": v.message} for v in failure.violations
        ]
    if not production:
        body["errorDetail"] = {
            "kind": failure.kind.value,
            "message": failure.message,
            "operational": failure.operational,
            "type": type(failure.cause).__name__ if failure.cause is not None else None,
        }
        body["stackTrace"] = _format_stack(failure.cause)
    return body


def _violations_from_errors(errors: list[dict[str, Any]]) -> tuple[Violation, ...]:
    violations = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        violations.append(Violation(field=".".join(loc) or "body", message=error["msg"]))
    return tuple(violations)


def failure_from_exception(exc: BaseException) -> Failure:
    """Convert a native exception into a Failure record.

    Checks run from the most specific type to the least specific one:
    an expired token is also an invalid token, and a rate limit error is
    also an HTTP exception.
    """
    if isinstance(exc, jwt.ExpiredSignatureError):
        return Failure(FailureKind.EXPIRED_TOKEN, str(exc), cause=exc)
    if isinstance(exc, jwt.InvalidTokenError):
        return Failure(FailureKind.INVALID_TOKEN, str(exc), cause=exc)
    if isinstance(exc, (RequestValidationError, ValidationError)):
        return Failure(
            FailureKind.VALIDATION,
            "Validation failed",
            violations=_violations_from_errors(list(exc.errors())),
            cause=exc,
        )
    if isinstance(exc, FailureError):
        return exc.failure
    if isinstance(exc, RateLimitExceeded):
        return Failure.unclassified(RATE_LIMIT_MESSAGE, status_code=429, cause=exc)
    if isinstance(exc, StarletteHTTPException):
        message = _HTTP_MESSAGES.get(exc.status_code, str(exc.detail))
        return Failure.unclassified(message, status_code=exc.status_code, cause=exc)
    return Failure.unclassified(
        str(exc) or type(exc).__name__,
        status_code=DEFAULT_STATUS_CODE,
        operational=False,
        cause=exc,
    )
