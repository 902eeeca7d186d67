"""
Failure model shared by every bounded context.

A failure is a closed set of kinds carried by a single immutable record.
Validators, use cases and auth dependencies return Failure values; the
error responder turns them into HTTP responses.
No framework imports allowed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureKind(Enum):
    """Origin of a failure, as seen by the error classifier."""

    INVALID_ID = "invalid_id"
    DUPLICATE_KEY = "duplicate_key"
    VALIDATION = "validation"
    INVALID_TOKEN = "invalid_token"
    EXPIRED_TOKEN = "expired_token"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class Violation:
    """A single field-level validation failure.

    Attributes:
        field: Name of the offending field.
        message: Human readable explanation.
    """

    field: str
    message: str


@dataclass(frozen=True)
class Failure:
    """Something that went wrong while serving a request.

    Attributes:
        kind: Discriminant used by the classifier.
        message: Raw message from the point of failure.
        status_code: Optional HTTP status hint for unclassified failures.
        operational: True for expected, user-facing conditions; False for
            unexpected internal faults.
        violations: Field violations, only for FailureKind.VALIDATION.
        cause: The native exception this failure was built from, if any.
    """

    kind: FailureKind
    message: str = ""
    status_code: Optional[int] = None
    operational: bool = True
    violations: tuple[Violation, ...] = ()
    cause: Optional[BaseException] = None

    @classmethod
    def invalid_id(cls, message: str, cause: Optional[BaseException] = None) -> "Failure":
        return cls(FailureKind.INVALID_ID, message, cause=cause)

    @classmethod
    def duplicate_key(cls, message: str) -> "Failure":
        return cls(FailureKind.DUPLICATE_KEY, message)

    @classmethod
    def validation(cls, violations: tuple[Violation, ...]) -> "Failure":
        return cls(
            FailureKind.VALIDATION,
            "Validation failed",
            violations=tuple(violations),
        )

    @classmethod
    def unclassified(
        cls,
        message: str,
        status_code: Optional[int] = None,
        operational: bool = True,
        cause: Optional[BaseException] = None,
    ) -> "Failure":
        return cls(
            FailureKind.UNCLASSIFIED,
            message,
            status_code=status_code,
            operational=operational,
            cause=cause,
        )



class FailureError(Exception):
    """Aborts a request with a Failure.

    Only for dependencies that cannot return a value to their route; the
    registered exception handler unwraps the failure for the responder.
    """

    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.message)
        self.failure = failure
