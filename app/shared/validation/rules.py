"""
Field validation rules.

Each rule checks one field of a payload and yields at most one violation.
Predicates may be plain functions or coroutines.
"""

import inspect
import math
import re
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from app.domain.errors import Violation

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

Predicate = Callable[[Any], Union[bool, Awaitable[bool]]]


@dataclass(frozen=True)
class Rule:
    """A single check over one payload field.

    Attributes:
        field: Payload key the rule reads.
        message: Violation message reported when the check fails.
        predicate: Returns True when the value is acceptable.
        optional: Absent or null values pass without running the predicate.
    """

    field: str
    message: str
    predicate: Predicate
    optional: bool = False

    async def check(self, payload: Mapping[str, Any]) -> Optional[Violation]:
        """Run the rule against a payload.

        A missing field fails every non-optional rule.
        """
        value = payload.get(self.field)
        if value is None:
            return None if self.optional else Violation(self.field, self.message)

        result = self.predicate(value)
        if inspect.isawaitable(result):
            result = await result
        return None if result else Violation(self.field, self.message)


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def is_email(field: str, message: str = "Invalid email format") -> Rule:
    return Rule(
        field,
        message,
        lambda value: isinstance(value, str) and bool(EMAIL_PATTERN.match(value.strip())),
    )


def length(
    field: str,
    message: str,
    min_length: int = 0,
    max_length: Optional[int] = None,
) -> Rule:
    """String length between min_length and max_length, both inclusive."""

    def predicate(value: Any) -> bool:
        if not isinstance(value, str):
            return False
        if len(value) < min_length:
            return False
        return max_length is None or len(value) <= max_length

    return Rule(field, message, predicate)


def matches(field: str, pattern: str, message: str) -> Rule:
    """String contains a match for pattern (re.search semantics)."""
    compiled = re.compile(pattern)
    return Rule(
        field,
        message,
        lambda value: isinstance(value, str) and compiled.search(value) is not None,
    )


def in_range(
    field: str,
    message: str,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
) -> Rule:
    """Numeric value (or numeric string) between minimum and maximum."""

    def predicate(value: Any) -> bool:
        number = _as_number(value)
        if number is None:
            return False
        if minimum is not None and number < minimum:
            return False
        return maximum is None or number <= maximum

    return Rule(field, message, predicate)


def required(field: str, message: str) -> Rule:
    """Field is present and not an empty or blank string."""
    return Rule(
        field,
        message,
        lambda value: not (isinstance(value, str) and not value.strip()),
    )


def optional(rule: Rule) -> Rule:
    """Same rule, but satisfied when the field is absent or null."""
    return replace(rule, optional=True)
