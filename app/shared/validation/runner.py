"""
Concurrent rule runner.

All rules of a request run concurrently and are joined before the
aggregate check. Results keep rule declaration order.
"""

import asyncio
import logging
from typing import Any, Mapping, Optional, Sequence

from app.domain.errors import Failure, Violation
from app.shared.validation.rules import Rule

logger = logging.getLogger(__name__)


async def run_rules(
    rules: Sequence[Rule], payload: Mapping[str, Any]
) -> tuple[Violation, ...]:
    """Run every rule against the payload and collect the violations.

    Never short-circuits: each failing rule contributes one violation.

    Args:
        rules: Rules in declaration order.
        payload: Parsed request body.

    Returns:
        The violations, ordered like the rules that produced them.
    """
    results = await asyncio.gather(*(rule.check(payload) for rule in rules))
    return tuple(violation for violation in results if violation is not None)


async def validate_payload(
    rules: Sequence[Rule], payload: Mapping[str, Any]
) -> Optional[Failure]:
    """Return a validation Failure when any rule fails, otherwise None."""
    violations = await run_rules(rules, payload)
    if not violations:
        return None
    logger.info(
        "Validation failed on fields: %s",
        ", ".join(dict.fromkeys(v.field for v in violations)),
    )
    return Failure.validation(violations)


def trim_fields(payload: Mapping[str, Any], fields: Sequence[str]) -> dict[str, Any]:
    """Copy of payload with the named string fields stripped of whitespace.

    Applied before validation so rules see the value that gets stored.
    """
    trimmed = dict(payload)
    for field in fields:
        value = trimmed.get(field)
        if isinstance(value, str):
            trimmed[field] = value.strip()
    return trimmed
