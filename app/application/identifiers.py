"""
Identifier parsing shared by the use cases.
"""

from typing import Union
from uuid import UUID

from app.domain.errors import Failure


def parse_id(raw: str, entity: str) -> Union[UUID, Failure]:
    """Cast a path identifier to a UUID.

    Returns an INVALID_ID failure when the value is not a UUID.
    """
    try:
        return UUID(raw)
    except ValueError as exc:
        return Failure.invalid_id(f"Cast to UUID failed for {entity} id '{raw}'", cause=exc)
