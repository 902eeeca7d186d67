"""
OpenAPI schemas for the error envelope.

Documentation only: the body itself is built by build_envelope().
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ViolationSchema(BaseModel):
    """One field-level validation failure."""

    field: str
    message: str


class ErrorEnvelope(BaseModel):
    """JSON body of every error response.

    errorDetail and stackTrace are only present outside production.
    """

    status: str = Field(..., description='"fail" for 4xx, "error" for 5xx')
    message: str
    errors: Optional[list[ViolationSchema]] = None
    errorDetail: Optional[dict[str, Any]] = None
    stackTrace: Optional[str] = None
