"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, uptime and version.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from app.core.config import Settings
from app.interfaces.dependencies import get_settings
from app.interfaces.system.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, uptime and version.",
)
def health_check(
    request: Request, settings: Settings = Depends(get_settings)
) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        uptime_seconds=round(time.monotonic() - request.app.state.started_at, 3),
        version=settings.version,
    )
