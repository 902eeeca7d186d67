"""
FastAPI router for service status and diagnostics.

The simulated error endpoint exists to exercise the error responder.
"""

import logging
import platform
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.config import Settings
from app.domain.errors import Failure
from app.interfaces.dependencies import get_settings
from app.interfaces.system.schemas import (
    ServiceStatusResponse,
    SystemInfoResponse,
    WelcomeResponse,
)
from app.shared.errors.handlers import ErrorResponder, get_responder
from app.shared.errors.schemas import ErrorEnvelope

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])

SIMULATED_ERROR_MESSAGE = "Simulated server error for testing purposes"


@router.get(
    "",
    response_model=ServiceStatusResponse,
    summary="Service status",
    description="Confirms that the service is running.",
)
def service_status() -> ServiceStatusResponse:
    return ServiceStatusResponse(status="OK", message="Service is running")


@router.get("/welcome", response_model=WelcomeResponse, summary="Welcome message")
def welcome(settings: Settings = Depends(get_settings)) -> WelcomeResponse:
    """Return a welcome message with the environment and docs location."""
    logger.info("Welcome message sent")
    return WelcomeResponse(
        message="Welcome to the API",
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc),
        documentation="/docs" if settings.debug else None,
    )


@router.get("/system", response_model=SystemInfoResponse, summary="System information")
def system_info(
    request: Request, settings: Settings = Depends(get_settings)
) -> SystemInfoResponse:
    """Return runtime information about the service process."""
    return SystemInfoResponse(
        environment=settings.environment,
        python_version=platform.python_version(),
        platform=platform.system(),
        uptime_seconds=round(time.monotonic() - request.app.state.started_at, 3),
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/errors/simulate",
    responses={500: {"model": ErrorEnvelope}},
    summary="Simulate a server error",
)
def simulate_error(
    request: Request, responder: ErrorResponder = Depends(get_responder)
) -> JSONResponse:
    """Always answer with a 500 produced by the error responder."""
    failure = Failure.unclassified(SIMULATED_ERROR_MESSAGE, status_code=500, operational=False)
    return responder.respond(failure, request)
