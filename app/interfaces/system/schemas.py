"""
Pydantic schemas for the service status endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    timestamp: datetime
    uptime_seconds: float
    version: str


class ServiceStatusResponse(BaseModel):
    status: str
    message: str


class WelcomeResponse(BaseModel):
    """Response schema for the welcome endpoint.

    Attributes:
        message: Greeting.
        environment: Deployment environment name.
        timestamp: Server time (UTC).
        documentation: Path of the interactive docs, None when disabled.
    """

    message: str
    environment: str
    timestamp: datetime
    documentation: Optional[str]


class SystemInfoResponse(BaseModel):
    """Response schema for the system information endpoint."""

    environment: str
    python_version: str
    platform: str
    uptime_seconds: float
    timestamp: datetime
