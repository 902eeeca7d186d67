"""
Centralized error responder and FastAPI exception handlers.

ErrorResponder is the single place that writes error responses. Routes
hand it the Failure values returned by use cases; the exception handlers
registered here hand it everything that is raised instead.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from jwt import PyJWTError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings
from app.domain.errors import Failure, FailureError
from app.shared.errors.classifier import build_envelope, classify, failure_from_exception

logger = logging.getLogger(__name__)


class ErrorResponder:
    """Turns a Failure into exactly one JSON error response.

    In the development environment the original failure, including the
    traceback of its cause, is logged before the response is built.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def respond(self, failure: Failure, request: Request) -> JSONResponse:
        """Classify a failure and build its HTTP response.

        Args:
            failure: The failure to report.
            request: The request that failed.

        Returns:
            The JSON error response.
        """
        if self._settings.is_development:
            logger.error(
                "%s %s failed: kind=%s message=%s",
                request.method,
                request.url.path,
                failure.kind.value,
                failure.message,
                exc_info=failure.cause,
            )

        classification = classify(failure)
        body = build_envelope(
            failure, classification, production=self._settings.is_production
        )
        return JSONResponse(status_code=classification.status_code, content=body)


def get_responder(request: Request) -> ErrorResponder:
    """Return the responder bound to the running application."""
    return request.app.state.responder


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Report a rate limit hit through the responder.

    Kept synchronous: the slowapi middleware calls it without awaiting.
    """
    return get_responder(request).respond(failure_from_exception(exc), request)


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed or schema-violating request input."""
        return get_responder(request).respond(failure_from_exception(exc), request)

    @app.exception_handler(FailureError)
    async def handle_failure_error(request: Request, exc: FailureError) -> JSONResponse:
        """Handle a failure raised by a dependency that aborts the request."""
        return get_responder(request).respond(exc.failure, request)

    @app.exception_handler(PyJWTError)
    async def handle_token_error(request: Request, exc: PyJWTError) -> JSONResponse:
        """Handle token errors raised outside the bearer dependency."""
        return get_responder(request).respond(failure_from_exception(exc), request)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors (unknown route, wrong method)."""
        return get_responder(request).respond(failure_from_exception(exc), request)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return get_responder(request).respond(failure_from_exception(exc), request)

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
