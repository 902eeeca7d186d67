"""
Request body size limit.

Rejects requests whose declared Content-Length exceeds the configured
maximum, before the body is read.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.domain.errors import Failure
from app.shared.errors.handlers import get_responder

HTTP_413 = 413


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Answers 413 for bodies larger than max_bytes."""

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        super().__init__(app)
        self._max_bytes = max_bytes

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        declared = request.headers.get("content-length")
        if declared is not None:
            if not (declared.isascii() and declared.isdigit()):
                failure = Failure.unclassified("Invalid Content-Length header", status_code=400)
                return get_responder(request).respond(failure, request)
            if int(declared) > self._max_bytes:
                failure = Failure.unclassified("Request body too large", status_code=HTTP_413)
                return get_responder(request).respond(failure, request)
        return await call_next(request)
