"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers and the error responder
- Security middleware (headers, CORS, body size, rate limiting)
- Logging configuration
- Application-scoped adapters (repositories, password hasher, tokens)

No business logic belongs here.
"""

import logging
import sys
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import ConfigurationError, Settings, load_settings
from app.domain.accounts.ports import PasswordHasher
from app.infrastructure.accounts.jwt_token_service import JwtTokenService
from app.infrastructure.accounts.password_hasher import Argon2PasswordHasher
from app.infrastructure.accounts.user_repository import InMemoryUserRepository
from app.infrastructure.catalog.product_repository import InMemoryProductRepository
from app.interfaces.accounts.router import router as accounts_router
from app.interfaces.catalog.router import router as catalog_router
from app.interfaces.health import router as health_router
from app.interfaces.system.router import router as system_router
from app.shared.errors.handlers import ErrorResponder, register_error_handlers
from app.shared.logging import RequestLoggingMiddleware, configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import build_limiter
from app.shared.security.request_size import RequestSizeLimitMiddleware

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

EXIT_OK = 0
EXIT_CONFIGURATION_ERROR = 1


def create_app(
    settings: Settings, password_hasher: Optional[PasswordHasher] = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. The settings snapshot
    is stored on app.state and reaches every component from there.

    Args:
        settings: The loaded configuration snapshot.
        password_hasher: Override for the Argon2 hasher (tests use cheap
            parameters).

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.state.settings = settings
    app.state.started_at = time.monotonic()
    app.state.responder = ErrorResponder(settings)
    app.state.user_repository = InMemoryUserRepository()
    app.state.product_repository = InMemoryProductRepository()
    app.state.password_hasher = password_hasher or Argon2PasswordHasher()
    app.state.token_service = JwtTokenService(settings.security)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)

    # --- Middleware (last added runs first) ---
    app.add_middleware(
        RequestSizeLimitMiddleware, max_bytes=settings.max_request_size_bytes
    )
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware, hsts=settings.ssl_enabled)
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(system_router, prefix=API_PREFIX)
    app.include_router(accounts_router, prefix=API_PREFIX)
    app.include_router(catalog_router, prefix=API_PREFIX)

    return app


def get_application() -> FastAPI:
    """Factory for `uvicorn app.main:get_application --factory`.

    Raises:
        ConfigurationError: If the configuration cannot be loaded.
    """
    return create_app(load_settings())


def run() -> None:
    """Load the configuration and serve until a termination signal.

    Exits with status 1 when the configuration is unusable and with
    status 0 after a graceful shutdown (SIGINT/SIGTERM, handled by uvicorn).
    """
    configure_logging()
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.critical("Could not load configuration: %s", exc)
        sys.exit(EXIT_CONFIGURATION_ERROR)

    app = create_app(settings)
    server = settings.server
    logger.info(
        "Starting server on %s://%s:%d",
        "https" if server.ssl_enabled else "http",
        server.host,
        server.port,
    )
    uvicorn.run(app, host=server.host, port=server.port, log_level=settings.log_level.lower())
    logger.info("Server stopped")
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    run()
