"""
Application configuration.

Builds one immutable Settings snapshot from, in increasing priority:
defaults, the process environment, the optional .env override file and the
environment-named JSON file under config/.

There is no module-level settings instance. The snapshot is created once
at startup by ConfigLoader and handed to create_app().
"""

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import dotenv_values
from pydantic import ValidationError, field_validator
from pydantic_core import PydanticCustomError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT = "development"
ENVIRONMENT_VARIABLE = "APP_ENV"
ENV_FILE_NAME = ".env"
CONFIG_DIR_NAME = "config"

ACCEPTED_DATABASE_SCHEMES = ("mongodb://", "postgres://", "postgresql://")
REQUIRED_KEYS = ("port", "database_url", "jwt_secret")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

_FIELD_ERRORS = {
    "port": "Invalid port. Must be between 1 and 65535",
    "database_url": "Invalid database URL. Must be MongoDB or PostgreSQL",
    "jwt_expiration": "jwtExpiration must be a valid number",
}


class ConfigurationError(Exception):
    """Raised when the configuration cannot be loaded or is invalid.

    This is the only fatal error of the service: the process must not
    start serving with a partial configuration.
    """


@dataclass(frozen=True)
class ServerConfig:
    """Network settings for the HTTP server."""

    port: int
    host: str
    ssl_enabled: bool


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection settings for the storage backend."""

    url: str
    options: dict[str, Any]


@dataclass(frozen=True)
class SecurityConfig:
    """Token and session secrets."""

    jwt_secret: str
    jwt_expiration: int
    jwt_algorithm: str
    session_secret: str


class Settings(BaseSettings):
    """Application settings snapshot.

    Attributes:
        environment: Deployment environment (development, test, production).
        port: TCP port the server listens on (1-65535). Required.
        host: Interface the server binds to.
        ssl_enabled: Whether TLS termination is expected in front of the app.
        database_url: Storage DSN. Required; mongodb:// or postgres(ql)://.
        database_options: Driver options passed through untouched.
        jwt_secret: HMAC secret for bearer tokens. Required.
        jwt_expiration: Token lifetime in seconds.
        jwt_algorithm: Signing algorithm for bearer tokens.
        session_secret: Secret for signed session cookies.
        project_name: Display name for the API.
        version: Current API version string.
        debug: Expose interactive docs. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        cors_origins: Origins allowed by the CORS middleware.
        rate_limit: Per-client rate limit applied to every route.
        rate_limit_enabled: Turn the rate limiter on or off.
        max_request_size_bytes: Maximum allowed request body size.
    """

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    environment: str = DEFAULT_ENVIRONMENT

    port: int
    host: str = "localhost"
    ssl_enabled: bool = False

    database_url: str
    database_options: dict[str, Any] = {}

    jwt_secret: str
    jwt_expiration: int = 86_400
    jwt_algorithm: str = "HS256"
    session_secret: str = "default-session-secret"

    project_name: str = "API Skeleton"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    rate_limit: str = "100 per 15 minutes"
    rate_limit_enabled: bool = True
    max_request_size_bytes: int = 10 * 1_048_576  # 10 MB

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # .env overrides the process environment
        return init_settings, dotenv_settings, env_settings, file_secret_settings

    @field_validator("port")
    @classmethod
    def _check_port(cls, value: int) -> int:
        if not 1 <= value <= 65535:
            raise ValueError(_FIELD_ERRORS["port"])
        return value

    @field_validator("database_url", "jwt_secret")
    @classmethod
    def _check_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("missing", "Field required")
        return value

    @field_validator("database_url")
    @classmethod
    def _check_database_scheme(cls, value: str) -> str:
        if not value.startswith(ACCEPTED_DATABASE_SCHEMES):
            raise ValueError(_FIELD_ERRORS["database_url"])
        return value

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def server(self) -> ServerConfig:
        return ServerConfig(port=self.port, host=self.host, ssl_enabled=self.ssl_enabled)

    @property
    def database(self) -> DatabaseConfig:
        return DatabaseConfig(url=self.database_url, options=dict(self.database_options))

    @property
    def security(self) -> SecurityConfig:
        return SecurityConfig(
            jwt_secret=self.jwt_secret,
            jwt_expiration=self.jwt_expiration,
            jwt_algorithm=self.jwt_algorithm,
            session_secret=self.session_secret,
        )


def _to_snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _to_camel_case(key: str) -> str:
    head, *tail = key.split("_")
    return head + "".join(part.title() for part in tail)


class ConfigLoader:
    """Loads and validates the Settings snapshot.

    Args:
        base_dir: Directory holding the .env file and the config/ folder.
            Defaults to the current working directory.
    """

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    def load(self) -> Settings:
        """Read every configuration source and validate the result.

        Returns:
            The validated, frozen Settings snapshot.

        Raises:
            ConfigurationError: If a source cannot be read or parsed, or if a
                required key is missing or malformed.
        """
        env_file = self._base_dir / ENV_FILE_NAME
        env_file_values = self._read_env_file(env_file)

        environment = (
            env_file_values.get(ENVIRONMENT_VARIABLE)
            or os.environ.get(ENVIRONMENT_VARIABLE)
            or DEFAULT_ENVIRONMENT
        )
        file_values = self._read_environment_file(environment)

        try:
            settings = Settings(
                _env_file=env_file if env_file_values else None,
                **{**file_values, "environment": environment},
            )
        except ValidationError as exc:
            raise ConfigurationError(self._describe(exc)) from exc

        logger.info("Configuration loaded for environment=%s", environment)
        return settings

    def _read_env_file(self, path: Path) -> dict[str, Optional[str]]:
        if not path.exists():
            logger.warning(".env file not found, using process environment only")
            return {}
        if not path.is_file():
            raise ConfigurationError(f"Could not read .env file: {path} is not a regular file")
        try:
            return dotenv_values(path, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(f"Could not read .env file: {exc}") from exc

    def _read_environment_file(self, environment: str) -> dict[str, Any]:
        path = self._base_dir / CONFIG_DIR_NAME / f"{environment}.json"
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("Configuration file for %s not found: %s", environment, path)
            return {}
        except OSError as exc:
            raise ConfigurationError(
                f"Could not read configuration file {path}: {exc}"
            ) from exc

        try:
            content = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(
                f"Malformed configuration file {path}: {exc}"
            ) from exc
        if not isinstance(content, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a JSON object"
            )

        values = {_to_snake_case(key): value for key, value in content.items()}
        values.pop("environment", None)
        return values

    @staticmethod
    def _describe(exc: ValidationError) -> str:
        missing: list[str] = []
        problems: list[str] = []
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "settings"
            if error["type"] == "missing":
                missing.append(_to_camel_case(field))
            elif field in _FIELD_ERRORS:
                problems.append(_FIELD_ERRORS[field])
            else:
                problems.append(f"{_to_camel_case(field)}: {error['msg']}")

        if missing:
            ordered = [
                _to_camel_case(key)
                for key in REQUIRED_KEYS
                if _to_camel_case(key) in missing
            ]
            return "Incomplete configuration. Missing: " + ", ".join(ordered)
        return "; ".join(dict.fromkeys(problems))


def load_settings(base_dir: Optional[Path] = None) -> Settings:
    """Convenience wrapper around ConfigLoader(base_dir).load()."""
    return ConfigLoader(base_dir).load()
