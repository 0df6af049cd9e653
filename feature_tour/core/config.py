"""Runtime settings read from environment variables.

Example:
    settings = Settings.from_env()
    configure_logging(development=settings.development, log_level=settings.log_level)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from os import environ

from feature_tour.core.errors import ConfigurationError

SUPPORTED_CATALOG_BACKENDS = ("static", "memory")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as ex:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}", original_error=ex) from ex


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Attributes:
        environment: "development" or "production".
        log_level: Log level name.
        api_host: Interface uvicorn binds to.
        api_port: Port uvicorn listens on.
        api_reload: Enable uvicorn auto-reload.
        app_version: Version reported by the API and health checks.
        cors_origins: Allowed CORS origins.
        catalog_backend: Which topic catalog adapter to load.
        initial_topic_id: Topic to open on startup, if any.
    """

    environment: str = "development"
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    app_version: str = "1.0.0"
    cors_origins: tuple[str, ...] = ("*",)
    catalog_backend: str = "static"
    initial_topic_id: str | None = None

    @property
    def development(self) -> bool:
        return self.environment.lower() != "production"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            env: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ConfigurationError: If a value is malformed or unsupported.
        """
        if env is None:
            env = environ

        cors_env = env.get("CORS_ORIGINS", "*")
        if cors_env == "*":
            cors_origins: tuple[str, ...] = ("*",)
        else:
            cors_origins = tuple(origin.strip() for origin in cors_env.split(",") if origin.strip())

        catalog_backend = env.get("CATALOG_BACKEND", "static").lower()
        if catalog_backend not in SUPPORTED_CATALOG_BACKENDS:
            raise ConfigurationError(
                f"Unsupported CATALOG_BACKEND: {catalog_backend!r}. "
                f"Supported backends: {', '.join(SUPPORTED_CATALOG_BACKENDS)}"
            )

        return cls(
            environment=env.get("ENVIRONMENT", "development").lower(),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            api_host=env.get("API_HOST", "0.0.0.0"),
            api_port=_parse_int("API_PORT", env.get("API_PORT", "8000")),
            api_reload=_parse_bool(env.get("API_RELOAD", "false")),
            app_version=env.get("APP_VERSION", "1.0.0"),
            cors_origins=cors_origins,
            catalog_backend=catalog_backend,
            initial_topic_id=env.get("INITIAL_TOPIC_ID") or None,
        )
