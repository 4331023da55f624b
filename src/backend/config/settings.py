"""Centralized application settings loaded from environment variables.

All configuration is defined once here. Other modules should import
``get_settings()`` rather than calling ``os.getenv()`` directly.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide configuration backed by environment variables.

    Field names are **lowercased** versions of the env-var names.
    ``pydantic-settings`` maps them automatically (case-insensitive).

    Example::

        settings = Settings()  # reads .env + real env
        database = settings.database_name
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- PostgreSQL --------------------------------------------------------

    database_host: str = "localhost"
    """PostgreSQL server hostname."""

    database_port: int = 5432
    """PostgreSQL server port."""

    database_user: str = "vagrant"
    """Login role used by the connection pool."""

    database_password: str = "123"
    """Password for ``database_user``."""

    database_name: str = "lightbnb"
    """Target database name."""

    database_pool_min_size: int = 1
    """Connections opened when the pool is created."""

    database_pool_max_size: int = 10
    """Upper bound on pooled connections."""

    # -- Queries -----------------------------------------------------------

    default_result_limit: int = 10
    """Row bound used when a caller does not pass ``limit``."""

    # -- Operational -------------------------------------------------------

    log_level: str = "INFO"
    """Root log level for the API process."""

    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    """Origins allowed by the CORS middleware."""


def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    Uses ``lru_cache`` semantics via a module-level singleton so the
    ``.env`` file is read at most once per process.

    Returns:
        The global ``Settings`` object.
    """
    return _settings


_settings = Settings()
