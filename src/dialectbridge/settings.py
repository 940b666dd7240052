"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for DialectBridge.

    Values are read from ``DIALECTBRIDGE_*`` environment variables and from
    a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIALECTBRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Dialect used when no registered dialect claims a connection URL
    default_dialect: str = "generic"

    # Pushdown pipeline
    validate_sql: bool = True  # non-blocking sqlglot check of the scan query


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging for an entry point embedding the library."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
