"""Environment-based configuration using pydantic-settings.

Example:
    >>> from dochain.config import get_settings
    >>> settings = get_settings()
    >>> settings.log_failures
    False

    # Or with environment variables:
    # DOCHAIN_LOG_FAILURES=true
    # DOCHAIN_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DOCHAIN_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class CoreSettings(BaseSettings):
    """Flags read by the Result combinators.

    Only these fields are validated, so a bad value in any other
    ``DOCHAIN_*`` variable never reaches ``value()`` or ``validate()``.

    Example environment variables:
        DOCHAIN_LOG_FAILURES=true
        DOCHAIN_SHOW_FAILURE_IN_ACCESS_ERROR=false
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCHAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    log_failures: bool = Field(
        default=False,
        description="Log a debug record whenever a combinator records a new failure",
    )
    show_failure_in_access_error: bool = Field(
        default=True,
        description="Include the recorded failure in ValueAccessError messages",
    )


class DochainSettings(CoreSettings):
    """Root settings for dochain.

    Example environment variables:
        DOCHAIN_DEBUG=true
        DOCHAIN_LOG_FAILURES=true
    """

    debug: bool = Field(default=False, description="Enable debug mode")


@lru_cache(maxsize=1)
def get_core_settings() -> CoreSettings:
    """Get the combinator flags (cached)."""
    return CoreSettings()


@lru_cache(maxsize=1)
def get_settings() -> DochainSettings:
    """Get the global settings instance (cached)."""
    return DochainSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
    get_core_settings.cache_clear()


def configure_logging(level: str | None = None) -> logging.Logger:
    """Apply a log level to the ``dochain`` logger namespace.

    Uses ``DOCHAIN_LOG_LEVEL`` (or DEBUG when ``DOCHAIN_DEBUG`` is set) when
    ``level`` is omitted. Handlers are left to the application.
    """
    if level is not None:
        resolved = level.upper()
    elif get_settings().debug:
        resolved = "DEBUG"
    else:
        resolved = LoggingSettings().level
    logger = logging.getLogger("dochain")
    logger.setLevel(getattr(logging, resolved, logging.WARNING))
    return logger
