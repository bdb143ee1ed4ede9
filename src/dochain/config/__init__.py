"""Configuration management using pydantic-settings."""

from .settings import (
    CoreSettings,
    DochainSettings,
    LoggingSettings,
    clear_settings_cache,
    configure_logging,
    get_core_settings,
    get_settings,
)

__all__ = [
    "CoreSettings",
    "DochainSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_core_settings",
    "get_settings",
]
