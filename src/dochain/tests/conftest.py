"""Shared fixtures for dochain tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from dochain.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings() -> Iterator[None]:
    """Reload settings from the environment around each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
