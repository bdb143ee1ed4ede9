"""Tests for settings and logging configuration."""

from __future__ import annotations

import logging

import pytest

from dochain import ValueAccessError, check, from_outcome, from_value
from dochain.config import LoggingSettings, clear_settings_cache, configure_logging, get_core_settings, get_settings


def test_defaults() -> None:
    """Settings have quiet defaults."""
    settings = get_settings()

    assert settings.debug is False
    assert settings.log_failures is False
    assert settings.show_failure_in_access_error is True
    assert LoggingSettings().level == "WARNING"


def test_settings_cached() -> None:
    assert get_settings() is get_settings()


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """DOCHAIN_* variables configure the settings."""
    monkeypatch.setenv("DOCHAIN_LOG_FAILURES", "true")
    monkeypatch.setenv("DOCHAIN_LOG_LEVEL", "debug")
    clear_settings_cache()

    assert get_settings().log_failures is True
    assert get_core_settings().log_failures is True
    assert LoggingSettings().level == "DEBUG"


def test_hide_failure_in_access_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """The failure text can be kept out of ValueAccessError messages."""
    monkeypatch.setenv("DOCHAIN_SHOW_FAILURE_IN_ACCESS_ERROR", "false")
    clear_settings_cache()

    with pytest.raises(ValueAccessError) as exc_info:
        from_outcome(None, RuntimeError("secret token")).value()

    assert "secret token" not in str(exc_info.value)
    assert exc_info.value.__cause__ is not None


def test_log_failures(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    """With log_failures on, recording a failure emits a debug record."""
    monkeypatch.setenv("DOCHAIN_LOG_FAILURES", "true")
    clear_settings_cache()

    with caplog.at_level(logging.DEBUG, logger="dochain.result"):
        from_value(1).with_error_handler(lambda e: RuntimeError(str(e))).validate(lambda _: ValueError("v"))

    records = [r for r in caplog.records if r.name == "dochain.result"]
    assert len(records) == 1
    assert records[0].step == "validate"  # type: ignore[attr-defined]
    assert records[0].failure_type == "ValueError"  # type: ignore[attr-defined]
    assert records[0].handled is True  # type: ignore[attr-defined]


def test_no_failure_logging_by_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="dochain.result"):
        from_value(1).validate(lambda _: ValueError("v"))

    assert not [r for r in caplog.records if r.name == "dochain.result"]


def test_configure_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """configure_logging applies the configured or given level."""
    logger = logging.getLogger("dochain")
    previous = logger.level
    try:
        monkeypatch.setenv("DOCHAIN_LOG_LEVEL", "ERROR")
        clear_settings_cache()
        assert configure_logging().level == logging.ERROR
        assert configure_logging("info").level == logging.INFO
    finally:
        logger.setLevel(previous)


def test_bad_log_level_does_not_reach_combinators(monkeypatch: pytest.MonkeyPatch) -> None:
    """An invalid logging variable leaves validate() and value() working."""
    monkeypatch.setenv("DOCHAIN_LOG_LEVEL", "TRACE")
    monkeypatch.setenv("DOCHAIN_DEBUG", "not-a-bool")
    clear_settings_cache()

    err = ValueError("v")
    r = from_value(1).validate(lambda _: err)
    assert r.is_error()
    assert r.failure() is err

    with pytest.raises(ValueAccessError):
        from_outcome(None, err).value()
    with pytest.raises(ValueAccessError):
        check(None, err).val()
