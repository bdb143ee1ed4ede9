"""Tests for the handler-less Either pair."""

from __future__ import annotations

import pytest

from dochain import Either, ValueAccessError, check


def test_check_ok() -> None:
    """No error means the value is available."""
    e = check("value", None)

    assert not e.is_error()
    assert e.err() is None
    assert e.val() == "value"
    assert e.fold() == ("value", None)


def test_check_err() -> None:
    """An error hides the value."""
    err = FileNotFoundError("missing")
    e = check("ignored", err)

    assert e.is_error()
    assert e.err() is err
    assert e.fold() == (None, err)


def test_val_on_err_fails_loudly() -> None:
    """val() on an error raises ValueAccessError."""
    with pytest.raises(ValueAccessError):
        check(None, OSError("x")).val()


def test_map_and_map_err() -> None:
    """map and map_err chain on success."""
    e = check(" 12 ", None).map(str.strip).map_err(lambda s: (int(s), None))

    assert e.val() == 12


def test_map_err_records_error() -> None:
    """An error returned from map_err is kept."""
    err = ValueError("bad")
    e = check("x", None).map_err(lambda _: (None, err))

    assert e.err() is err


def test_short_circuit() -> None:
    """Neither map runs once an error is held."""
    calls: list[object] = []
    err = KeyError("k")
    e = check(None, err).map(calls.append).map_err(lambda v: (calls.append(v), None))

    assert calls == []
    assert e.err() is err


def test_to_result() -> None:
    """Either upgrades to a Result with the same state."""
    err = ValueError("v")

    assert check(3, None).to_result().value() == 3
    assert check(None, err).to_result().failure() is err


def test_equality() -> None:
    assert check(1, None) == Either(1)
    assert check(1, None) != check(2, None)


def test_rejects_non_exception_error() -> None:
    """check and map_err only accept exceptions as errors."""
    with pytest.raises(TypeError):
        check(None, "not an exception")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        check(1, None).map_err(lambda _: (None, "oops"))  # type: ignore[arg-type,return-value]
