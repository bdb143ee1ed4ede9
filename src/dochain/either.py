"""Either: the handler-less value-or-error pair.

Same Ok/Err semantics as Result, without error handlers. Kept for code
that only needs to carry a ``(value, error)`` pair through a few maps.

    >>> e = check(12, None)
    >>> e.map(lambda n: n * 2).fold()
    (24, None)
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from .config import get_core_settings
from .errors import ValueAccessError
from .result import Result

T = TypeVar("T")
U = TypeVar("U")


class Either(Generic[T]):
    """A value of type ``T`` or an error, never both."""

    __slots__ = ("_val", "_err")

    def __init__(self, val: T | None, err: Exception | None = None) -> None:
        if err is not None and not isinstance(err, Exception):
            raise TypeError(f"error must be an Exception, got {type(err).__name__}")
        self._val = None if err is not None else val
        self._err = err

    def is_error(self) -> bool:
        """True if an error is held."""
        return self._err is not None

    def err(self) -> Exception | None:
        """Held error, or None."""
        return self._err

    def val(self) -> T:
        """Wrapped value. Raises ValueAccessError when an error is held."""
        if self._err is not None:
            raise ValueAccessError(self._err, show_failure=get_core_settings().show_failure_in_access_error)
        return self._val  # type: ignore[return-value]

    def fold(self) -> tuple[T | None, Exception | None]:
        """Collapse to a ``(value, error)`` pair."""
        return self._val, self._err

    def map(self, fn: Callable[[T], U]) -> Either[U]:
        """Apply fn to the value. Skipped when an error is held."""
        if self._err is not None:
            return Either(None, self._err)
        return Either(fn(self._val))  # type: ignore[arg-type]

    def map_err(self, fn: Callable[[T], tuple[U, Exception | None]]) -> Either[U]:
        """Map with a function that may also return an error."""
        if self._err is not None:
            return Either(None, self._err)
        return Either(*fn(self._val))  # type: ignore[arg-type]

    def to_result(self) -> Result[T]:
        """Upgrade to a Result (no error handler installed)."""
        return Result.of(self._val, self._err)

    def __repr__(self) -> str:
        """Debug representation."""
        return f"Either(err={self._err!r})" if self._err is not None else f"Either({self._val!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self._err == other._err and self._val == other._val

    def __hash__(self) -> int:
        return hash((self._val, self._err))


def check(val: T | None, err: Exception | None) -> Either[T]:
    """Build an Either from a ``(value, error)`` pair."""
    return Either(val, err)
