"""Result container for short-circuiting error propagation.

A Result holds either a success value (Ok) or a failure (Err). Combinators
check the state first and skip caller-supplied functions once a failure has
been recorded, so a chain of operations reads as a straight line:

    >>> r = from_value(" 42 ")
    >>> r = r.map(str.strip)
    >>> r = r.validate(lambda s: None if s.isdigit() else ValueError(f"not a number: {s}"))
    >>> n = r.map(int)
    >>> n.value()
    42

An optional error handler transforms each failure newly produced by
``map_fallible``/``validate``/``try_map`` exactly once, which lets callers
attach context at one place instead of at every call site:

    >>> from dochain.handlers import prefix
    >>> r = from_value("cfg.toml").with_error_handler(prefix("loading config"))
    >>> r = r.map_fallible(lambda p: (None, FileNotFoundError(p)))
    >>> str(r.failure())
    'loading config: cfg.toml'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from .config import get_core_settings
from .errors import ValueAccessError

if TYPE_CHECKING:
    from collections.abc import Mapping

T = TypeVar("T")  # Success type
U = TypeVar("U")  # Mapped success type

ErrorHandler = Callable[[Exception], Exception]

logger = logging.getLogger("dochain.result")


class Result(Generic[T]):
    """Either a success value of type ``T`` or a failure.

    Exactly one of two states:
    - Ok: ``failure()`` is None and ``value()`` returns the wrapped value
    - Err: ``failure()`` is the recorded exception; the value is gone and
      ``value()`` raises ValueAccessError

    Instances are immutable, every combinator returns a new Result.

    Use ``from_value``/``from_outcome`` (or ``Result.ok``/``Result.of``) to
    construct. Subscript the class to state a wider success type than the
    argument's own, e.g. ``Result[IO[bytes]].ok(io.BytesIO(data))``.
    """

    __slots__ = ("_value", "_failure", "_handler")

    def __init__(
        self,
        value: T | None,
        failure: Exception | None = None,
        handler: ErrorHandler | None = None,
    ) -> None:
        """Private constructor. Use from_value() or from_outcome() instead."""
        self._value = None if failure is not None else value
        self._failure = failure
        self._handler = handler

    # ─── Construction ──────────────────────────────────────────────────

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        """Wrap value as Ok."""
        return cls(value)

    @classmethod
    def of(cls, value: T | None, failure: Exception | None) -> Result[T]:
        """Adapt a value/error pair. Err iff failure is not None."""
        if failure is not None and not isinstance(failure, Exception):
            raise TypeError(f"failure must be an Exception, got {type(failure).__name__}")
        return cls(value, failure)

    # ─── Inspection ────────────────────────────────────────────────────

    def is_error(self) -> bool:
        """True if a failure has been recorded."""
        return self._failure is not None

    def is_ok(self) -> bool:
        """True if no failure has been recorded."""
        return self._failure is None

    def failure(self) -> Exception | None:
        """Recorded failure, or None when Ok."""
        return self._failure

    def value(self) -> T:
        """Wrapped value.

        Raises:
            ValueAccessError: If the Result is Err. Reading the value of a
                failed Result is a bug in the caller, never a default.
        """
        if self._failure is not None:
            raise ValueAccessError(self._failure, show_failure=get_core_settings().show_failure_in_access_error)
        return self._value  # type: ignore[return-value]

    def unwrap(self) -> tuple[T | None, Exception | None]:
        """Both fields as a ``(value, failure)`` pair. Never raises.

        The value is None when the Result is Err.
        """
        return self._value, self._failure

    @property
    def error_handler(self) -> ErrorHandler | None:
        """Installed error handler, if any."""
        return self._handler

    # ─── Transformation ────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Apply f to the Ok value. On Err, f is not called and the failure is forwarded."""
        if self._failure is not None:
            return Result(None, self._failure, self._handler)
        return Result(f(self._value), None, self._handler)  # type: ignore[arg-type]

    def map_fallible(self, f: Callable[[T], tuple[U, Exception | None]]) -> Result[U]:
        """Apply f returning a ``(value, error)`` pair.

        A returned error passes through the error handler once before it is
        recorded. On Err, f is not called.
        """
        if self._failure is not None:
            return Result(None, self._failure, self._handler)
        new_value, new_failure = f(self._value)  # type: ignore[arg-type]
        if new_failure is not None:
            return Result(None, self._record(new_failure, "map_fallible"), self._handler)
        return Result(new_value, None, self._handler)

    def try_map(
        self,
        f: Callable[[T], U],
        catch: type[Exception] | tuple[type[Exception], ...] = Exception,
    ) -> Result[U]:
        """Apply f, recording a raised exception matching ``catch`` as the failure.

        Exceptions outside ``catch`` propagate. On Err, f is not called.
        """
        if self._failure is not None:
            return Result(None, self._failure, self._handler)
        try:
            new_value = f(self._value)  # type: ignore[arg-type]
        except catch as e:
            return Result(None, self._record(e, "try_map"), self._handler)
        return Result(new_value, None, self._handler)

    def validate(self, f: Callable[[T], Exception | None]) -> Result[T]:
        """Run check f on the Ok value.

        If f returns an error, it passes through the error handler and the
        result becomes Err. Otherwise self is returned. On Err, f is not
        called and self is returned.
        """
        if self._failure is not None:
            return self
        failure = f(self._value)  # type: ignore[arg-type]
        if failure is None:
            return self
        return Result(None, self._record(failure, "validate"), self._handler)

    def check(self, f: Callable[[T], Exception | None]) -> Result[T]:
        """Alias for validate."""
        return self.validate(f)

    def with_error_handler(self, handler: ErrorHandler) -> Result[T]:
        """Install handler for failures recorded from here on.

        Replaces any previous handler. An already-recorded failure is not
        transformed.
        """
        if not callable(handler):
            raise TypeError(f"error handler must be callable, got {type(handler).__name__}")
        return Result(self._value, self._failure, handler)

    # ─── Consumption ───────────────────────────────────────────────────

    def fold(self, on_ok: Callable[[T], Any], on_err: Callable[[Exception], Any]) -> None:
        """Call on_ok with the value or on_err with the failure, exactly once."""
        if self._failure is not None:
            on_err(self._failure)
        else:
            on_ok(self._value)  # type: ignore[arg-type]

    # ─── Internals ─────────────────────────────────────────────────────

    def _record(self, failure: Exception, step: str) -> Exception:
        """Pass a newly produced failure through the handler, once."""
        if not isinstance(failure, Exception):
            raise TypeError(f"{step} produced a non-exception failure: {type(failure).__name__}")
        recorded = failure if self._handler is None else self._handler(failure)
        if not isinstance(recorded, Exception):
            raise TypeError(f"error handler must return an Exception, got {type(recorded).__name__}")
        if get_core_settings().log_failures:
            logger.debug(
                "failure recorded",
                extra=_log_extra(step, failure, recorded),
            )
        return recorded

    # ─── Dunder Methods ────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if Ok."""
        return self._failure is None

    def __repr__(self) -> str:
        if self._failure is not None:
            return f"Err({self._failure!r})"
        return f"Ok({self._value!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality over state, value and failure. Handlers are ignored."""
        if not isinstance(other, Result):
            return NotImplemented
        return self._failure == other._failure and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._value, self._failure))


def _log_extra(step: str, failure: Exception, recorded: Exception) -> Mapping[str, object]:
    return {
        "step": step,
        "failure_type": type(failure).__name__,
        "handled": recorded is not failure,
    }


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def from_value(value: T) -> Result[T]:
    """Construct an Ok Result.

    Example:
        >>> from_value("foo").value()
        'foo'
    """
    return Result(value)


def from_outcome(value: T | None, failure: Exception | None) -> Result[T]:
    """Adapt a ``(value, error)`` pair into a Result. Err iff failure is not None.

    Example:
        >>> r = from_outcome(None, FileNotFoundError("missing"))
        >>> r.is_error()
        True
    """
    return Result.of(value, failure)


def from_call(
    fn: Callable[..., T],
    *args: Any,
    catch: type[Exception] | tuple[type[Exception], ...] = Exception,
    **kwargs: Any,
) -> Result[T]:
    """Call fn, turning a raised exception matching ``catch`` into an Err.

    Example:
        >>> r = from_call(open, "missing.txt", catch=OSError)
        >>> type(r.failure()).__name__
        'FileNotFoundError'
    """
    try:
        return Result(fn(*args, **kwargs))
    except catch as e:
        return Result(None, e)


# ═════════════════════════════════════════════════════════════════════════════
# Free-function Combinators
# ═════════════════════════════════════════════════════════════════════════════


def map_result(r: Result[T], f: Callable[[T], U]) -> Result[U]:
    """Function form of ``Result.map``."""
    return r.map(f)


def map_fallible(r: Result[T], f: Callable[[T], tuple[U, Exception | None]]) -> Result[U]:
    """Function form of ``Result.map_fallible``."""
    return r.map_fallible(f)


def validate(r: Result[T], f: Callable[[T], Exception | None]) -> Result[T]:
    """Function form of ``Result.validate``."""
    return r.validate(f)


def with_error_handler(r: Result[T], handler: ErrorHandler) -> Result[T]:
    """Function form of ``Result.with_error_handler``."""
    return r.with_error_handler(handler)


def fold(r: Result[T], on_ok: Callable[[T], Any], on_err: Callable[[Exception], Any]) -> None:
    """Function form of ``Result.fold``."""
    r.fold(on_ok, on_err)
