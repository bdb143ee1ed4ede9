"""Ready-made error handlers for ``Result.with_error_handler``.

An error handler is any ``Callable[[Exception], Exception]``. It runs once
for each failure a chain produces, so these helpers are where context,
codes and logging get attached.

Example:
    >>> from dochain import from_value
    >>> from dochain.handlers import compose, prefix, with_context
    >>> r = from_value("posts:write").with_error_handler(
    ...     compose(prefix("create post"), with_context("authorize", scope="posts:write"))
    ... )
"""

from __future__ import annotations

import logging

from .errors import ErrorCode, ErrorContext, TracedError, error_code
from .result import ErrorHandler

logger = logging.getLogger("dochain.handlers")


def prefix(text: str) -> ErrorHandler:
    """Prefix the failure message: ``"{text}: {original}"``. The original is kept as cause."""
    def handler(err: Exception) -> Exception:
        return TracedError(f"{text}: {err}", cause=err)
    return handler


def with_context(operation: str, location: str = "", **metadata: object) -> ErrorHandler:
    """Push an ErrorContext onto the failure, wrapping plain exceptions in TracedError."""
    ctx = ErrorContext(operation, location, metadata)

    def handler(err: Exception) -> Exception:
        return TracedError.wrap(err).with_context(ctx)
    return handler


def with_code(code: ErrorCode | None = None) -> ErrorHandler:
    """Tag the failure with an ErrorCode, classifying the exception when code is None."""
    def handler(err: Exception) -> Exception:
        traced = TracedError.wrap(err)
        if traced.code is not None and code is None:
            return traced
        return traced.with_code(code or error_code(traced.root_cause))
    return handler


def logged(log: logging.Logger | None = None, level: int = logging.WARNING) -> ErrorHandler:
    """Log the failure and return it unchanged."""
    target = log or logger

    def handler(err: Exception) -> Exception:
        target.log(level, "result failure: %s", err, extra={"failure_type": type(err).__name__})
        return err
    return handler


def compose(*handlers: ErrorHandler) -> ErrorHandler:
    """Chain handlers left to right into a single handler."""
    if not handlers:
        raise ValueError("compose() needs at least one handler")

    def handler(err: Exception) -> Exception:
        for h in handlers:
            err = h(err)
        return err
    return handler
