"""Error codes and misuse signalling for Result containers.

Failures carried by a Result are plain exceptions supplied by caller code.
This module adds the few exceptions the container itself raises, and a
cheap classifier for tagging arbitrary failures with a code.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache


class ErrorCode(StrEnum):
    """Coarse classification for failures recorded in a Result."""
    NOT_FOUND = "NOT_FOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    TIMEOUT = "TIMEOUT"
    INVALID_INPUT = "INVALID_INPUT"
    PARSE_ERROR = "PARSE_ERROR"
    UNKNOWN = "UNKNOWN"


# Exact type matches win over message patterns
_TYPE_CODES: dict[type[BaseException], ErrorCode] = {
    FileNotFoundError: ErrorCode.NOT_FOUND,
    KeyError: ErrorCode.NOT_FOUND,
    LookupError: ErrorCode.NOT_FOUND,
    PermissionError: ErrorCode.PERMISSION_DENIED,
    TimeoutError: ErrorCode.TIMEOUT,
    UnicodeDecodeError: ErrorCode.PARSE_ERROR,
    ValueError: ErrorCode.INVALID_INPUT,
    TypeError: ErrorCode.INVALID_INPUT,
}

_PATTERN_CODES: dict[str, ErrorCode] = {
    "not found": ErrorCode.NOT_FOUND,
    "notfound": ErrorCode.NOT_FOUND,
    "no such": ErrorCode.NOT_FOUND,
    "permission": ErrorCode.PERMISSION_DENIED,
    "forbidden": ErrorCode.PERMISSION_DENIED,
    "timeout": ErrorCode.TIMEOUT,
    "timed out": ErrorCode.TIMEOUT,
    "parse": ErrorCode.PARSE_ERROR,
    "decode": ErrorCode.PARSE_ERROR,
    "json": ErrorCode.PARSE_ERROR,
    "invalid": ErrorCode.INVALID_INPUT,
}
_PATTERN_KEYS = tuple(_PATTERN_CODES.keys())  # Ordered for priority


@lru_cache(maxsize=256)
def _classify_cached(exc_key: str) -> ErrorCode:
    haystack = exc_key.lower()
    for pattern in _PATTERN_KEYS:
        if pattern in haystack:
            return _PATTERN_CODES[pattern]
    return ErrorCode.UNKNOWN


def error_code(exc: BaseException) -> ErrorCode:
    """Map exception to error code by type (MRO order), then by name/message."""
    for klass in type(exc).__mro__:
        code = _TYPE_CODES.get(klass)
        if code is not None:
            return code
    return _classify_cached(f"{type(exc).__name__} {exc}")


class ValueAccessError(RuntimeError):
    """Raised when the success value of an Err result is read.

    This is a programmer error, not a runtime condition: callers must check
    ``is_error()`` (or use ``fold``/``unwrap``) before asking for the value.
    The recorded failure is available as ``failure`` and as ``__cause__``.
    """

    __slots__ = ("failure",)

    def __init__(self, failure: BaseException, *, show_failure: bool = True) -> None:
        self.failure = failure
        msg = "value() called on an Err result"
        super().__init__(f"{msg}: {failure!r}" if show_failure else msg)
        self.__cause__ = failure
