"""dochain - short-circuiting error handling with a generic Result container.

Goals:
- Replace long runs of "call, check error, return" with a straight chain
- Decompose checks and maps into small functions that know nothing of Result
- Keep the success type visible to type checkers through every step

Quick Start:
    >>> from pathlib import Path
    >>> from dochain import from_value
    >>> from dochain.handlers import prefix
    >>>
    >>> def line_count(path: str) -> tuple[int | None, Exception | None]:
    ...     r = from_value(Path(path)).with_error_handler(prefix(path))
    ...     r = r.try_map(Path.read_text, catch=(OSError, UnicodeDecodeError))
    ...     return r.map(str.splitlines).map(len).unwrap()

Once any step records a failure, every later step is skipped and the same
failure is forwarded to the end of the chain, where ``fold`` or ``unwrap``
hands it back to ordinary code.

Typing caveat:
    Constructors infer the narrowest type of their argument. State the
    wider type explicitly when later steps expect an interface:

    >>> import io
    >>> from typing import IO
    >>> from dochain import Result
    >>> r = Result[IO[str]].ok(io.StringIO("text"))  # or: r: Result[IO[str]] = from_value(...)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import DochainSettings, clear_settings_cache, configure_logging, get_settings
from .either import Either, check
from .errors import ErrorCode, ErrorContext, TracedError, ValueAccessError, error_code
from .result import (
    ErrorHandler,
    Result,
    fold,
    from_call,
    from_outcome,
    from_value,
    map_fallible,
    map_result,
    validate,
    with_error_handler,
)

__all__ = [
    # Result
    "Result", "ErrorHandler",
    "from_value", "from_outcome", "from_call",
    "map_result", "map_fallible", "validate", "with_error_handler", "fold",
    # Either
    "Either", "check",
    # Errors
    "ErrorCode", "ErrorContext", "TracedError", "ValueAccessError", "error_code",
    # Config
    "DochainSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
