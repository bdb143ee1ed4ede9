"""Error taxonomy for dochain.

- ErrorCode/error_code: Coarse classification of arbitrary failures
- ValueAccessError: Raised when an Err result's value is read
- ErrorContext/TracedError: Context stacking for failures in a chain
"""

from .errors import ErrorCode, ValueAccessError, error_code
from .types import ErrorContext, TracedError, context

__all__ = [
    "ErrorCode", "error_code", "ValueAccessError",
    "ErrorContext", "TracedError", "context",
]
