"""Error context stacking for failures that travel through a Result chain."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ErrorCode

# Empty dict singleton to avoid allocation on each ErrorContext
_EMPTY_META: dict[str, object] = {}

# Pre-allocated empty tuple for default contexts
_EMPTY_CONTEXTS: tuple[ErrorContext, ...] = ()


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Context for an error at a call site. Tracks operation, location, metadata."""

    operation: str
    location: str = ""
    metadata: dict[str, object] = field(default_factory=dict)

    def __str__(self) -> str:
        loc = f" at {self.location}" if self.location else ""
        meta = f" ({', '.join(f'{k}={v}' for k, v in self.metadata.items())})" if self.metadata else ""
        return f"{self.operation}{loc}{meta}"


class TracedError(Exception):
    """Exception carrying a message plus a stack of contexts.

    Instances are treated as immutable: ``with_operation``/``with_code``
    return new errors and keep the original exception as ``__cause__``.

    Example:
        >>> err = TracedError("open failed").with_operation("load_config", path="app.toml")
        >>> str(err)
        'open failed\\nContext trace:\\n  - load_config (path=app.toml)'
    """

    def __init__(
        self,
        message: str,
        contexts: tuple[ErrorContext, ...] = _EMPTY_CONTEXTS,
        code: ErrorCode | None = None,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.contexts = contexts
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def wrap(cls, exc: BaseException, message: str | None = None) -> TracedError:
        """Wrap an arbitrary exception, keeping traced errors as they are."""
        if isinstance(exc, TracedError) and message is None:
            return exc
        return cls(message if message is not None else str(exc), cause=exc)

    def _copy(self, *, contexts: tuple[ErrorContext, ...] | None = None, code: ErrorCode | None = None) -> TracedError:
        return TracedError(
            self.message,
            self.contexts if contexts is None else contexts,
            code or self.code,
            cause=self.__cause__,
        )

    def with_context(self, ctx: ErrorContext) -> TracedError:
        """Add context (returns a new error)."""
        return self._copy(contexts=(*self.contexts, ctx))

    def with_operation(self, operation: str, location: str = "", **metadata: object) -> TracedError:
        """Add context with operation info."""
        return self.with_context(ErrorContext(operation, location, metadata or _EMPTY_META))

    def with_code(self, code: ErrorCode) -> TracedError:
        """Return new error with code set."""
        return self._copy(code=code)

    @property
    def root_cause(self) -> BaseException:
        """Innermost exception in the ``__cause__`` chain."""
        exc: BaseException = self
        while exc.__cause__ is not None:
            exc = exc.__cause__
        return exc

    def format(self) -> str:
        """Format as human-readable string."""
        if not self.code and not self.contexts:
            return self.message
        parts = [self.message]
        if self.code:
            parts.append(f" [{self.code}]")
        if self.contexts:
            parts.append("\nContext trace:\n" + "\n".join(f"  - {ctx}" for ctx in self.contexts))
        return "".join(parts)

    __str__ = format

    def __repr__(self) -> str:
        return f"TracedError({self.message!r}, contexts={len(self.contexts)}, code={self.code!r})"


def context(operation: str, location: str = "", **metadata: object) -> ErrorContext:
    """Create ErrorContext concisely."""
    return ErrorContext(operation, location, metadata or _EMPTY_META)
