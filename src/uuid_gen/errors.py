"""
errors.py - Domain-specific exceptions for uuid_gen.

All exceptions inherit from UuidGenError for unified handling.
Each exception type represents a distinct failure mode.
"""

from typing import Any


class UuidGenError(Exception):
    """Base exception for all uuid_gen errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} [{context_str}]"
        return self.message


class InvalidArgumentError(UuidGenError):
    """
    Raised when caller input is malformed.

    This includes non-positive batch counts, identifiers that are
    not 16 bytes, names of an unsupported type and unknown render
    formats in strict mode.
    """

    def __init__(
        self, message: str, field: str | None = None, value: Any = None
    ) -> None:
        context = {}
        if field is not None:
            context["field"] = field
        if value is not None:
            context["value"] = repr(value)[:100]
        super().__init__(message, context=context)
        self.field = field
        self.value = value


class InvalidNamespaceError(InvalidArgumentError):
    """
    Raised when a v5 namespace is not exactly 16 bytes.

    Namespaces are never truncated or padded.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message, field="namespace", value=value)


class EntropyUnavailableError(UuidGenError):
    """
    Raised when the entropy source cannot deliver random bits.

    Covers unreachable or uninitialized sources, transport failures
    and malformed or short draws. The generator never falls back to
    a weaker source when this is raised.
    """

    def __init__(
        self, message: str, source: str | None = None, reason: str | None = None
    ) -> None:
        context = {}
        if source is not None:
            context["source"] = source
        if reason is not None:
            context["reason"] = reason
        super().__init__(message, context=context)
        self.source = source
        self.reason = reason


class ClockRangeError(UuidGenError):
    """
    Raised when the wall clock reads outside the 48-bit millisecond range.

    This is a fatal configuration problem with the host clock,
    not something callers are expected to retry.
    """

    def __init__(self, message: str, timestamp_ms: int | None = None) -> None:
        context = {}
        if timestamp_ms is not None:
            context["timestamp_ms"] = timestamp_ms
        super().__init__(message, context=context)
        self.timestamp_ms = timestamp_ms


class GeneratorNotInitializedError(UuidGenError):
    """Raised when v7 identifiers are requested before initialize()."""
