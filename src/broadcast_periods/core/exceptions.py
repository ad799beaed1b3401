"""Exceptions for broadcast period parsing.

Malformed input never raises: `ExtractionError` instances are returned inside
`Failure` values. The remaining exceptions signal configuration problems or
an explicit caller request to raise.
"""

from __future__ import annotations

import typing


class BroadcastPeriodsError(Exception):
    """Base exception for all library errors."""


class ExtractionError(BroadcastPeriodsError):
    """Describes a field that could not be resolved from a raw string.

    Used as the diagnostic payload of a `Failure`; the parser never raises it.
    """

    def __init__(self, field: str, raw: str, message: str | None = None) -> None:
        """Initialize with the field name and the offending raw string.

        Args:
            field: Human-readable field name, e.g. "year start".
            raw: The raw record that failed.
            message: Optional override for the default message.
        """
        self.field = field
        self.raw = raw
        super().__init__(message or f"Cannot extract {field} from: {raw}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtractionError):
            return NotImplemented
        return (self.field, self.raw, str(self)) == (other.field, other.raw, str(other))

    def __hash__(self) -> int:
        return hash((self.field, self.raw, str(self)))


class AggregateParseError(BroadcastPeriodsError):
    """Raised by `ShowParser.parse_or_raise` when a batch does not resolve."""

    def __init__(self, message: str, cause: typing.Any = None) -> None:
        self.cause = cause
        super().__init__(message)


class ConfigurationError(BroadcastPeriodsError):
    """Raised when configuration values fail validation."""
