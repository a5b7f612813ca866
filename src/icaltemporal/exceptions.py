"""iCalendar temporal property exception classes."""

from __future__ import annotations

from enum import StrEnum


class ParseErrorKind(StrEnum):
    FORMAT = "format"
    AMBIGUOUS_ZONE = "ambiguous-zone"
    UNKNOWN_TIMEZONE = "unknown-timezone"
    INCONSISTENT_KIND = "inconsistent-kind"
    DUPLICATE_PARAMETER = "duplicate-parameter"


class ICalError(Exception):
    """Base exception for all iCalendar temporal errors."""


class ICalParseError(ICalError, ValueError):
    """Value text or parameter context could not be turned into a value.

    Attributes:
        kind: Which rule was violated (None when raised without a specific rule)
        value: The offending text (value string, TZID or parameter name)
    """

    kind: ParseErrorKind | None = None

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class FormatError(ICalParseError):
    """Text does not match the fixed-width pattern or a field is out of range."""

    kind = ParseErrorKind.FORMAT


class AmbiguousZoneError(ICalParseError):
    """UTC suffix and TZID parameter present at the same time."""

    kind = ParseErrorKind.AMBIGUOUS_ZONE


class UnknownTimezoneError(ICalParseError):
    """TZID cannot be resolved by the timezone registry."""

    kind = ParseErrorKind.UNKNOWN_TIMEZONE


class InconsistentKindError(ICalParseError):
    """VALUE parameter disagrees with the shape of the value text."""

    kind = ParseErrorKind.INCONSISTENT_KIND


class DuplicateParameterError(ICalParseError):
    """VALUE or TZID parameter given more than once."""

    kind = ParseErrorKind.DUPLICATE_PARAMETER
