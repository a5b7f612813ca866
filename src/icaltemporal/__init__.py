"""pyICalTemporal: DATE / DATE-TIME properties for iCalendar data.

This library models the DTSTART and DTEND properties of RFC 5545: a value
that is either a bare date or a date-time (floating, UTC or anchored to a
named timezone), parsed from and formatted back to its exact text form.
"""

from __future__ import annotations

from .exceptions import (
    AmbiguousZoneError,
    DuplicateParameterError,
    FormatError,
    ICalError,
    ICalParseError,
    InconsistentKindError,
    ParseErrorKind,
    UnknownTimezoneError,
)
from .model import (
    DateProperty,
    Parameter,
    ParameterList,
    PropertyName,
    TemporalKind,
    TemporalValue,
    Zone,
    create_property,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Exceptions
    "AmbiguousZoneError",
    "DuplicateParameterError",
    "FormatError",
    "ICalError",
    "ICalParseError",
    "InconsistentKindError",
    "ParseErrorKind",
    "UnknownTimezoneError",
    # Model
    "DateProperty",
    "Parameter",
    "ParameterList",
    "PropertyName",
    "TemporalKind",
    "TemporalValue",
    "Zone",
    "create_property",
]
