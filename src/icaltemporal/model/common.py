"""Common types shared across the temporal property model.

Reference: RFC 5545
    - Section 3.2.19: Time Zone Identifier (TZID)
    - Section 3.2.20: Value Data Types (VALUE)
    - Section 3.8.2.2: Date-Time End (DTEND)
    - Section 3.8.2.4: Date-Time Start (DTSTART)
"""

from enum import StrEnum


class TemporalKind(StrEnum):
    """Value type of a date property.

    Member values are the exact VALUE parameter text.
    """

    DATE = "DATE"
    DATE_TIME = "DATE-TIME"


class PropertyName(StrEnum):
    """Calendar roles sharing the DATE / DATE-TIME grammar production."""

    DTSTART = "DTSTART"
    DTEND = "DTEND"


class ParameterName(StrEnum):
    """Parameters read by the temporal model. Anything else is passed through."""

    VALUE = "VALUE"
    TZID = "TZID"
