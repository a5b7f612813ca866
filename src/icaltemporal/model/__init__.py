"""Model layer for iCalendar DATE / DATE-TIME properties.

This package contains the value model of the DTSTART and DTEND properties:
parameters, timezone resolution, the temporal value and the property itself.

Reference: RFC 5545
"""

from .common import ParameterName, PropertyName, TemporalKind
from .parameter import Parameter, ParameterList
from .dateproperty import DateProperty, create_property
from .timezone import TimezoneRegistry, ZoneInfoRegistry, get_default_registry, set_default_registry
from .value import TemporalValue, Zone

__all__ = [
    # Common types
    "ParameterName",
    "PropertyName",
    "TemporalKind",
    # Parameters
    "Parameter",
    "ParameterList",
    # Timezones
    "TimezoneRegistry",
    "ZoneInfoRegistry",
    "get_default_registry",
    "set_default_registry",
    # Values and properties
    "DateProperty",
    "TemporalValue",
    "Zone",
    "create_property",
]
