"""DTSTART / DTEND date property.

Both properties use the same DATE / DATE-TIME grammar production and only
differ by name, so a single DateProperty class is parameterized with a
PropertyName instead of having one class per property.

The property is an aggregate of name, parameters and TemporalValue. The
VALUE and TZID parameters are never stored independently: they are derived
from the value every time the value changes, so the two cannot drift apart.
All other parameters are passed through untouched and in order.

Usage:
    # From a property-list parser
    dtstart = create_property("DTSTART", [("TZID", "Europe/Copenhagen")], "20240315T093000")

    # From Python values
    dtend = DateProperty.from_instant(PropertyName.DTEND, date(2024, 3, 16))
    dtend.to_ical()  # "DTEND;VALUE=DATE:20240316"

Reference: RFC 5545, sections 3.8.2.2 (DTEND) and 3.8.2.4 (DTSTART)
"""

from __future__ import annotations

from datetime import date, datetime, tzinfo

from .common import ParameterName, PropertyName, TemporalKind
from .parameter import ParameterLike, ParameterList
from .timezone import TimezoneRegistry
from .value import TemporalValue

NAME_SEPARATOR = ":"  # Separates name and parameters from the value in a content line

Parameters = ParameterList | list[ParameterLike] | tuple[ParameterLike, ...]


class DateProperty:
    """Named DATE / DATE-TIME property (DTSTART or DTEND).

    Attributes:
        name: Property name, fixed for the lifetime of the property
        value: The TemporalValue (assigning re-derives VALUE and TZID)
        parameters: Copy of the current parameter list

    Two properties are equal when name, parameters and value are equal, so a
    DTSTART is never equal to a DTEND holding the same value.
    """

    _name: PropertyName
    _value: TemporalValue
    _parameters: ParameterList

    def __init__(
        self,
        name: PropertyName | str,
        value: TemporalValue | None = None,
        parameters: Parameters | None = None,
    ) -> None:
        """Initialize property (value defaults to now, floating DATE-TIME).

        Raises:
            ValueError: If name is not a date property name
        """
        self._name = PropertyName(name.upper())
        self._parameters = ParameterList(parameters or ())
        self.value = value if value is not None else TemporalValue.now()

    # -------------------------------------------------------------------------
    # Construction (mirrors TemporalValue)
    # -------------------------------------------------------------------------

    @classmethod
    def now(
        cls, name: PropertyName | str, timezone: tzinfo | None = None, parameters: Parameters | None = None
    ) -> DateProperty:
        return cls(name, TemporalValue.now(timezone), parameters)

    @classmethod
    def from_datetime(
        cls, name: PropertyName | str, instant: datetime, utc: bool = False, parameters: Parameters | None = None
    ) -> DateProperty:
        return cls(name, TemporalValue.from_datetime(instant, utc), parameters)

    @classmethod
    def from_instant(
        cls,
        name: PropertyName | str,
        instant: date,
        timezone: tzinfo | None = None,
        parameters: Parameters | None = None,
    ) -> DateProperty:
        """DATE for a date, DATE-TIME for a datetime (zone from timezone or an aware datetime)."""
        return cls(name, TemporalValue.from_instant(instant, timezone), parameters)

    @classmethod
    def parse(
        cls,
        name: PropertyName | str,
        text: str,
        parameters: Parameters | None = None,
        timezone: tzinfo | None = None,
        registry: TimezoneRegistry | None = None,
    ) -> DateProperty:
        """Parse value text under the given parameters.

        Raises:
            ICalParseError: Any parse error of TemporalValue.parse
        """
        parameters = ParameterList(parameters or ())
        return cls(name, TemporalValue.parse(text, parameters, timezone, registry), parameters)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def name(self) -> PropertyName:
        return self._name

    @property
    def value(self) -> TemporalValue:
        return self._value

    @value.setter
    def value(self, value: TemporalValue) -> None:
        if not isinstance(value, TemporalValue):
            raise TypeError(f"Expected TemporalValue, got {type(value).__name__}")

        self._value = value
        self._derive_parameters()

    @property
    def parameters(self) -> ParameterList:
        return self._parameters.copy()

    @property
    def kind(self) -> TemporalKind:
        return self._value.kind

    @kind.setter
    def kind(self, kind: TemporalKind) -> None:
        """Switch DATE <-> DATE-TIME (lossy, see TemporalValue.with_kind)."""
        self.value = self._value.with_kind(kind)

    @property
    def utc(self) -> bool:
        return self._value.is_utc

    @utc.setter
    def utc(self, utc: bool) -> None:
        self.value = self._value.with_utc(utc)

    @property
    def timezone(self) -> tzinfo | None:
        """tzinfo of a named zone, None for floating, UTC and DATE values."""
        zone = self._value.zone
        if zone is None or zone.is_utc:
            return None
        return zone.tzinfo

    @timezone.setter
    def timezone(self, timezone: tzinfo | None) -> None:
        self.value = self._value.with_timezone(timezone)

    def _derive_parameters(self) -> None:
        self._parameters.remove(ParameterName.VALUE)
        self._parameters.remove(ParameterName.TZID)
        for parameter in self._value.context_parameters():
            self._parameters.add(parameter)

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    def format(self) -> str:
        """Value text only (YYYYMMDD or YYYYMMDDTHHMMSS[Z])."""
        return self._value.format()

    def to_ical(self) -> str:
        """Full (unfolded) content line, e.g. DTSTART;TZID=Europe/Paris:20240315T093000."""
        return f"{self._name}{self._parameters.to_ical()}{NAME_SEPARATOR}{self.format()}"

    def copy(self) -> DateProperty:
        return DateProperty(self._name, self._value, self._parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateProperty):
            return NotImplemented
        return (self._name, self._parameters, self._value) == (other._name, other._parameters, other._value)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_ical()

    def __repr__(self) -> str:
        return f"DateProperty({self._name!r}, {self._value!r}, {self._parameters!r})"


def create_property(name: str, parameters: Parameters, text: str) -> DateProperty:
    """Entry point for a property-list parser.

    Args:
        name: Property name as tokenized from the content line
        parameters: Parameters in content line order
        text: Raw value string

    Raises:
        ValueError: If name is not DTSTART or DTEND
        ICalParseError: If the value cannot be parsed
    """
    return DateProperty.parse(name, text, parameters)
