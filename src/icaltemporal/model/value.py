"""DATE / DATE-TIME value representation, decoding and encoding.

This module contains the TemporalValue class for representing the value of a
date property that is either a bare calendar date or a date with a
time-of-day, with support for:
- Floating (local) date-times
- UTC date-times (trailing "Z")
- Date-times anchored to a named timezone (sibling TZID parameter)

Text format (bit-exact):
    DATE       YYYYMMDD
    DATE-TIME  YYYYMMDD "T" HHMMSS [ "Z" ]

Resolution rules when decoding:
    - VALUE=DATE forces DATE, VALUE=DATE-TIME forces DATE-TIME, and the shape
      of the text must agree with the declared kind
    - Without a VALUE parameter the shape of the text decides
    - TZID is only applied to DATE-TIME values without the "Z" suffix
    - "Z" together with a TZID parameter is ambiguous and rejected

Calendar validity is strict: the day is checked against the month and the
leap year rules, so 20240230 is rejected while 20240229 is accepted.

Reference: RFC 5545
    - Section 3.3.4: DATE
    - Section 3.3.5: DATE-TIME (forms #1 floating, #2 UTC, #3 with TZID)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time, tzinfo

from ..exceptions import (
    AmbiguousZoneError,
    DuplicateParameterError,
    FormatError,
    InconsistentKindError,
)
from .common import ParameterName, TemporalKind
from .parameter import ParameterLike, ParameterList
from .timezone import TimezoneRegistry, get_default_registry, tzid_of

logger = logging.getLogger(__name__)

# =============================================================================
# Text Format Constants (RFC 5545, sections 3.3.4 and 3.3.5)
# =============================================================================

DATE_TIME_SEPARATOR = "T"  # Separates the date and the time part
UTC_DESIGNATOR = "Z"  # Suffix marking a UTC date-time

# Only ASCII digits: \d would also accept other Unicode decimal digits
_DATE_PATTERN = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})")
_DATE_TIME_PATTERN = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})T([0-9]{2})([0-9]{2})([0-9]{2})(Z?)")

_MONTH_RANGE = range(1, 13)
_DAY_RANGE = range(1, 32)
_HOUR_RANGE = range(0, 24)
_MINUTE_RANGE = range(0, 60)
_SECOND_RANGE = range(0, 60)  # Leap second 60 is not representable

# =============================================================================
# Zone
# =============================================================================


@dataclass(frozen=True)
class Zone:
    """Zone of a DATE-TIME value: UTC or a named timezone.

    A floating value has no Zone at all (None). Equality only looks at the
    identifier; the resolved tzinfo is carried along for conversions.
    """

    tzid: str | None  # None = UTC
    tzinfo: tzinfo = field(compare=False, repr=False)

    @classmethod
    def utc(cls) -> Zone:
        return cls(None, UTC)

    @classmethod
    def named(cls, tzid: str, timezone: tzinfo) -> Zone:
        if not tzid:
            raise ValueError("Named zone requires a timezone identifier")
        return cls(tzid, timezone)

    @classmethod
    def from_tzinfo(cls, timezone: tzinfo) -> Zone:
        """Build a zone from a tzinfo (UTC or one that carries an identifier)."""
        if timezone is UTC:
            return cls.utc()
        return cls.named(tzid_of(timezone), timezone)

    @property
    def is_utc(self) -> bool:
        return self.tzid is None

    def __str__(self) -> str:
        return "UTC" if self.tzid is None else self.tzid


# =============================================================================
# Decoders
# =============================================================================


def _check_range(field_name: str, value: int, valid: range, text: str) -> None:
    if value not in valid:
        raise FormatError(f"Invalid {field_name} {value} in {text!r}", text)


def _decode_date_fields(text: str, year: str, month: str, day: str) -> date:
    _check_range("month", int(month), _MONTH_RANGE, text)
    _check_range("day", int(day), _DAY_RANGE, text)

    try:
        return date(int(year), int(month), int(day))
    except ValueError as exc:
        # Day does not exist in this month (e.g. February 30) or year 0000
        raise FormatError(f"Invalid calendar date in {text!r}: {exc}", text) from exc


def _decode_time_fields(text: str, hour: str, minute: str, second: str) -> time:
    _check_range("hour", int(hour), _HOUR_RANGE, text)
    _check_range("minute", int(minute), _MINUTE_RANGE, text)
    _check_range("second", int(second), _SECOND_RANGE, text)
    return time(int(hour), int(minute), int(second))


def _single_parameter(parameters: ParameterList, name: ParameterName) -> str | None:
    found = parameters.get_all(name)
    if len(found) > 1:
        raise DuplicateParameterError(f"Parameter {name} given {len(found)} times", name)
    return found[0].value if found else None


def _declared_kind(parameters: ParameterList) -> TemporalKind | None:
    declared = _single_parameter(parameters, ParameterName.VALUE)
    if declared is None:
        return None

    try:
        return TemporalKind(declared.upper())
    except ValueError:
        raise InconsistentKindError(f"Unsupported value type for a date property: {declared}", declared) from None


# =============================================================================
# TemporalValue
# =============================================================================


@dataclass(frozen=True)
class TemporalValue:
    """Value of a DATE or DATE-TIME property.

    Attributes:
        kind: DATE or DATE-TIME
        instant: date for DATE, naive datetime (wall clock) for DATE-TIME
        zone: None (floating), Zone.utc() or a named Zone; always None for DATE

    The instant is always naive. For a zoned value it is the wall clock in
    that zone, which is also exactly what the text form carries.

    Examples:
        >>> TemporalValue.parse("20240315")
        TemporalValue(kind=<TemporalKind.DATE: 'DATE'>, instant=datetime.date(2024, 3, 15), zone=None)
        >>> str(TemporalValue.parse("20240315T093000Z"))
        '20240315T093000Z'
    """

    kind: TemporalKind
    instant: date
    zone: Zone | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", TemporalKind(self.kind))

        if not isinstance(self.instant, date):
            raise TypeError(f"Instant must be a date or datetime, got {type(self.instant).__name__}")
        if self.zone is not None and not isinstance(self.zone, Zone):
            raise TypeError(f"Zone must be a Zone or None, got {type(self.zone).__name__}")

        if self.kind is TemporalKind.DATE:
            if isinstance(self.instant, datetime):
                raise ValueError("DATE value requires a date instant, not a datetime")
            if self.zone is not None:
                raise ValueError("DATE value cannot carry a timezone or UTC marker")
            return

        if not isinstance(self.instant, datetime):
            raise ValueError("DATE-TIME value requires a datetime instant")
        if self.instant.tzinfo is not None:
            raise ValueError("DATE-TIME instant must be naive, the zone is held separately")
        if self.instant.microsecond:
            raise ValueError("DATE-TIME instant cannot have sub-second resolution")

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_datetime(cls, instant: datetime, utc: bool = False) -> TemporalValue:
        """Create a DATE-TIME value, UTC if requested, otherwise floating.

        With utc=True an aware instant is converted to UTC and a naive instant
        is taken to be UTC wall clock. With utc=False the wall clock of the
        instant is kept and any tzinfo is dropped.
        """
        if not isinstance(instant, datetime):
            raise TypeError(f"Expected datetime, got {type(instant).__name__}")

        if utc:
            if instant.tzinfo is not None:
                instant = instant.astimezone(UTC)
            zone: Zone | None = Zone.utc()
        else:
            zone = None

        return cls(TemporalKind.DATE_TIME, _wall_clock(instant), zone)

    @classmethod
    def from_instant(cls, instant: date, timezone: tzinfo | None = None) -> TemporalValue:
        """Create a value whose kind follows the instant type.

        A date gives DATE, a datetime gives DATE-TIME. With timezone, an aware
        instant is converted to it (absolute instant kept) and a naive instant
        is anchored to it (wall clock kept). Without timezone the zone comes
        from the tzinfo of an aware instant, which must be UTC or carry an
        identifier.
        """
        if not isinstance(instant, datetime):
            if not isinstance(instant, date):
                raise TypeError(f"Expected date or datetime, got {type(instant).__name__}")
            if timezone is not None:
                raise ValueError("DATE value cannot carry a timezone")
            return cls(TemporalKind.DATE, instant)

        if timezone is None:
            timezone = instant.tzinfo
        elif instant.tzinfo is not None:
            instant = instant.astimezone(timezone)
        zone = Zone.from_tzinfo(timezone) if timezone is not None else None
        return cls(TemporalKind.DATE_TIME, _wall_clock(instant), zone)

    @classmethod
    def now(cls, timezone: tzinfo | None = None) -> TemporalValue:
        """Current time as DATE-TIME, floating unless a timezone is given."""
        if timezone is None:
            return cls(TemporalKind.DATE_TIME, _wall_clock(datetime.now()))
        return cls.from_instant(datetime.now(timezone))

    @classmethod
    def parse(
        cls,
        text: str,
        parameters: ParameterList | list[ParameterLike] | None = None,
        timezone: tzinfo | None = None,
        registry: TimezoneRegistry | None = None,
    ) -> TemporalValue:
        """Decode value text in the context of the owning property's parameters.

        Args:
            text: Raw value string (YYYYMMDD or YYYYMMDDTHHMMSS[Z])
            parameters: Parameters of the owning property (VALUE and TZID are read)
            timezone: Timezone to anchor a DATE-TIME to, bypassing the registry
            registry: Registry used to resolve TZID (default registry if None)

        Returns:
            Fully populated TemporalValue

        Raises:
            FormatError: Text does not match the pattern or a field is out of range
            InconsistentKindError: VALUE parameter disagrees with the text
            AmbiguousZoneError: "Z" suffix together with a TZID parameter
            UnknownTimezoneError: TZID cannot be resolved
            DuplicateParameterError: VALUE or TZID given more than once
        """
        if not isinstance(parameters, ParameterList):
            parameters = ParameterList(parameters or ())

        declared = _declared_kind(parameters)
        tzid = _single_parameter(parameters, ParameterName.TZID)

        date_match = _DATE_PATTERN.fullmatch(text)
        date_time_match = _DATE_TIME_PATTERN.fullmatch(text) if date_match is None else None

        if date_match is None and date_time_match is None:
            raise FormatError(f"Not a DATE or DATE-TIME value: {text!r}", text)

        # Step 1: kind from the text shape, which must agree with VALUE
        kind = TemporalKind.DATE if date_match is not None else TemporalKind.DATE_TIME
        if declared is not None and declared is not kind:
            raise InconsistentKindError(f"VALUE={declared} does not match {kind} value {text!r}", text)

        if date_match is not None:
            if tzid is not None or timezone is not None:
                logger.debug("Ignoring timezone context for DATE value %s", text)
            return cls(TemporalKind.DATE, _decode_date_fields(text, *date_match.groups()))

        assert date_time_match is not None
        year, month, day, hour, minute, second, utc_designator = date_time_match.groups()

        # Steps 2 and 3: zone
        zone: Zone | None = None
        if utc_designator:
            if tzid is not None:
                raise AmbiguousZoneError(f"UTC value {text!r} cannot have TZID={tzid}", text)
            if timezone is not None:
                logger.debug("UTC designator in %s takes precedence over timezone %r", text, timezone)
            zone = Zone.utc()
        elif timezone is not None:
            zone = Zone.named(tzid or tzid_of(timezone), timezone)
        elif tzid is not None:
            zone = Zone.named(tzid, (registry or get_default_registry()).resolve(tzid))

        # Step 4: numeric fields
        instant = datetime.combine(
            _decode_date_fields(text, year, month, day),
            _decode_time_fields(text, hour, minute, second),
        )
        return cls(TemporalKind.DATE_TIME, instant, zone)

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    def format(self) -> str:
        """Encode to value text. The named zone is not part of the text."""
        text = f"{self.instant.year:04d}{self.instant.month:02d}{self.instant.day:02d}"
        if self.kind is TemporalKind.DATE:
            return text

        assert isinstance(self.instant, datetime)
        text += f"{DATE_TIME_SEPARATOR}{self.instant.hour:02d}{self.instant.minute:02d}{self.instant.second:02d}"
        if self.is_utc:
            text += UTC_DESIGNATOR
        return text

    def context_parameters(self) -> ParameterList:
        """Parameters that re-parse format() into an equal value."""
        parameters = ParameterList()
        if self.kind is TemporalKind.DATE:
            parameters.add((ParameterName.VALUE, TemporalKind.DATE.value))
        elif self.zone is not None and self.zone.tzid is not None:
            parameters.add((ParameterName.TZID, self.zone.tzid))
        return parameters

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def is_utc(self) -> bool:
        return self.zone is not None and self.zone.is_utc

    @property
    def is_floating(self) -> bool:
        """True for a DATE-TIME without zone (DATE values are never floating)."""
        return self.kind is TemporalKind.DATE_TIME and self.zone is None

    @property
    def tzid(self) -> str | None:
        return self.zone.tzid if self.zone is not None else None

    def with_kind(self, kind: TemporalKind) -> TemporalValue:
        """Switch between DATE and DATE-TIME.

        DATE -> DATE-TIME gives midnight, floating. DATE-TIME -> DATE drops the
        time of day and the zone. Both directions lose information; converting
        back does not restore the original value.
        """
        kind = TemporalKind(kind)
        if kind is self.kind:
            return self

        if kind is TemporalKind.DATE:
            assert isinstance(self.instant, datetime)
            return TemporalValue(TemporalKind.DATE, self.instant.date())

        return TemporalValue(TemporalKind.DATE_TIME, datetime.combine(self.instant, time()))

    def with_utc(self, utc: bool) -> TemporalValue:
        """Set or clear the UTC marker of a DATE-TIME.

        Named -> UTC converts the absolute instant. Floating -> UTC keeps the
        wall clock. UTC -> not UTC keeps the wall clock and becomes floating.
        Clearing the marker on a named or floating value changes nothing.
        """
        self._require_date_time("UTC")

        if utc:
            if self.is_utc:
                return self
            return TemporalValue.from_datetime(self.to_datetime(), utc=True)

        if not self.is_utc:
            return self
        return TemporalValue(TemporalKind.DATE_TIME, self.instant)

    def with_timezone(self, timezone: tzinfo | None) -> TemporalValue:
        """Anchor a DATE-TIME to timezone (None makes it floating).

        Zoned values keep their absolute instant, floating values keep their
        wall clock.
        """
        self._require_date_time("timezone")

        if timezone is None:
            return TemporalValue(TemporalKind.DATE_TIME, self.instant)

        if self.zone is None:
            return TemporalValue.from_instant(self.instant, timezone)

        return TemporalValue.from_instant(self.to_datetime().astimezone(timezone))

    def to_datetime(self) -> datetime:
        """Convert to datetime.

        Returns:
            Aware datetime for UTC and named zones, naive for floating values
            and midnight (naive) for DATE values
        """
        if self.kind is TemporalKind.DATE:
            return datetime.combine(self.instant, time())

        assert isinstance(self.instant, datetime)
        if self.zone is None:
            return self.instant
        return self.instant.replace(tzinfo=self.zone.tzinfo)

    def to_date(self) -> date:
        if isinstance(self.instant, datetime):
            return self.instant.date()
        return self.instant

    def _require_date_time(self, what: str) -> None:
        if self.kind is not TemporalKind.DATE_TIME:
            raise ValueError(f"DATE value cannot carry a {what}")

    def __str__(self) -> str:
        return self.format()


def _wall_clock(instant: datetime) -> datetime:
    return instant.replace(tzinfo=None, microsecond=0)
