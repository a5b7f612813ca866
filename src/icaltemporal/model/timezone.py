"""Timezone registry used to resolve TZID parameter values.

The temporal model never looks up timezones itself. It asks a registry,
which turns an identifier into a tzinfo or raises UnknownTimezoneError.

Classes:
    - TimezoneRegistry: Protocol every registry implements
    - ZoneInfoRegistry: Default registry backed by the IANA database (zoneinfo)

Functions:
    - get_default_registry / set_default_registry: Process-wide registry used
      when callers do not pass one explicitly

Reference: RFC 5545, section 3.2.19 (Time Zone Identifier)
"""

from __future__ import annotations

import logging
from datetime import tzinfo
from functools import lru_cache
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..exceptions import UnknownTimezoneError

logger = logging.getLogger(__name__)


@runtime_checkable
class TimezoneRegistry(Protocol):
    def resolve(self, tzid: str) -> tzinfo:
        """Return the timezone for tzid.

        Raises:
            UnknownTimezoneError: If the identifier is not known to the registry
        """
        ...


@lru_cache(maxsize=256)
def _load_zone(tzid: str) -> ZoneInfo:
    return ZoneInfo(tzid)


class ZoneInfoRegistry:
    """Registry resolving identifiers through zoneinfo.ZoneInfo.

    Loaded zones are memoised, repeated lookups of the same identifier return
    the same object. Identifiers are case-sensitive as in the IANA database.
    """

    def resolve(self, tzid: str) -> tzinfo:
        if not tzid:
            raise UnknownTimezoneError("Empty timezone identifier", tzid)

        try:
            zone = _load_zone(tzid)
        except ZoneInfoNotFoundError as exc:
            raise UnknownTimezoneError(f"Unknown timezone identifier: {tzid}", tzid) from exc
        except ValueError as exc:
            # zoneinfo rejects malformed keys (absolute paths, "..") with ValueError
            raise UnknownTimezoneError(f"Invalid timezone identifier: {tzid}", tzid) from exc

        logger.debug("Resolved timezone %s", tzid)
        return zone

    def __repr__(self) -> str:
        return "ZoneInfoRegistry()"


_default_registry: TimezoneRegistry = ZoneInfoRegistry()


def get_default_registry() -> TimezoneRegistry:
    return _default_registry


def set_default_registry(registry: TimezoneRegistry) -> None:
    """Replace the registry used when no registry is passed explicitly."""
    global _default_registry

    if not isinstance(registry, TimezoneRegistry):
        raise TypeError(f"Registry must provide resolve(tzid), got {type(registry).__name__}")

    logger.debug("Default timezone registry set to %r", registry)
    _default_registry = registry


def tzid_of(timezone: tzinfo) -> str:
    """Return the identifier of a tzinfo object.

    Raises:
        ValueError: If the tzinfo carries no identifier (e.g. a fixed offset)
    """
    key = getattr(timezone, "key", None)
    if not isinstance(key, str) or not key:
        raise ValueError(f"Timezone has no identifier: {timezone!r}")
    return key
