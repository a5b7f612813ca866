"""Shared test fixtures for pyICalTemporal tests."""

from __future__ import annotations

from collections.abc import Generator
from datetime import datetime, timedelta, tzinfo

import pytest

from icaltemporal.exceptions import UnknownTimezoneError
from icaltemporal.model.timezone import get_default_registry, set_default_registry


class FakeTimezone(tzinfo):
    """Fixed-offset tzinfo that carries an identifier like ZoneInfo does."""

    def __init__(self, key: str, hours: int) -> None:
        self.key = key
        self._offset = timedelta(hours=hours)

    def utcoffset(self, dt: datetime | None) -> timedelta:
        return self._offset

    def dst(self, dt: datetime | None) -> timedelta:
        return timedelta(0)

    def tzname(self, dt: datetime | None) -> str:
        return self.key

    def __repr__(self) -> str:
        return f"FakeTimezone({self.key!r})"


class FakeRegistry:
    """In-memory registry that records every lookup."""

    def __init__(self, zones: dict[str, tzinfo]) -> None:
        self.zones = zones
        self.lookups: list[str] = []

    def resolve(self, tzid: str) -> tzinfo:
        self.lookups.append(tzid)
        try:
            return self.zones[tzid]
        except KeyError:
            raise UnknownTimezoneError(f"Unknown timezone identifier: {tzid}", tzid) from None


@pytest.fixture
def fake_registry() -> FakeRegistry:
    """Registry knowing two fixed-offset zones."""
    return FakeRegistry(
        {
            "Test/Plus2": FakeTimezone("Test/Plus2", 2),
            "Test/Minus5": FakeTimezone("Test/Minus5", -5),
        }
    )


@pytest.fixture
def restore_default_registry() -> Generator[None]:
    """Restore the process-wide registry after a test replaces it."""
    registry = get_default_registry()
    yield
    set_default_registry(registry)
