"""Civil clock abstraction over the IANA timezone database."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Callable, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from openhours.config.settings import resolve_hours_settings
from openhours.domain.enums import Weekday
from openhours.domain.exceptions import ClockUnavailableError
from openhours.domain.models import CivilTime

_LOGGER = logging.getLogger("openhours.clock")


class CivilClock(Protocol):
    def now(self) -> CivilTime:
        """Return the current weekday and minute of day in the clock's zone."""


def load_zone(timezone_name: str) -> ZoneInfo:
    """Resolve an IANA zone, failing loudly when tz data is missing."""
    name = str(timezone_name or "").strip()
    if not name:
        raise ClockUnavailableError(timezone_name, "empty timezone name")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ClockUnavailableError(name) from exc


def civil_time_at(instant: datetime, zone: ZoneInfo) -> CivilTime:
    """Project an instant onto the civil calendar of ``zone``.

    Naive datetimes are taken as UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    local = instant.astimezone(zone)
    return CivilTime(
        weekday=Weekday.from_python_weekday(local.weekday()),
        minutes_since_midnight=local.hour * 60 + local.minute,
    )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ZoneClock:
    def __init__(self, timezone_name: str, now_fn: Callable[[], datetime] | None = None) -> None:
        self._zone = load_zone(timezone_name)
        self._now_fn = now_fn or _utc_now

    @property
    def timezone_name(self) -> str:
        return self._zone.key

    def at(self, instant: datetime) -> CivilTime:
        return civil_time_at(instant, self._zone)

    def now(self) -> CivilTime:
        return civil_time_at(self._now_fn(), self._zone)


class FixedClock:
    def __init__(self, civil_time: CivilTime) -> None:
        self._civil_time = civil_time

    def now(self) -> CivilTime:
        return self._civil_time


@lru_cache(maxsize=1)
def default_clock() -> ZoneClock:
    settings = resolve_hours_settings()
    _LOGGER.debug("civil clock timezone=%s", settings.timezone)
    return ZoneClock(settings.timezone)


def reset_default_clock() -> None:
    default_clock.cache_clear()


__all__ = [
    "CivilClock",
    "FixedClock",
    "ZoneClock",
    "civil_time_at",
    "default_clock",
    "load_zone",
    "reset_default_clock",
]
