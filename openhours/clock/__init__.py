"""Civil clock providers."""

from openhours.clock.provider import (
    CivilClock,
    FixedClock,
    ZoneClock,
    civil_time_at,
    default_clock,
    load_zone,
    reset_default_clock,
)

__all__ = [
    "CivilClock",
    "FixedClock",
    "ZoneClock",
    "civil_time_at",
    "default_clock",
    "load_zone",
    "reset_default_clock",
]
