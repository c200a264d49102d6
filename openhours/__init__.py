"""Free-text opening hours interpreter."""

from openhours.clock import FixedClock, ZoneClock
from openhours.domain import ClockUnavailableError, CivilTime, OpenStatus, Weekday
from openhours.evaluation import compare_by_open_status, evaluate, format_time, sort_statuses
from openhours.parsing import parse_hours

__version__ = "0.1.0"

__all__ = [
    "CivilTime",
    "ClockUnavailableError",
    "FixedClock",
    "OpenStatus",
    "Weekday",
    "ZoneClock",
    "compare_by_open_status",
    "evaluate",
    "format_time",
    "parse_hours",
    "sort_statuses",
]
