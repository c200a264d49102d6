"""Domain package exports."""

from openhours.domain.constants import (
    CLOSING_SOON_MINUTES,
    DEFAULT_TIMEZONE,
    MINUTES_PER_DAY,
    MONDAY_TO_FRIDAY,
)
from openhours.domain.enums import ApplicabilityKind, Meal, ParseKind, Weekday
from openhours.domain.exceptions import ClockUnavailableError, DomainError
from openhours.domain.models import (
    Applicability,
    CivilTime,
    DayOnly,
    ExplicitlyClosed,
    MealSchedule,
    MealTime,
    OpenStatus,
    ParseResult,
    TimeWindow,
    TwentyFourSeven,
    Unrecognized,
    Window,
)

__all__ = [
    "Applicability",
    "ApplicabilityKind",
    "CivilTime",
    "ClockUnavailableError",
    "DayOnly",
    "DomainError",
    "ExplicitlyClosed",
    "Meal",
    "MealSchedule",
    "MealTime",
    "OpenStatus",
    "ParseKind",
    "ParseResult",
    "TimeWindow",
    "TwentyFourSeven",
    "Unrecognized",
    "Weekday",
    "Window",
    "CLOSING_SOON_MINUTES",
    "DEFAULT_TIMEZONE",
    "MINUTES_PER_DAY",
    "MONDAY_TO_FRIDAY",
]
