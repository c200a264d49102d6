"""Domain enums."""

from enum import Enum, IntEnum


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_python_weekday(cls, value: int) -> "Weekday":
        """Map ``date.weekday()`` (Monday=0) onto the Sunday=0 numbering."""
        return cls((value + 1) % 7)

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class ApplicabilityKind(str, Enum):
    EVERY_DAY = "every_day"
    WEEKDAYS = "weekdays"
    SPECIFIC_DAYS = "specific_days"


class ParseKind(str, Enum):
    TWENTY_FOUR_SEVEN = "twenty_four_seven"
    EXPLICITLY_CLOSED = "explicitly_closed"
    MEAL_SCHEDULE = "meal_schedule"
    WINDOW = "window"
    DAY_ONLY = "day_only"
    UNRECOGNIZED = "unrecognized"


class Meal(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
