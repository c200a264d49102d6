"""Token tables and regular expressions for free-text hours."""

from __future__ import annotations

import re

from openhours.domain.enums import Meal, Weekday

TWENTY_FOUR_SEVEN_TOKENS = ("24/7", "24 hours", "always open")

CLOSED_TOKENS = ("temporarily closed", "permanently closed")

DAILY_TOKENS = ("daily:", "daily ")

WEEKDAY_RANGE_TOKENS = ("mon-fri", "monday-friday", "weekday")

FULL_DAY_NAMES: dict[str, Weekday] = {day.name.lower(): day for day in Weekday}

# Short tokens that imply a single day on their own.
SHORT_DAY_TOKENS: dict[str, Weekday] = {
    "sat": Weekday.SATURDAY,
    "sun": Weekday.SUNDAY,
}

DAY_PREFIXES: dict[str, Weekday] = {day.name[:3].lower(): day for day in Weekday}

_DAY_WORD = (
    r"\b(sunday|monday|tuesday|wednesday|thursday|friday|saturday"
    r"|sun|mon|tues|tue|wed|thurs|thur|thu|fri|sat)s?\b\.?"
)

# "mon-sat", "tuesday to saturday", "sun – thu"
DAY_RANGE_PATTERN = re.compile(rf"{_DAY_WORD}\s*(?:-|–|to|through|thru)\s*{_DAY_WORD}")

# Day-ish fragments that, when nothing above resolves, make the day set ambiguous.
PARTIAL_DAY_TOKENS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun", "weekday", "weekend")

# H[:MM][am|pm]; the separator run covers "-", "–" and "to".
_CLOCK = r"(\d{1,2}):?(\d{2})?\s*(am|pm)"
_SEPARATOR = r"\s*[-–to]+\s*"

MEAL_PATTERNS: dict[Meal, re.Pattern[str]] = {
    meal: re.compile(rf"{meal.value}\s+{_CLOCK}") for meal in Meal
}

DAILY_RANGE_PATTERN = re.compile(rf"daily\s+{_CLOCK}?{_SEPARATOR}{_CLOCK}")

TIME_RANGE_PATTERN = re.compile(rf"{_CLOCK}?{_SEPARATOR}{_CLOCK}?")
