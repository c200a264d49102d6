"""Free-text hours parser.

Operator-entered hours are noisy, so every matcher is best-effort: a matcher
that finds nothing usable returns ``None`` and the next one is tried. The
parser itself never raises; text nothing understands becomes ``Unrecognized``.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from pydantic import ValidationError

from openhours.domain.constants import LAST_MINUTE_OF_DAY, MONDAY_TO_FRIDAY
from openhours.domain.enums import Weekday
from openhours.domain.models import (
    Applicability,
    DayOnly,
    ExplicitlyClosed,
    MealSchedule,
    MealTime,
    ParseResult,
    TimeWindow,
    TwentyFourSeven,
    Unrecognized,
    Window,
)
from openhours.parsing.patterns import (
    CLOSED_TOKENS,
    DAILY_RANGE_PATTERN,
    DAILY_TOKENS,
    DAY_PREFIXES,
    DAY_RANGE_PATTERN,
    FULL_DAY_NAMES,
    MEAL_PATTERNS,
    PARTIAL_DAY_TOKENS,
    SHORT_DAY_TOKENS,
    TIME_RANGE_PATTERN,
    TWENTY_FOUR_SEVEN_TOKENS,
    WEEKDAY_RANGE_TOKENS,
)

Matcher = Callable[[str], Optional[ParseResult]]


def to_minute_of_day(hour_text: str, minute_text: str | None, meridiem: str | None) -> int | None:
    """Convert clock tokens to minutes since midnight, ``None`` when out of range."""
    hour = int(hour_text)
    minute = int(minute_text or 0)
    if minute > 59:
        return None
    if meridiem:
        if hour < 1 or hour > 12:
            return None
        if meridiem == "pm" and hour != 12:
            hour += 12
        elif meridiem == "am" and hour == 12:
            hour = 0
    elif hour > 23:
        return None
    value = hour * 60 + minute
    if value < 0 or value > LAST_MINUTE_OF_DAY:
        return None
    return value


def window_from_match(match: re.Match[str]) -> TimeWindow | None:
    open_minutes = to_minute_of_day(*match.group(1, 2, 3))
    close_minutes = to_minute_of_day(*match.group(4, 5, 6))
    if open_minutes is None or close_minutes is None:
        return None
    try:
        return TimeWindow(open_minutes=open_minutes, close_minutes=close_minutes)
    except ValidationError:
        # close <= open, i.e. an overnight or empty range
        return None


def expand_day_range(start: Weekday, end: Weekday) -> set[Weekday]:
    """Days from ``start`` to ``end`` inclusive, wrapping past Saturday."""
    span = (end - start) % 7
    return {Weekday((start + offset) % 7) for offset in range(span + 1)}


def scan_applicability(text: str) -> Applicability | None:
    """Infer which weekdays the text refers to.

    Day ranges such as ``"mon-sat"`` or ``"sunday to thursday"`` cover every
    day in between. Returns ``None`` when day fragments are present but none
    can be resolved to a concrete set of days (for example ``"tue 9am-5pm"``).
    """
    days: set[Weekday] = {day for name, day in FULL_DAY_NAMES.items() if name in text}
    for m in DAY_RANGE_PATTERN.finditer(text):
        days |= expand_day_range(DAY_PREFIXES[m.group(1)[:3]], DAY_PREFIXES[m.group(2)[:3]])
    if any(token in text for token in WEEKDAY_RANGE_TOKENS):
        days |= MONDAY_TO_FRIDAY
    days |= {day for token, day in SHORT_DAY_TOKENS.items() if token in text}

    if days:
        return Applicability(days=frozenset(days))
    if any(token in text for token in PARTIAL_DAY_TOKENS):
        return None
    return Applicability.every_day()


def _match_twenty_four_seven(text: str) -> ParseResult | None:
    if any(token in text for token in TWENTY_FOUR_SEVEN_TOKENS):
        return TwentyFourSeven()
    return None


def _match_explicitly_closed(text: str) -> ParseResult | None:
    if any(token in text for token in CLOSED_TOKENS):
        return ExplicitlyClosed()
    return None


def _match_meal_schedule(text: str) -> ParseResult | None:
    if not any(token in text for token in DAILY_TOKENS):
        return None
    meals: list[MealTime] = []
    for meal, pattern in MEAL_PATTERNS.items():
        m = pattern.search(text)
        if not m:
            continue
        minute_of_day = to_minute_of_day(*m.group(1, 2, 3))
        if minute_of_day is not None:
            meals.append(MealTime(meal=meal, minute_of_day=minute_of_day))
    if not meals:
        return None
    return MealSchedule(meals=tuple(meals))


def _match_daily_window(text: str) -> ParseResult | None:
    m = DAILY_RANGE_PATTERN.search(text)
    if not m:
        return None
    window = window_from_match(m)
    if window is None:
        return None
    return Window(window=window, applicability=Applicability.every_day())


def _match_time_window(text: str) -> ParseResult | None:
    m = TIME_RANGE_PATTERN.search(text)
    if not m:
        return None
    window = window_from_match(m)
    if window is None:
        return None
    applicability = scan_applicability(text)
    if applicability is None:
        return None
    return Window(window=window, applicability=applicability)


def _match_day_only(text: str) -> ParseResult | None:
    if any(token in text for token in WEEKDAY_RANGE_TOKENS):
        return DayOnly(applicability=Applicability.weekdays())
    return None


MATCHERS: tuple[Matcher, ...] = (
    _match_twenty_four_seven,
    _match_explicitly_closed,
    _match_meal_schedule,
    _match_daily_window,
    _match_time_window,
    _match_day_only,
)


def parse_hours(text: str | None) -> ParseResult:
    """Parse free-text hours; the first matcher that succeeds wins."""
    if not text or not text.strip():
        return Unrecognized()
    lowered = text.lower()
    for matcher in MATCHERS:
        result = matcher(lowered)
        if result is not None:
            return result
    return Unrecognized()


__all__ = [
    "MATCHERS",
    "expand_day_range",
    "parse_hours",
    "scan_applicability",
    "to_minute_of_day",
    "window_from_match",
]
