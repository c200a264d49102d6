"""Open/closed status from a parsed hours listing and the current civil time."""

from __future__ import annotations

import logging

from openhours.clock.provider import CivilClock, default_clock
from openhours.config.settings import resolve_hours_settings
from openhours.domain.constants import (
    STATUS_CLOSED,
    STATUS_MEAL_SCHEDULE,
    STATUS_OPEN_24_7,
    STATUS_OPEN_TODAY,
    STATUS_OPEN_WEEKDAYS,
)
from openhours.domain.enums import ApplicabilityKind, Weekday
from openhours.domain.models import (
    Applicability,
    CivilTime,
    DayOnly,
    ExplicitlyClosed,
    MealSchedule,
    OpenStatus,
    ParseResult,
    TwentyFourSeven,
    Unrecognized,
    Window,
)
from openhours.evaluation.formatter import (
    format_days_until,
    format_minute_of_day,
    format_time_until_close,
    format_time_until_open,
)
from openhours.parsing.hours_parser import parse_hours

_LOGGER = logging.getLogger("openhours.evaluator")


def _opens_tomorrow(open_text: str) -> OpenStatus:
    return OpenStatus(
        is_open=False,
        status=f"Opens tomorrow at {open_text}",
        next_open_time=f"Tomorrow at {open_text}",
    )


def _opens_on_later_day(applicability: Applicability, today: Weekday, open_text: str) -> OpenStatus:
    days = applicability.days_until_next(today)
    next_day = applicability.next_day(today)
    return OpenStatus(
        is_open=False,
        status=f"Opens {format_days_until(days)} at {open_text}",
        next_open_time=f"{next_day.display_name} at {open_text}",
    )


def _evaluate_window(result: Window, now: CivilTime) -> OpenStatus:
    window = result.window
    applicability = result.applicability
    current = now.minutes_since_midnight
    open_text = format_minute_of_day(window.open_minutes)

    if not applicability.applies_on(now.weekday):
        return _opens_on_later_day(applicability, now.weekday, open_text)

    if window.contains(current):
        return OpenStatus(is_open=True, status=format_time_until_close(window.close_minutes - current))

    if current < window.open_minutes:
        until_open = format_time_until_open(window.open_minutes - current)
        return OpenStatus(
            is_open=False,
            status=until_open,
            time_until_open=until_open,
            next_open_time=open_text,
        )

    # Closed for the rest of today. Daily and weekday windows report "tomorrow",
    # Friday evening included.
    if applicability.kind is ApplicabilityKind.SPECIFIC_DAYS and applicability.days_until_next(now.weekday) > 1:
        return _opens_on_later_day(applicability, now.weekday, open_text)
    return _opens_tomorrow(open_text)


def _evaluate_day_only(result: DayOnly, now: CivilTime) -> OpenStatus:
    applicability = result.applicability
    if applicability.applies_on(now.weekday):
        if applicability.kind is ApplicabilityKind.WEEKDAYS:
            return OpenStatus(is_open=True, status=STATUS_OPEN_WEEKDAYS)
        return OpenStatus(is_open=True, status=STATUS_OPEN_TODAY)

    days = applicability.days_until_next(now.weekday)
    return OpenStatus(
        is_open=False,
        status=f"Opens {format_days_until(days)}",
        next_open_time=applicability.next_day(now.weekday).display_name,
    )


def evaluate_parse_result(result: ParseResult, now: CivilTime) -> OpenStatus | None:
    """Evaluate a parse result; ``None`` means the status is unknown, not closed."""
    if isinstance(result, TwentyFourSeven):
        return OpenStatus(is_open=True, status=STATUS_OPEN_24_7)
    if isinstance(result, ExplicitlyClosed):
        return OpenStatus(is_open=False, status=STATUS_CLOSED)
    if isinstance(result, MealSchedule):
        return OpenStatus(is_open=True, status=STATUS_MEAL_SCHEDULE)
    if isinstance(result, Window):
        return _evaluate_window(result, now)
    if isinstance(result, DayOnly):
        return _evaluate_day_only(result, now)
    if isinstance(result, Unrecognized):
        return None
    raise TypeError(f"Unhandled parse result: {result!r}")


def evaluate_at(hours_text: str | None, now: CivilTime) -> OpenStatus | None:
    result = parse_hours(hours_text)
    if (
        isinstance(result, Unrecognized)
        and hours_text
        and hours_text.strip()
        and resolve_hours_settings().log_unrecognized
    ):
        _LOGGER.debug("unrecognized hours text: %r", hours_text)
    return evaluate_parse_result(result, now)


def evaluate(hours_text: str | None, *, clock: CivilClock | None = None) -> OpenStatus | None:
    """Evaluate free-text hours against the current civil time.

    The clock is consulted on every call; a missing timezone raises
    ``ClockUnavailableError`` instead of guessing an offset.
    """
    now = (clock or default_clock()).now()
    return evaluate_at(hours_text, now)


__all__ = [
    "evaluate",
    "evaluate_at",
    "evaluate_parse_result",
]
