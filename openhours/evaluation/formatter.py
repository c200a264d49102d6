"""Short human phrases for clock times and minute deltas."""

from __future__ import annotations

from openhours.domain.constants import CLOSING_SOON_MINUTES


def format_time(hour: int, minute: int) -> str:
    period = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    display_minute = f":{minute:02d}" if minute > 0 else ""
    return f"{display_hour}{display_minute} {period}"


def format_minute_of_day(minute_of_day: int) -> str:
    return format_time(minute_of_day // 60, minute_of_day % 60)


def _hours_and_minutes(hours: int, minutes: int) -> str:
    return f"{hours}h {minutes}m" if minutes > 0 else f"{hours}h"


def format_time_until_open(minutes: int) -> str:
    hours, rest = divmod(minutes, 60)
    if hours == 0:
        return f"Opens in {rest} min"
    if hours == 1 and rest == 0:
        return "Opens in 1 hour"
    return f"Opens in {_hours_and_minutes(hours, rest)}"


def format_time_until_close(minutes: int) -> str:
    hours, rest = divmod(minutes, 60)
    if minutes <= CLOSING_SOON_MINUTES or hours == 0:
        return f"Closes in {minutes} min"
    if hours == 1 and rest == 0:
        return "Closes in 1 hour"
    if hours == 1:
        return f"Closes in 1h {rest}m"
    return f"Open for {_hours_and_minutes(hours, rest)}"


def format_days_until(days: int) -> str:
    return "tomorrow" if days == 1 else f"in {days} days"


__all__ = [
    "format_days_until",
    "format_minute_of_day",
    "format_time",
    "format_time_until_close",
    "format_time_until_open",
]
