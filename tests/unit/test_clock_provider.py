"""Civil clock conversion, including daylight-saving transitions."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from openhours.clock.provider import (
    FixedClock,
    ZoneClock,
    civil_time_at,
    default_clock,
    load_zone,
)
from openhours.domain.enums import Weekday
from openhours.domain.exceptions import ClockUnavailableError
from openhours.domain.models import CivilTime
from openhours.evaluation.evaluator import evaluate

_VANCOUVER = load_zone("America/Vancouver")


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def test_weekday_numbering_starts_on_sunday():
    assert Weekday.from_python_weekday(date(2026, 10, 18).weekday()) is Weekday.SUNDAY
    assert Weekday.from_python_weekday(date(2026, 10, 19).weekday()) is Weekday.MONDAY
    assert Weekday.from_python_weekday(date(2026, 10, 24).weekday()) is Weekday.SATURDAY


def test_standard_and_daylight_offsets():
    winter = civil_time_at(_utc(2026, 1, 15, 20, 0), _VANCOUVER)
    summer = civil_time_at(_utc(2026, 7, 15, 20, 0), _VANCOUVER)

    assert winter == CivilTime(weekday=Weekday.THURSDAY, minutes_since_midnight=12 * 60)
    assert summer == CivilTime(weekday=Weekday.WEDNESDAY, minutes_since_midnight=13 * 60)


def test_spring_forward_skips_an_hour():
    before = civil_time_at(_utc(2026, 3, 8, 9, 59), _VANCOUVER)
    after = civil_time_at(_utc(2026, 3, 8, 10, 0), _VANCOUVER)

    assert before.weekday is Weekday.SUNDAY
    assert before.minutes_since_midnight == 1 * 60 + 59
    assert after.minutes_since_midnight == 3 * 60


def test_conversion_crosses_local_midnight():
    local = civil_time_at(_utc(2026, 1, 16, 5, 0), _VANCOUVER)

    assert local == CivilTime(weekday=Weekday.THURSDAY, minutes_since_midnight=21 * 60)


def test_naive_instants_are_utc():
    assert civil_time_at(datetime(2026, 1, 15, 20, 0), _VANCOUVER) == civil_time_at(
        _utc(2026, 1, 15, 20, 0), _VANCOUVER
    )


def test_zone_clock_reads_injected_instant():
    clock = ZoneClock("America/Vancouver", now_fn=lambda: _utc(2026, 10, 19, 21, 0))

    assert clock.timezone_name == "America/Vancouver"
    assert clock.now() == CivilTime.of(Weekday.MONDAY, 14)


@pytest.mark.parametrize("name", ["Mars/Olympus_Mons", "", "   ", "../etc/passwd"])
def test_unknown_timezone_fails_loudly(name):
    with pytest.raises(ClockUnavailableError):
        ZoneClock(name)


def test_default_clock_follows_environment(monkeypatch):
    monkeypatch.setenv("OPENHOURS_TIMEZONE", "Europe/London")

    assert default_clock().timezone_name == "Europe/London"


def test_default_clock_defaults_to_vancouver():
    assert default_clock().timezone_name == "America/Vancouver"


def test_evaluate_with_broken_timezone_raises(monkeypatch):
    monkeypatch.setenv("OPENHOURS_TIMEZONE", "Nowhere/Atlantis")

    with pytest.raises(ClockUnavailableError):
        evaluate("24/7")


def test_fixed_clock():
    civil = CivilTime.of(Weekday.FRIDAY, 23, 59)

    assert FixedClock(civil).now() is civil


def test_civil_time_rejects_out_of_range_minutes():
    with pytest.raises(ValueError):
        CivilTime(weekday=Weekday.MONDAY, minutes_since_midnight=1440)
