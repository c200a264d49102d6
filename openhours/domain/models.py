"""Pydantic domain models."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from openhours.domain.constants import ALL_DAYS, LAST_MINUTE_OF_DAY, MONDAY_TO_FRIDAY
from openhours.domain.enums import ApplicabilityKind, Meal, ParseKind, Weekday

_FROZEN = ConfigDict(frozen=True)


class CivilTime(BaseModel):
    model_config = _FROZEN

    weekday: Weekday
    minutes_since_midnight: int = Field(ge=0, le=LAST_MINUTE_OF_DAY)

    @classmethod
    def of(cls, weekday: Weekday, hour: int, minute: int = 0) -> "CivilTime":
        return cls(weekday=weekday, minutes_since_midnight=hour * 60 + minute)


class TimeWindow(BaseModel):
    """Same-day open/close range in minutes since midnight, close exclusive."""

    model_config = _FROZEN

    open_minutes: int = Field(ge=0, le=LAST_MINUTE_OF_DAY)
    close_minutes: int = Field(ge=0, le=LAST_MINUTE_OF_DAY)

    @model_validator(mode="after")
    def _reject_wrapping(self) -> "TimeWindow":
        if self.close_minutes <= self.open_minutes:
            raise ValueError("close time must be after open time on the same day")
        return self

    def contains(self, minute_of_day: int) -> bool:
        return self.open_minutes <= minute_of_day < self.close_minutes


class Applicability(BaseModel):
    model_config = _FROZEN

    days: frozenset[Weekday]

    @model_validator(mode="after")
    def _require_days(self) -> "Applicability":
        if not self.days:
            raise ValueError("applicability needs at least one day")
        return self

    @classmethod
    def every_day(cls) -> "Applicability":
        return cls(days=ALL_DAYS)

    @classmethod
    def weekdays(cls) -> "Applicability":
        return cls(days=MONDAY_TO_FRIDAY)

    @classmethod
    def specific(cls, *days: Weekday) -> "Applicability":
        return cls(days=frozenset(days))

    @property
    def kind(self) -> ApplicabilityKind:
        if self.days == ALL_DAYS:
            return ApplicabilityKind.EVERY_DAY
        if self.days == MONDAY_TO_FRIDAY:
            return ApplicabilityKind.WEEKDAYS
        return ApplicabilityKind.SPECIFIC_DAYS

    def applies_on(self, weekday: Weekday) -> bool:
        return weekday in self.days

    def days_until_next(self, weekday: Weekday) -> int:
        """Days after ``weekday`` until the next applicable day (1..7)."""
        for offset in range(1, 8):
            if Weekday((weekday + offset) % 7) in self.days:
                return offset
        raise ValueError("applicability has no days")

    def next_day(self, weekday: Weekday) -> Weekday:
        return Weekday((weekday + self.days_until_next(weekday)) % 7)


class MealTime(BaseModel):
    model_config = _FROZEN

    meal: Meal
    minute_of_day: int = Field(ge=0, le=LAST_MINUTE_OF_DAY)


class TwentyFourSeven(BaseModel):
    model_config = _FROZEN

    kind: Literal[ParseKind.TWENTY_FOUR_SEVEN] = ParseKind.TWENTY_FOUR_SEVEN


class ExplicitlyClosed(BaseModel):
    model_config = _FROZEN

    kind: Literal[ParseKind.EXPLICITLY_CLOSED] = ParseKind.EXPLICITLY_CLOSED


class MealSchedule(BaseModel):
    model_config = _FROZEN

    kind: Literal[ParseKind.MEAL_SCHEDULE] = ParseKind.MEAL_SCHEDULE
    meals: tuple[MealTime, ...] = ()


class Window(BaseModel):
    model_config = _FROZEN

    kind: Literal[ParseKind.WINDOW] = ParseKind.WINDOW
    window: TimeWindow
    applicability: Applicability


class DayOnly(BaseModel):
    model_config = _FROZEN

    kind: Literal[ParseKind.DAY_ONLY] = ParseKind.DAY_ONLY
    applicability: Applicability


class Unrecognized(BaseModel):
    model_config = _FROZEN

    kind: Literal[ParseKind.UNRECOGNIZED] = ParseKind.UNRECOGNIZED


ParseResult = Annotated[
    Union[TwentyFourSeven, ExplicitlyClosed, MealSchedule, Window, DayOnly, Unrecognized],
    Field(discriminator="kind"),
]


class OpenStatus(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    is_open: bool
    status: str
    time_until_open: Optional[str] = None
    next_open_time: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        """Dump with the camelCase field names used by API consumers."""
        return self.model_dump(by_alias=True)
