"""Runtime settings snapshot resolved from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from openhours.domain.constants import DEFAULT_TIMEZONE

_TRUTHY = {"1", "true", "yes", "on"}


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


def resolve_timezone() -> str:
    raw = os.getenv("OPENHOURS_TIMEZONE")
    if _is_configured(raw):
        return str(raw).strip()
    return DEFAULT_TIMEZONE


def log_unrecognized_enabled() -> bool:
    return _is_enabled(os.getenv("OPENHOURS_LOG_UNRECOGNIZED"))


class HoursSettings(BaseModel):
    timezone: str = Field(default=DEFAULT_TIMEZONE)
    log_unrecognized: bool = Field(default=False)


def resolve_hours_settings(*, timezone: str | None = None) -> HoursSettings:
    resolved_timezone = str(timezone or "").strip() or resolve_timezone()
    return HoursSettings(
        timezone=resolved_timezone,
        log_unrecognized=log_unrecognized_enabled(),
    )


__all__ = [
    "HoursSettings",
    "log_unrecognized_enabled",
    "resolve_hours_settings",
    "resolve_timezone",
]
