"""Runtime configuration helpers."""

from openhours.config.settings import HoursSettings, resolve_hours_settings

__all__ = [
    "HoursSettings",
    "resolve_hours_settings",
]
