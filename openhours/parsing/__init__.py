"""Deterministic parsing helpers."""

from openhours.parsing.hours_parser import parse_hours, scan_applicability, to_minute_of_day

__all__ = [
    "parse_hours",
    "scan_applicability",
    "to_minute_of_day",
]
