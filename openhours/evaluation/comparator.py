"""Ordering of open statuses: open now, then known-closed, then unknown."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Optional

from openhours.domain.models import OpenStatus

_RANK_OPEN = 0
_RANK_CLOSED = 1
_RANK_UNKNOWN = 2


def status_rank(status: Optional[OpenStatus]) -> int:
    if status is None:
        return _RANK_UNKNOWN
    return _RANK_OPEN if status.is_open else _RANK_CLOSED


def compare_by_open_status(a: Optional[OpenStatus], b: Optional[OpenStatus]) -> int:
    rank_a = status_rank(a)
    rank_b = status_rank(b)
    return (rank_a > rank_b) - (rank_a < rank_b)


open_status_key = cmp_to_key(compare_by_open_status)


def sort_statuses(statuses: Iterable[Optional[OpenStatus]]) -> list[Optional[OpenStatus]]:
    """Stable sort; equal-rank entries keep their input order."""
    return sorted(statuses, key=open_status_key)


__all__ = [
    "compare_by_open_status",
    "open_status_key",
    "sort_statuses",
    "status_rank",
]
