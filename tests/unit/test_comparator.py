from __future__ import annotations

import random

from openhours.domain.models import OpenStatus
from openhours.evaluation.comparator import (
    compare_by_open_status,
    open_status_key,
    sort_statuses,
    status_rank,
)

_OPEN = OpenStatus(is_open=True, status="Open 24/7")
_CLOSED = OpenStatus(is_open=False, status="Closed")


def test_compare_by_open_status_tiers():
    assert compare_by_open_status(_OPEN, _CLOSED) == -1
    assert compare_by_open_status(_CLOSED, _OPEN) == 1
    assert compare_by_open_status(_CLOSED, None) == -1
    assert compare_by_open_status(None, _CLOSED) == 1
    assert compare_by_open_status(_OPEN, None) == -1
    assert compare_by_open_status(None, None) == 0
    assert compare_by_open_status(_OPEN, OpenStatus(is_open=True, status="Closes in 5 min")) == 0


def test_sort_statuses_orders_groups():
    ordered = sort_statuses([None, _CLOSED, _OPEN, None, _OPEN])

    assert [status_rank(status) for status in ordered] == [0, 0, 1, 2, 2]


def test_sort_is_stable_within_each_group():
    rng = random.Random(20251018)
    pool = [
        _OPEN,
        OpenStatus(is_open=True, status="Closes in 10 min"),
        _CLOSED,
        OpenStatus(is_open=False, status="Opens in 1 hour", time_until_open="Opens in 1 hour"),
        None,
    ]
    for _ in range(200):
        tagged = [(rng.choice(pool), index) for index in range(rng.randint(0, 25))]
        ordered = sorted(tagged, key=lambda pair: open_status_key(pair[0]))

        ranks = [status_rank(status) for status, _ in ordered]
        assert ranks == sorted(ranks)
        for rank in (0, 1, 2):
            indexes = [index for status, index in ordered if status_rank(status) == rank]
            assert indexes == sorted(indexes)
