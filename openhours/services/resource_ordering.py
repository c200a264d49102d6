"""Open-status aware ordering and filtering of resource listings.

Resources are anything carrying free-text hours: mappings with an ``hours``
key, objects with an ``hours`` attribute, or whatever ``hours_of`` extracts.
Each helper reads the clock once so that a whole list is judged against the
same instant.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, Sequence, TypeVar

from openhours.clock.provider import CivilClock, default_clock
from openhours.domain.constants import OTHER_SERVICES_GROUP
from openhours.domain.models import CivilTime, OpenStatus
from openhours.evaluation.comparator import open_status_key
from openhours.evaluation.evaluator import evaluate_at

T = TypeVar("T")
HoursGetter = Callable[[Any], Optional[str]]


def read_hours(resource: Any) -> str | None:
    if isinstance(resource, Mapping):
        value = resource.get("hours")
    else:
        value = getattr(resource, "hours", None)
    return value if isinstance(value, str) else None


def _current_time(clock: CivilClock | None) -> CivilTime:
    return (clock or default_clock()).now()


def statuses_for(
    resources: Iterable[T],
    *,
    now: CivilTime,
    hours_of: HoursGetter = read_hours,
) -> list[tuple[Optional[OpenStatus], T]]:
    return [(evaluate_at(hours_of(resource), now), resource) for resource in resources]


def _is_open(status: Optional[OpenStatus]) -> bool:
    return bool(status and status.is_open)


def sort_by_open_status(
    resources: Iterable[T],
    *,
    clock: CivilClock | None = None,
    hours_of: HoursGetter = read_hours,
) -> list[T]:
    """Open resources first, then known-closed, then unknown; stable within each."""
    pairs = statuses_for(resources, now=_current_time(clock), hours_of=hours_of)
    pairs.sort(key=lambda pair: open_status_key(pair[0]))
    return [resource for _, resource in pairs]


def filter_open_now(
    resources: Iterable[T],
    *,
    clock: CivilClock | None = None,
    hours_of: HoursGetter = read_hours,
) -> list[T]:
    pairs = statuses_for(resources, now=_current_time(clock), hours_of=hours_of)
    return [resource for status, resource in pairs if _is_open(status)]


@dataclass(frozen=True)
class ResourceGroup(Generic[T]):
    title: str
    resources: tuple[T, ...]
    has_open_resource: bool


def order_groups_by_open(
    groups: Mapping[str, Sequence[T]],
    *,
    clock: CivilClock | None = None,
    hours_of: HoursGetter = read_hours,
) -> list[ResourceGroup[T]]:
    """Groups holding an open resource first, alphabetical within each tier.

    The catch-all "Other Services" group always goes last. Resource order
    inside a group is left untouched.
    """
    now = _current_time(clock)
    built: list[ResourceGroup[T]] = []
    for title, members in groups.items():
        pairs = statuses_for(members, now=now, hours_of=hours_of)
        built.append(
            ResourceGroup(
                title=title,
                resources=tuple(members),
                has_open_resource=any(_is_open(status) for status, _ in pairs),
            )
        )

    built.sort(key=lambda group: (not group.has_open_resource, group.title.casefold()))
    regular = [group for group in built if group.title != OTHER_SERVICES_GROUP]
    other = [group for group in built if group.title == OTHER_SERVICES_GROUP]
    return regular + other


__all__ = [
    "ResourceGroup",
    "filter_open_now",
    "order_groups_by_open",
    "read_hours",
    "sort_by_open_status",
    "statuses_for",
]
