"""Application services built on the hours core."""

from openhours.services.resource_ordering import (
    ResourceGroup,
    filter_open_now,
    order_groups_by_open,
    sort_by_open_status,
)

__all__ = [
    "ResourceGroup",
    "filter_open_now",
    "order_groups_by_open",
    "sort_by_open_status",
]
