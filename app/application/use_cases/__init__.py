"""Aggregate application use cases."""

from .notifications import (
    count_unread,
    generate_notifications,
    list_notifications,
    mark_all_read,
    mark_read,
)

__all__ = [
    "count_unread",
    "generate_notifications",
    "list_notifications",
    "mark_all_read",
    "mark_read",
]
