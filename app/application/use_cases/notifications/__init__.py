"""Inbox notification generation and queries."""

from .builders import GenerationContext, collect_candidates
from .filters import apply_daily_cap, apply_quiet_hours, is_within_quiet_hours
from .generate import GenerationPolicy, GenerationRequest, generate_notifications
from .inbox import (
    DEFAULT_PAGE_SIZE,
    count_unread,
    list_notifications,
    mark_all_read,
    mark_read,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "GenerationContext",
    "GenerationPolicy",
    "GenerationRequest",
    "apply_daily_cap",
    "apply_quiet_hours",
    "collect_candidates",
    "count_unread",
    "generate_notifications",
    "is_within_quiet_hours",
    "list_notifications",
    "mark_all_read",
    "mark_read",
]
