"""Utility helpers for reusable functionality."""

from .datetime import (
    MINUTES_PER_DAY,
    ensure_utc,
    format_minutes,
    is_day_in_mask,
    is_valid_timezone,
    minute_of_day,
    now_utc,
    resolve_timezone,
    weekday_bit,
)

__all__ = [
    "MINUTES_PER_DAY",
    "ensure_utc",
    "format_minutes",
    "is_day_in_mask",
    "is_valid_timezone",
    "minute_of_day",
    "now_utc",
    "resolve_timezone",
    "weekday_bit",
]
