"""Helpers for working with timezone-aware datetimes and local day clocks."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

MINUTES_PER_DAY: Final[int] = 24 * 60
_DEFAULT_TIMEZONE: Final[str] = "UTC"
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>0?\d|1[0-4])(?::?(?P<minutes>[0-5]\d))?$",
    re.IGNORECASE,
)


def now_utc() -> datetime:
    """Return the current instant as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize ``value`` to an aware UTC datetime.

    SQLite hands timestamps back without ``tzinfo``; every value is written in
    UTC, so naive datetimes are interpreted as UTC.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_offset(name: str) -> tzinfo | None:
    """Return a fixed-offset zone for ``UTC±HH:MM`` names, ``None`` otherwise."""

    match = _OFFSET_PATTERN.match(name)
    if not match:
        return None
    sign = -1 if match.group("sign") == "-" else 1
    offset = timedelta(
        hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
    )
    try:
        return timezone(sign * offset)
    except ValueError:
        return None


def is_valid_timezone(tz_name: str) -> bool:
    """Return ``True`` when ``tz_name`` names an IANA zone or a ``UTC±HH:MM`` offset."""

    name = tz_name.strip()
    if not name:
        return False
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return _parse_offset(name) is not None
    return True


def resolve_timezone(tz_name: str | None) -> tzinfo:
    """Resolve ``tz_name`` into a ``tzinfo`` instance, falling back to UTC."""

    name = (tz_name or "").strip() or _DEFAULT_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        pass
    offset = _parse_offset(name)
    if offset is None:
        logger.warning("Unknown time zone %r, using %s", name, _DEFAULT_TIMEZONE)
        return ZoneInfo(_DEFAULT_TIMEZONE)
    return offset


def minute_of_day(value: datetime) -> int:
    """Return the number of minutes elapsed since local midnight."""

    return value.hour * 60 + value.minute


def weekday_bit(day: date) -> int:
    """Return the days-mask bit for ``day`` (Monday = 0 ... Sunday = 6)."""

    return day.weekday()


def is_day_in_mask(days_mask: int, day: date) -> bool:
    """Return ``True`` when ``days_mask`` schedules something on ``day``."""

    return bool(days_mask & (1 << weekday_bit(day)))


def format_minutes(minutes: int) -> str:
    """Render a minute-of-day value as ``HH:MM``."""

    return f"{minutes // 60:02d}:{minutes % 60:02d}"
