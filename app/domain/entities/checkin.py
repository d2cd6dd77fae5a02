"""Domain entity representing a daily checkin."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

CHECKIN_TYPE_MORNING = "morning"
CHECKIN_TYPE_EVENING = "evening"


@dataclass
class Checkin:
    """Self-reported morning or evening checkin for a profile."""

    id: UUID | None
    profile_id: UUID
    date: date
    type: str
    score: int | None = None
    note: str = ""
    created_at: datetime | None = None


__all__ = ["Checkin", "CHECKIN_TYPE_MORNING", "CHECKIN_TYPE_EVENING"]
