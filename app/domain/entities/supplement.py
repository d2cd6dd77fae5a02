"""Domain entities describing supplements and their intake schedule."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

SUPPLEMENT_STATUS_TAKEN = "taken"
SUPPLEMENT_STATUS_SKIPPED = "skipped"
ALL_DAYS_MASK = 0b1111111


@dataclass
class Supplement:
    """A supplement tracked for a profile."""

    id: UUID
    profile_id: UUID
    name: str


@dataclass
class SupplementSchedule:
    """When a supplement should be taken.

    ``time_minutes`` may be empty, in which case the profile's vitamins time
    from the settings is used.
    """

    id: UUID
    profile_id: UUID
    supplement_id: UUID
    time_minutes: int | None
    days_mask: int = ALL_DAYS_MASK
    is_enabled: bool = True


__all__ = [
    "ALL_DAYS_MASK",
    "SUPPLEMENT_STATUS_SKIPPED",
    "SUPPLEMENT_STATUS_TAKEN",
    "Supplement",
    "SupplementSchedule",
]
