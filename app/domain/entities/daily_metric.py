"""Domain entity representing synced daily health aggregates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass
class DailyMetric:
    """Aggregated values for one profile and day.

    ``None`` means the value has not been synced yet, which is different from a
    recorded zero.
    """

    profile_id: UUID
    date: date
    steps: int | None = None
    sleep_minutes: int | None = None
    active_energy_kcal: int | None = None


__all__ = ["DailyMetric"]
