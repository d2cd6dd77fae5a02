"""Domain entities describing workout plans and their completion records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

WORKOUT_STATUS_DONE = "done"
WORKOUT_STATUS_SKIPPED = "skipped"

WORKOUT_KIND_LABELS: dict[str, str] = {
    "run": "Run",
    "walk": "Walk",
    "strength": "Strength training",
    "morning": "Morning exercises",
    "core": "Core",
    "other": "Workout",
}


@dataclass
class WorkoutPlan:
    """The active (or archived) workout plan of a profile."""

    id: UUID
    owner_user_id: str
    profile_id: UUID
    title: str
    goal: str = ""
    is_active: bool = True


@dataclass
class WorkoutPlanItem:
    """A recurring workout slot inside a plan."""

    id: UUID
    plan_id: UUID
    kind: str
    time_minutes: int
    days_mask: int
    duration_minutes: int
    intensity: str = "medium"
    note: str = ""

    @property
    def label(self) -> str:
        return WORKOUT_KIND_LABELS.get(self.kind, self.kind)


@dataclass
class WorkoutCompletion:
    """Outcome recorded for a plan item on a given day."""

    profile_id: UUID
    date: date
    plan_item_id: UUID
    status: str


__all__ = [
    "WORKOUT_KIND_LABELS",
    "WORKOUT_STATUS_DONE",
    "WORKOUT_STATUS_SKIPPED",
    "WorkoutCompletion",
    "WorkoutPlan",
    "WorkoutPlanItem",
]
