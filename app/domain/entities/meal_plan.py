"""Domain entities describing weekly meal plans."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

MEAL_SLOTS: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")


@dataclass
class MealPlan:
    """The active (or archived) weekly meal plan of a profile."""

    id: UUID
    owner_user_id: str
    profile_id: UUID
    title: str
    is_active: bool = True
    from_date: date | None = None


@dataclass
class MealPlanItem:
    """A meal planned for one weekday; ``day_index`` 0 is Monday."""

    id: UUID
    plan_id: UUID
    day_index: int
    meal_slot: str
    title: str
    notes: str = ""
    approx_kcal: int = 0


__all__ = ["MEAL_SLOTS", "MealPlan", "MealPlanItem"]
