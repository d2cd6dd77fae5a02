"""Persistence layer for weekly meal plans."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date
from uuid import UUID

from sqlalchemy import case
from sqlalchemy.orm import Session

from app.domain.entities import MEAL_SLOTS, MealPlan, MealPlanItem
from app.infrastructure.models import MealPlanItemModel, MealPlanModel


class MealPlanRepository:
    """Provide access to a profile's meal plan."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_active_plan(self, owner_user_id: str, profile_id: UUID) -> MealPlan | None:
        model = (
            self.session.query(MealPlanModel)
            .filter(MealPlanModel.owner_user_id == owner_user_id)
            .filter(MealPlanModel.profile_id == profile_id)
            .filter(MealPlanModel.is_active.is_(True))
            .order_by(MealPlanModel.created_at.desc())
            .first()
        )
        return self._plan_to_entity(model) if model else None

    def list_items_for_day(self, plan_id: UUID, day: date) -> Sequence[MealPlanItem]:
        """Return the meals planned on ``day``'s weekday, in meal-slot order."""

        slot_order = case(
            {slot: index for index, slot in enumerate(MEAL_SLOTS)},
            value=MealPlanItemModel.meal_slot,
            else_=len(MEAL_SLOTS),
        )
        query = (
            self.session.query(MealPlanItemModel)
            .filter(MealPlanItemModel.plan_id == plan_id)
            .filter(MealPlanItemModel.day_index == day.weekday())
            .order_by(slot_order, MealPlanItemModel.title)
        )
        return [self._item_to_entity(model) for model in query.all()]

    def replace_plan(self, plan: MealPlan, items: Iterable[MealPlanItem]) -> MealPlan:
        """Store ``plan`` as the only active meal plan of its profile."""

        self.session.query(MealPlanModel).filter(
            MealPlanModel.owner_user_id == plan.owner_user_id,
            MealPlanModel.profile_id == plan.profile_id,
            MealPlanModel.is_active.is_(True),
        ).update({MealPlanModel.is_active: False}, synchronize_session=False)

        model = MealPlanModel(
            id=plan.id,
            owner_user_id=plan.owner_user_id,
            profile_id=plan.profile_id,
            title=plan.title,
            from_date=plan.from_date,
            is_active=True,
        )
        model.items = [
            MealPlanItemModel(
                id=item.id,
                day_index=item.day_index,
                meal_slot=item.meal_slot,
                title=item.title,
                notes=item.notes,
                approx_kcal=item.approx_kcal,
            )
            for item in items
        ]
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._plan_to_entity(model)

    @staticmethod
    def _plan_to_entity(model: MealPlanModel) -> MealPlan:
        return MealPlan(
            id=model.id,
            owner_user_id=model.owner_user_id,
            profile_id=model.profile_id,
            title=model.title,
            is_active=model.is_active,
            from_date=model.from_date,
        )

    @staticmethod
    def _item_to_entity(model: MealPlanItemModel) -> MealPlanItem:
        return MealPlanItem(
            id=model.id,
            plan_id=model.plan_id,
            day_index=model.day_index,
            meal_slot=model.meal_slot,
            title=model.title,
            notes=model.notes or "",
            approx_kcal=model.approx_kcal or 0,
        )


__all__ = ["MealPlanRepository"]
