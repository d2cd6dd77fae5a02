"""Persistence layer for workout plans, items and completions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date
from uuid import UUID

from sqlalchemy.orm import Session

from app.domain.entities import WorkoutCompletion, WorkoutPlan, WorkoutPlanItem
from app.infrastructure.models import (
    WorkoutCompletionModel,
    WorkoutPlanItemModel,
    WorkoutPlanModel,
)


class WorkoutRepository:
    """Provide access to a profile's workout plan data."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_active_plan(self, owner_user_id: str, profile_id: UUID) -> WorkoutPlan | None:
        model = (
            self.session.query(WorkoutPlanModel)
            .filter(WorkoutPlanModel.owner_user_id == owner_user_id)
            .filter(WorkoutPlanModel.profile_id == profile_id)
            .filter(WorkoutPlanModel.is_active.is_(True))
            .order_by(WorkoutPlanModel.created_at.desc())
            .first()
        )
        return self._plan_to_entity(model) if model else None

    def list_items(self, plan_id: UUID) -> Sequence[WorkoutPlanItem]:
        query = (
            self.session.query(WorkoutPlanItemModel)
            .filter(WorkoutPlanItemModel.plan_id == plan_id)
            .order_by(WorkoutPlanItemModel.time_minutes)
        )
        return [self._item_to_entity(model) for model in query.all()]

    def list_completions(
        self, profile_id: UUID, date_from: date, date_to: date
    ) -> Sequence[WorkoutCompletion]:
        query = (
            self.session.query(WorkoutCompletionModel)
            .filter(WorkoutCompletionModel.profile_id == profile_id)
            .filter(
                WorkoutCompletionModel.date >= date_from,
                WorkoutCompletionModel.date <= date_to,
            )
        )
        return [
            WorkoutCompletion(
                profile_id=model.profile_id,
                date=model.date,
                plan_item_id=model.plan_item_id,
                status=model.status,
            )
            for model in query.all()
        ]

    def replace_plan(
        self, plan: WorkoutPlan, items: Iterable[WorkoutPlanItem]
    ) -> WorkoutPlan:
        """Store ``plan`` as the only active plan of its profile."""

        self.session.query(WorkoutPlanModel).filter(
            WorkoutPlanModel.owner_user_id == plan.owner_user_id,
            WorkoutPlanModel.profile_id == plan.profile_id,
            WorkoutPlanModel.is_active.is_(True),
        ).update({WorkoutPlanModel.is_active: False}, synchronize_session=False)

        model = WorkoutPlanModel(
            id=plan.id,
            owner_user_id=plan.owner_user_id,
            profile_id=plan.profile_id,
            title=plan.title,
            goal=plan.goal,
            is_active=True,
        )
        model.items = [
            WorkoutPlanItemModel(
                id=item.id,
                kind=item.kind,
                time_minutes=item.time_minutes,
                days_mask=item.days_mask,
                duration_minutes=item.duration_minutes,
                intensity=item.intensity,
                note=item.note,
            )
            for item in items
        ]
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._plan_to_entity(model)

    def record_completion(self, completion: WorkoutCompletion) -> WorkoutCompletion:
        model = (
            self.session.query(WorkoutCompletionModel)
            .filter(WorkoutCompletionModel.profile_id == completion.profile_id)
            .filter(WorkoutCompletionModel.date == completion.date)
            .filter(WorkoutCompletionModel.plan_item_id == completion.plan_item_id)
            .one_or_none()
        )
        if model is None:
            model = WorkoutCompletionModel(
                profile_id=completion.profile_id,
                date=completion.date,
                plan_item_id=completion.plan_item_id,
            )
        model.status = completion.status
        self.session.add(model)
        self.session.commit()
        return completion

    @staticmethod
    def _plan_to_entity(model: WorkoutPlanModel) -> WorkoutPlan:
        return WorkoutPlan(
            id=model.id,
            owner_user_id=model.owner_user_id,
            profile_id=model.profile_id,
            title=model.title,
            goal=model.goal or "",
            is_active=model.is_active,
        )

    @staticmethod
    def _item_to_entity(model: WorkoutPlanItemModel) -> WorkoutPlanItem:
        return WorkoutPlanItem(
            id=model.id,
            plan_id=model.plan_id,
            kind=model.kind,
            time_minutes=model.time_minutes,
            days_mask=model.days_mask,
            duration_minutes=model.duration_minutes,
            intensity=model.intensity,
            note=model.note or "",
        )


__all__ = ["WorkoutRepository"]
