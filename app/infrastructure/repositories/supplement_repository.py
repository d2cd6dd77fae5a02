"""Persistence layer for supplements, their schedules and intake status."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from uuid import UUID

from sqlalchemy.orm import Session

from app.domain.entities import Supplement, SupplementSchedule
from app.infrastructure.models import (
    SupplementDailyStatusModel,
    SupplementModel,
    SupplementScheduleModel,
)


class SupplementRepository:
    """Provide access to supplement data of a profile."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_supplements(self, profile_id: UUID) -> Sequence[Supplement]:
        query = (
            self.session.query(SupplementModel)
            .filter(SupplementModel.profile_id == profile_id)
            .order_by(SupplementModel.name)
        )
        return [
            Supplement(id=model.id, profile_id=model.profile_id, name=model.name)
            for model in query.all()
        ]

    def list_schedules(self, profile_id: UUID) -> Sequence[SupplementSchedule]:
        query = (
            self.session.query(SupplementScheduleModel)
            .filter(SupplementScheduleModel.profile_id == profile_id)
            .order_by(SupplementScheduleModel.time_minutes)
        )
        return [self._schedule_to_entity(model) for model in query.all()]

    def get_daily_status(self, profile_id: UUID, day: date) -> dict[UUID, str]:
        """Return the intake status per supplement id for ``day``."""

        query = (
            self.session.query(SupplementDailyStatusModel)
            .filter(SupplementDailyStatusModel.profile_id == profile_id)
            .filter(SupplementDailyStatusModel.date == day)
        )
        return {model.supplement_id: model.status for model in query.all()}

    def create_supplement(self, supplement: Supplement) -> Supplement:
        model = SupplementModel(
            id=supplement.id, profile_id=supplement.profile_id, name=supplement.name
        )
        self.session.add(model)
        self.session.commit()
        return supplement

    def create_schedule(self, schedule: SupplementSchedule) -> SupplementSchedule:
        model = SupplementScheduleModel(
            id=schedule.id,
            profile_id=schedule.profile_id,
            supplement_id=schedule.supplement_id,
            time_minutes=schedule.time_minutes,
            days_mask=schedule.days_mask,
            is_enabled=schedule.is_enabled,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._schedule_to_entity(model)

    def set_daily_status(
        self, profile_id: UUID, day: date, supplement_id: UUID, status: str
    ) -> None:
        key = (profile_id, day, supplement_id)
        model = self.session.get(SupplementDailyStatusModel, key)
        if model is None:
            model = SupplementDailyStatusModel(
                profile_id=profile_id, date=day, supplement_id=supplement_id
            )
        model.status = status
        self.session.add(model)
        self.session.commit()

    @staticmethod
    def _schedule_to_entity(model: SupplementScheduleModel) -> SupplementSchedule:
        return SupplementSchedule(
            id=model.id,
            profile_id=model.profile_id,
            supplement_id=model.supplement_id,
            time_minutes=model.time_minutes,
            days_mask=model.days_mask,
            is_enabled=model.is_enabled,
        )


__all__ = ["SupplementRepository"]
