"""Persistence layer for synced daily metrics."""

from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy.orm import Session

from app.domain.entities import DailyMetric
from app.infrastructure.models import DailyMetricModel


class DailyMetricRepository:
    """Provide access to :class:`DailyMetric` aggregates."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, profile_id: UUID, day: date) -> DailyMetric | None:
        model = self.session.get(DailyMetricModel, (profile_id, day))
        return self._to_entity(model) if model else None

    def upsert(self, metric: DailyMetric) -> DailyMetric:
        model = self.session.get(DailyMetricModel, (metric.profile_id, metric.date))
        if model is None:
            model = DailyMetricModel(profile_id=metric.profile_id, date=metric.date)
        model.steps = metric.steps
        model.sleep_minutes = metric.sleep_minutes
        model.active_energy_kcal = metric.active_energy_kcal
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: DailyMetricModel) -> DailyMetric:
        return DailyMetric(
            profile_id=model.profile_id,
            date=model.date,
            steps=model.steps,
            sleep_minutes=model.sleep_minutes,
            active_energy_kcal=model.active_energy_kcal,
        )


__all__ = ["DailyMetricRepository"]
