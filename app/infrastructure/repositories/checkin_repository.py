"""Persistence layer for daily checkins."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from uuid import UUID

from sqlalchemy.orm import Session

from app.domain.entities import Checkin
from app.infrastructure.models import CheckinModel
from app.utils import ensure_utc


class CheckinRepository:
    """Provide access to :class:`Checkin` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_range(
        self, profile_id: UUID, date_from: date, date_to: date
    ) -> Sequence[Checkin]:
        query = (
            self.session.query(CheckinModel)
            .filter(CheckinModel.profile_id == profile_id)
            .filter(CheckinModel.date >= date_from, CheckinModel.date <= date_to)
            .order_by(CheckinModel.date, CheckinModel.type)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, checkin: Checkin) -> Checkin:
        model = CheckinModel(
            profile_id=checkin.profile_id,
            date=checkin.date,
            type=checkin.type,
            score=checkin.score,
            note=checkin.note,
        )
        if checkin.id is not None:
            model.id = checkin.id
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CheckinModel) -> Checkin:
        return Checkin(
            id=model.id,
            profile_id=model.profile_id,
            date=model.date,
            type=model.type,
            score=model.score,
            note=model.note or "",
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["CheckinRepository"]
