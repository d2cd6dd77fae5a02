"""Persistence layer for health profiles."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from app.domain.entities import Profile
from app.infrastructure.models import ProfileModel
from app.utils import ensure_utc


class ProfileRepository:
    """Lookup and creation of :class:`Profile` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, profile_id: UUID) -> Profile | None:
        model = self.session.get(ProfileModel, profile_id)
        return self._to_entity(model) if model else None

    def create(self, profile: Profile) -> Profile:
        model = ProfileModel(
            id=profile.id,
            owner_user_id=profile.owner_user_id,
            name=profile.name,
            type=profile.type,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            owner_user_id=model.owner_user_id,
            name=model.name,
            type=model.type,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["ProfileRepository"]
