"""Persistence layer for per-user notification preferences."""

from __future__ import annotations

from dataclasses import fields

from sqlalchemy.orm import Session

from app.domain.entities import UserSettings
from app.infrastructure.models import UserSettingsModel

_OVERRIDE_FIELDS = tuple(
    f.name for f in fields(UserSettings) if f.name != "owner_user_id"
)


class SettingsRepository:
    """Read and upsert :class:`UserSettings` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, owner_user_id: str) -> UserSettings | None:
        model = self.session.get(UserSettingsModel, owner_user_id)
        return self._to_entity(model) if model else None

    def upsert(self, settings: UserSettings) -> UserSettings:
        model = self.session.get(UserSettingsModel, settings.owner_user_id)
        if model is None:
            model = UserSettingsModel(owner_user_id=settings.owner_user_id)
        for name in _OVERRIDE_FIELDS:
            setattr(model, name, getattr(settings, name))
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserSettingsModel) -> UserSettings:
        values = {name: getattr(model, name) for name in _OVERRIDE_FIELDS}
        return UserSettings(owner_user_id=model.owner_user_id, **values)


__all__ = ["SettingsRepository"]
