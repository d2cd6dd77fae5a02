"""Use case for storing notification preference overrides."""

from sqlalchemy.orm import Session

from app.domain.entities import UserSettings
from app.infrastructure.repositories import SettingsRepository
from .validators import ensure_valid_settings


def update_settings(session: Session, settings: UserSettings) -> UserSettings:
    """Validate and upsert the overrides of ``settings.owner_user_id``."""

    ensure_valid_settings(settings)
    if settings.time_zone is not None:
        settings.time_zone = settings.time_zone.strip() or None
    return SettingsRepository(session).upsert(settings)
