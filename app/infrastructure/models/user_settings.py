"""SQLAlchemy model for per-user notification preferences."""

from sqlalchemy import Column, DateTime, Integer, String

from app.infrastructure.database import Base
from app.utils import now_utc


class UserSettingsModel(Base):
    """Stored overrides; a ``NULL`` column falls back to the system default."""

    __tablename__ = "user_settings"

    owner_user_id = Column(String(128), primary_key=True)
    time_zone = Column(String(64), nullable=True)
    quiet_start_minutes = Column(Integer, nullable=True)
    quiet_end_minutes = Column(Integer, nullable=True)
    notifications_max_per_day = Column(Integer, nullable=True)
    min_sleep_minutes = Column(Integer, nullable=True)
    min_steps = Column(Integer, nullable=True)
    min_active_energy_kcal = Column(Integer, nullable=True)
    morning_checkin_minutes = Column(Integer, nullable=True)
    evening_checkin_minutes = Column(Integer, nullable=True)
    vitamins_minutes = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=now_utc)


__all__ = ["UserSettingsModel"]
