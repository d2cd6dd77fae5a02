"""SQLAlchemy models for supplements, schedules and daily intake status."""

from uuid import uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Integer,
    String,
    Uuid,
)

from app.infrastructure.database import Base


class SupplementModel(Base):
    """Database representation of a supplement."""

    __tablename__ = "supplements"

    id = Column(Uuid, primary_key=True, default=uuid4)
    profile_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(120), nullable=False)


class SupplementScheduleModel(Base):
    """Database representation of a supplement intake schedule entry."""

    __tablename__ = "supplement_schedules"
    __table_args__ = (
        CheckConstraint("time_minutes BETWEEN 0 AND 1439"),
        CheckConstraint("days_mask BETWEEN 0 AND 127"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    profile_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    supplement_id = Column(
        Uuid, ForeignKey("supplements.id", ondelete="CASCADE"), nullable=False
    )
    time_minutes = Column(Integer, nullable=True)
    days_mask = Column(Integer, nullable=False, default=127)
    is_enabled = Column(Boolean, nullable=False, default=True)


class SupplementDailyStatusModel(Base):
    """Intake status (``taken`` / ``skipped``) of a supplement on a day."""

    __tablename__ = "supplement_daily_status"

    profile_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True
    )
    date = Column(Date, primary_key=True)
    supplement_id = Column(
        Uuid, ForeignKey("supplements.id", ondelete="CASCADE"), primary_key=True
    )
    status = Column(String(16), nullable=False)


__all__ = ["SupplementDailyStatusModel", "SupplementModel", "SupplementScheduleModel"]
