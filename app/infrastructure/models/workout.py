"""SQLAlchemy models for workout plans, plan items and completions."""

from uuid import uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_utc


class WorkoutPlanModel(Base):
    """Database representation of a workout plan."""

    __tablename__ = "workout_plans"

    id = Column(Uuid, primary_key=True, default=uuid4)
    owner_user_id = Column(String(128), nullable=False, index=True)
    profile_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(120), nullable=False)
    goal = Column(Text, nullable=False, default="")
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    items = relationship(
        "WorkoutPlanItemModel",
        back_populates="plan",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class WorkoutPlanItemModel(Base):
    """Database representation of a recurring workout slot."""

    __tablename__ = "workout_plan_items"
    __table_args__ = (
        CheckConstraint("time_minutes BETWEEN 0 AND 1439"),
        CheckConstraint("days_mask BETWEEN 0 AND 127"),
        CheckConstraint("duration_minutes BETWEEN 5 AND 240"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    plan_id = Column(
        Uuid, ForeignKey("workout_plans.id", ondelete="CASCADE"), nullable=False, index=True
    )
    kind = Column(String(20), nullable=False)
    time_minutes = Column(Integer, nullable=False)
    days_mask = Column(Integer, nullable=False, default=127)
    duration_minutes = Column(Integer, nullable=False)
    intensity = Column(String(10), nullable=False, default="medium")
    note = Column(Text, nullable=False, default="")

    plan = relationship("WorkoutPlanModel", back_populates="items")


class WorkoutCompletionModel(Base):
    """Database representation of a recorded workout outcome."""

    __tablename__ = "workout_completions"
    __table_args__ = (UniqueConstraint("profile_id", "date", "plan_item_id"),)

    id = Column(Uuid, primary_key=True, default=uuid4)
    profile_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(Date, nullable=False)
    plan_item_id = Column(
        Uuid, ForeignKey("workout_plan_items.id", ondelete="CASCADE"), nullable=False
    )
    status = Column(String(10), nullable=False)


__all__ = ["WorkoutCompletionModel", "WorkoutPlanItemModel", "WorkoutPlanModel"]
