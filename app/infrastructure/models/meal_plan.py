"""SQLAlchemy models for weekly meal plans."""

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
    Uuid,
)
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_utc


class MealPlanModel(Base):
    """Database representation of a meal plan."""

    __tablename__ = "meal_plans"

    id = Column(Uuid, primary_key=True, default=uuid4)
    owner_user_id = Column(String(128), nullable=False, index=True)
    profile_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(200), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    from_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    items = relationship(
        "MealPlanItemModel",
        back_populates="plan",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class MealPlanItemModel(Base):
    """Database representation of one planned meal."""

    __tablename__ = "meal_plan_items"
    __table_args__ = (
        CheckConstraint("day_index BETWEEN 0 AND 6"),
        CheckConstraint("meal_slot IN ('breakfast', 'lunch', 'dinner', 'snack')"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    plan_id = Column(
        Uuid, ForeignKey("meal_plans.id", ondelete="CASCADE"), nullable=False, index=True
    )
    day_index = Column(Integer, nullable=False)
    meal_slot = Column(String(20), nullable=False)
    title = Column(String(200), nullable=False)
    notes = Column(Text, nullable=False, default="")
    approx_kcal = Column(Integer, nullable=False, default=0)

    plan = relationship("MealPlanModel", back_populates="items")


__all__ = ["MealPlanItemModel", "MealPlanModel"]
