"""SQLAlchemy model for synced daily health aggregates."""

from sqlalchemy import Column, Date, ForeignKey, Integer, Uuid

from app.infrastructure.database import Base


class DailyMetricModel(Base):
    """One row of aggregates per profile and day."""

    __tablename__ = "daily_metrics"

    profile_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True
    )
    date = Column(Date, primary_key=True)
    steps = Column(Integer, nullable=True)
    sleep_minutes = Column(Integer, nullable=True)
    active_energy_kcal = Column(Integer, nullable=True)


__all__ = ["DailyMetricModel"]
