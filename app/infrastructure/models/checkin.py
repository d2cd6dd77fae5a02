"""SQLAlchemy model for daily checkins."""

from uuid import uuid4

from sqlalchemy import (
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

from app.infrastructure.database import Base
from app.utils import now_utc


class CheckinModel(Base):
    """Database representation of a morning or evening checkin."""

    __tablename__ = "checkins"
    __table_args__ = (UniqueConstraint("profile_id", "date", "type"),)

    id = Column(Uuid, primary_key=True, default=uuid4)
    profile_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(Date, nullable=False)
    type = Column(String(16), nullable=False)
    score = Column(Integer, nullable=True)
    note = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)


__all__ = ["CheckinModel"]
