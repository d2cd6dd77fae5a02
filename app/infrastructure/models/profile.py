"""SQLAlchemy model for tracked profiles."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, String, Uuid

from app.infrastructure.database import Base
from app.utils import now_utc


class ProfileModel(Base):
    """Database representation of a health profile."""

    __tablename__ = "profiles"

    id = Column(Uuid, primary_key=True, default=uuid4)
    owner_user_id = Column(String(128), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    type = Column(String(20), nullable=False, default="owner")
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)


__all__ = ["ProfileModel"]
