"""SQLAlchemy model for persisted notifications."""

from uuid import uuid4

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)

from app.infrastructure.database import Base
from app.utils import now_utc


class NotificationModel(Base):
    """Database representation for inbox notifications.

    The unique constraint is the deduplication contract: concurrent generation
    runs that race on the same identity end with one row and one rejected
    insert.
    """

    __tablename__ = "notifications"
    __table_args__ = (
        UniqueConstraint(
            "profile_id",
            "source_date",
            "kind",
            "discriminator",
            name="uq_notifications_identity",
        ),
        Index("ix_notifications_profile_created", "profile_id", "created_at"),
        Index("ix_notifications_profile_read", "profile_id", "read_at"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    profile_id = Column(
        Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    kind = Column(String(50), nullable=False)
    discriminator = Column(String(64), nullable=False, default="")
    title = Column(String(120), nullable=False)
    body = Column(Text, nullable=False)
    source_date = Column(Date, nullable=False)
    severity = Column(String(10), nullable=False, default="info")
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    read_at = Column(DateTime(timezone=True), nullable=True)


__all__ = ["NotificationModel"]
