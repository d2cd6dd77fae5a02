"""Pydantic models describing inbox payloads."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: UUID
    profile_id: UUID
    kind: str
    discriminator: str = ""
    title: str
    body: str
    source_date: date
    severity: str
    created_at: datetime
    read_at: datetime | None = None


class InboxListResponse(BaseModel):
    notifications: list[NotificationRead] = Field(default_factory=list)


class UnreadCountResponse(BaseModel):
    unread: int


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read."""

    profile_id: UUID
    ids: list[UUID] = Field(
        ..., min_length=1, description="Notification identifiers; duplicates are ignored"
    )


class NotificationMarkAllReadRequest(BaseModel):
    profile_id: UUID


class MarkReadResponse(BaseModel):
    marked: int


class GenerateRequest(BaseModel):
    """Payload for a generation run; ``now`` defaults to the server clock."""

    profile_id: UUID
    date: date
    now: datetime | None = None
    client_time_zone: str | None = Field(default=None, max_length=64)


class GenerateResponse(BaseModel):
    created: int
    notifications: list[NotificationRead] = Field(default_factory=list)


__all__ = [
    "GenerateRequest",
    "GenerateResponse",
    "InboxListResponse",
    "MarkReadResponse",
    "NotificationMarkAllReadRequest",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "UnreadCountResponse",
]
