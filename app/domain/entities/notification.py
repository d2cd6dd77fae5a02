"""Domain entities representing inbox notifications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import NamedTuple
from uuid import UUID

SEVERITY_INFO = "info"
SEVERITY_WARNING = "warning"

KIND_LOW_SLEEP = "low_sleep"
KIND_LOW_STEPS = "low_steps"
KIND_LOW_ACTIVE_ENERGY = "low_active_energy"
KIND_MISSING_MORNING_CHECKIN = "missing_morning_checkin"
KIND_MISSING_EVENING_CHECKIN = "missing_evening_checkin"
KIND_WORKOUT_REMINDER = "workout_reminder"
KIND_VITAMINS_REMINDER = "vitamins_reminder"
KIND_MEAL_PLAN_REMINDER = "meal_plan_reminder"


class NotificationIdentity(NamedTuple):
    """Deduplication key: at most one notification may exist per identity."""

    profile_id: UUID
    source_date: date
    kind: str
    discriminator: str


@dataclass
class Notification:
    """Information message delivered to a profile's inbox."""

    id: UUID | None
    profile_id: UUID
    kind: str
    title: str
    body: str
    severity: str
    source_date: date
    discriminator: str = ""
    created_at: datetime | None = None
    read_at: datetime | None = None

    @property
    def identity(self) -> NotificationIdentity:
        return NotificationIdentity(
            self.profile_id, self.source_date, self.kind, self.discriminator
        )

    @property
    def is_read(self) -> bool:
        return self.read_at is not None


@dataclass(frozen=True)
class NotificationCandidate:
    """A notification proposed by a builder; not yet filtered or persisted."""

    profile_id: UUID
    source_date: date
    kind: str
    title: str
    body: str
    severity: str = SEVERITY_INFO
    discriminator: str = ""

    @property
    def identity(self) -> NotificationIdentity:
        return NotificationIdentity(
            self.profile_id, self.source_date, self.kind, self.discriminator
        )

    def to_notification(self, *, created_at: datetime) -> Notification:
        """Materialize the candidate as an unsaved :class:`Notification`."""

        return Notification(
            id=None,
            profile_id=self.profile_id,
            kind=self.kind,
            title=self.title,
            body=self.body,
            severity=self.severity,
            source_date=self.source_date,
            discriminator=self.discriminator,
            created_at=created_at,
            read_at=None,
        )


__all__ = [
    "KIND_LOW_ACTIVE_ENERGY",
    "KIND_LOW_SLEEP",
    "KIND_LOW_STEPS",
    "KIND_MEAL_PLAN_REMINDER",
    "KIND_MISSING_EVENING_CHECKIN",
    "KIND_MISSING_MORNING_CHECKIN",
    "KIND_VITAMINS_REMINDER",
    "KIND_WORKOUT_REMINDER",
    "SEVERITY_INFO",
    "SEVERITY_WARNING",
    "Notification",
    "NotificationCandidate",
    "NotificationIdentity",
]
