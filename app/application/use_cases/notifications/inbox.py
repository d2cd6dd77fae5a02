"""Use cases backing the inbox read/unread query surface."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from app.application.use_cases.profiles import get_owned_profile
from app.domain.entities import Notification
from app.domain.exceptions import InvalidInputError
from app.infrastructure.repositories import NotificationRepository

DEFAULT_PAGE_SIZE = 20


def list_notifications(
    session: Session,
    *,
    owner_user_id: str,
    profile_id: UUID,
    only_unread: bool = False,
    limit: int = DEFAULT_PAGE_SIZE,
    offset: int = 0,
) -> Sequence[Notification]:
    """Return a page of the profile's notifications, newest first."""

    if limit <= 0:
        raise InvalidInputError("limit must be positive")
    if offset < 0:
        raise InvalidInputError("offset must not be negative")
    get_owned_profile(session, owner_user_id=owner_user_id, profile_id=profile_id)
    return NotificationRepository(session).list_for_profile(
        profile_id, only_unread=only_unread, limit=limit, offset=offset
    )


def count_unread(session: Session, *, owner_user_id: str, profile_id: UUID) -> int:
    """Return how many notifications of the profile have not been read."""

    get_owned_profile(session, owner_user_id=owner_user_id, profile_id=profile_id)
    return NotificationRepository(session).count_unread(profile_id)


def mark_read(
    session: Session,
    *,
    owner_user_id: str,
    profile_id: UUID,
    notification_ids: Iterable[UUID],
) -> int:
    """Mark the given notifications as read and return how many changed.

    Ids of other profiles and already read notifications are skipped silently.
    """

    ids = list(dict.fromkeys(notification_ids))
    if not ids:
        raise InvalidInputError("ids are required")
    get_owned_profile(session, owner_user_id=owner_user_id, profile_id=profile_id)
    return NotificationRepository(session).mark_read(profile_id, ids)


def mark_all_read(session: Session, *, owner_user_id: str, profile_id: UUID) -> int:
    """Mark every unread notification of the profile as read."""

    get_owned_profile(session, owner_user_id=owner_user_id, profile_id=profile_id)
    return NotificationRepository(session).mark_all_read(profile_id)


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "count_unread",
    "list_notifications",
    "mark_all_read",
    "mark_read",
]
