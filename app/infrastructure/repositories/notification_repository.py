"""Persistence helpers for notification entities."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from typing import Iterable
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.models import NotificationModel
from app.utils import ensure_utc, now_utc

logger = logging.getLogger(__name__)


class NotificationRepository:
    """Provide inbox queries and batch inserts for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_profile(
        self,
        profile_id: UUID,
        *,
        only_unread: bool = False,
        limit: int | None = 20,
        offset: int = 0,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.profile_id == profile_id)
        if only_unread:
            query = query.filter(NotificationModel.read_at.is_(None))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_for_day(self, profile_id: UUID, source_date: date) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.profile_id == profile_id)
            .filter(NotificationModel.source_date == source_date)
            .order_by(NotificationModel.created_at, NotificationModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, profile_id: UUID) -> int:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.profile_id == profile_id)
            .filter(NotificationModel.read_at.is_(None))
            .count()
        )

    def insert_many(self, notifications: Iterable[Notification]) -> list[Notification]:
        """Insert ``notifications`` in one transaction, ignoring duplicates.

        Each row goes through its own SAVEPOINT so a row rejected by the identity
        constraint (another generation run got there first) does not abort the
        rest of the batch. Returns only the rows that were actually inserted.
        """

        created: list[Notification] = []
        try:
            for notification in notifications:
                model = NotificationModel()
                self._apply_entity_to_model(model, notification)
                try:
                    with self.session.begin_nested():
                        self.session.add(model)
                        self.session.flush()
                except IntegrityError:
                    logger.info(
                        "Skipping duplicate notification %s for profile %s on %s",
                        notification.kind,
                        notification.profile_id,
                        notification.source_date,
                    )
                    continue
                created.append(self._to_entity(model))
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return created

    def mark_read(self, profile_id: UUID, notification_ids: Iterable[UUID]) -> int:
        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return 0
        marked = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.profile_id == profile_id,
                NotificationModel.read_at.is_(None),
            )
            .update({NotificationModel.read_at: now_utc()}, synchronize_session=False)
        )
        self.session.commit()
        return marked

    def mark_all_read(self, profile_id: UUID) -> int:
        marked = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.profile_id == profile_id,
                NotificationModel.read_at.is_(None),
            )
            .update({NotificationModel.read_at: now_utc()}, synchronize_session=False)
        )
        self.session.commit()
        return marked

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        if notification.id is not None:
            model.id = notification.id
        model.profile_id = notification.profile_id
        model.kind = notification.kind
        model.discriminator = notification.discriminator or ""
        model.title = notification.title
        model.body = notification.body
        model.source_date = notification.source_date
        model.severity = notification.severity
        model.created_at = ensure_utc(notification.created_at) or now_utc()
        model.read_at = ensure_utc(notification.read_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            profile_id=model.profile_id,
            kind=model.kind,
            title=model.title,
            body=model.body,
            severity=model.severity,
            source_date=model.source_date,
            discriminator=model.discriminator or "",
            created_at=ensure_utc(model.created_at),
            read_at=ensure_utc(model.read_at),
        )


__all__ = ["NotificationRepository"]
