"""Endpoints for the notification inbox."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NoReturn, TypeVar
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    DEFAULT_PAGE_SIZE,
    GenerationPolicy,
    GenerationRequest,
    count_unread,
    generate_notifications,
    list_notifications,
    mark_all_read,
    mark_read,
)
from app.domain.entities import Notification
from app.domain.exceptions import InvalidInputError, ProfileNotFoundError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_owner_id, get_generation_policy
from app.interfaces.api.schemas import (
    GenerateRequest,
    GenerateResponse,
    InboxListResponse,
    MarkReadResponse,
    NotificationMarkAllReadRequest,
    NotificationMarkReadRequest,
    NotificationRead,
    UnreadCountResponse,
)

router = APIRouter(prefix="/v1/inbox", tags=["inbox"])

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id,
        profile_id=notification.profile_id,
        kind=notification.kind,
        discriminator=notification.discriminator,
        title=notification.title,
        body=notification.body,
        source_date=notification.source_date,
        severity=notification.severity,
        created_at=notification.created_at,
        read_at=notification.read_at,
    )


def _raise_http(exc: Exception, *, operation: str, profile_id: UUID) -> NoReturn:
    if isinstance(exc, ProfileNotFoundError):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="profile_not_found"
        ) from exc
    if isinstance(exc, InvalidInputError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    logger.exception("Inbox %s failed for profile %s", operation, profile_id)
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal_error"
    ) from exc


def _run(operation: str, profile_id: UUID, call: Callable[[], T]) -> T:
    try:
        return call()
    except (ProfileNotFoundError, InvalidInputError, SQLAlchemyError) as exc:
        _raise_http(exc, operation=operation, profile_id=profile_id)


@router.get("", response_model=InboxListResponse)
def list_inbox(
    profile_id: UUID,
    only_unread: bool = False,
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
    owner_user_id: str = Depends(get_current_owner_id),
) -> InboxListResponse:
    """Return the profile's notifications, newest first."""

    notifications = _run(
        "list",
        profile_id,
        lambda: list_notifications(
            db,
            owner_user_id=owner_user_id,
            profile_id=profile_id,
            only_unread=only_unread,
            limit=limit,
            offset=offset,
        ),
    )
    return InboxListResponse(
        notifications=[_notification_to_schema(n) for n in notifications]
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
def unread_count(
    profile_id: UUID,
    db: Session = Depends(get_db),
    owner_user_id: str = Depends(get_current_owner_id),
) -> UnreadCountResponse:
    """Return how many notifications are still unread."""

    unread = _run(
        "unread-count",
        profile_id,
        lambda: count_unread(db, owner_user_id=owner_user_id, profile_id=profile_id),
    )
    return UnreadCountResponse(unread=unread)


@router.post("/mark-read", response_model=MarkReadResponse)
def mark_inbox_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    owner_user_id: str = Depends(get_current_owner_id),
) -> MarkReadResponse:
    """Mark the listed notifications as read."""

    marked = _run(
        "mark-read",
        payload.profile_id,
        lambda: mark_read(
            db,
            owner_user_id=owner_user_id,
            profile_id=payload.profile_id,
            notification_ids=payload.ids,
        ),
    )
    return MarkReadResponse(marked=marked)


@router.post("/mark-all-read", response_model=MarkReadResponse)
def mark_inbox_all_read(
    payload: NotificationMarkAllReadRequest,
    db: Session = Depends(get_db),
    owner_user_id: str = Depends(get_current_owner_id),
) -> MarkReadResponse:
    """Mark every unread notification of the profile as read."""

    marked = _run(
        "mark-all-read",
        payload.profile_id,
        lambda: mark_all_read(
            db, owner_user_id=owner_user_id, profile_id=payload.profile_id
        ),
    )
    return MarkReadResponse(marked=marked)


@router.post("/generate", response_model=GenerateResponse)
def generate_inbox(
    payload: GenerateRequest,
    db: Session = Depends(get_db),
    owner_user_id: str = Depends(get_current_owner_id),
    policy: GenerationPolicy = Depends(get_generation_policy),
) -> GenerateResponse:
    """Evaluate reminders and alerts for ``payload.date`` and store the new ones."""

    request = GenerationRequest(
        profile_id=payload.profile_id,
        date=payload.date,
        now=payload.now,
        client_time_zone=payload.client_time_zone,
    )
    created = _run(
        "generate",
        payload.profile_id,
        lambda: generate_notifications(
            db, owner_user_id=owner_user_id, request=request, policy=policy
        ),
    )
    return GenerateResponse(
        created=len(created),
        notifications=[_notification_to_schema(n) for n in created],
    )
