"""Tests for inbox persistence: duplicate-safe inserts and read flags."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository

DAY = date(2024, 5, 6)
BASE_TIME = datetime(2024, 5, 6, 8, tzinfo=timezone.utc)


def _notification(profile_id, kind="low_sleep", *, discriminator="", minutes=0):
    return Notification(
        id=None,
        profile_id=profile_id,
        kind=kind,
        title="Title",
        body="Body",
        severity="warning",
        source_date=DAY,
        discriminator=discriminator,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


def test_insert_many_skips_identity_duplicates(session, profile):
    repository = NotificationRepository(session)
    repository.insert_many([_notification(profile.id)])

    created = repository.insert_many(
        [
            _notification(profile.id),
            _notification(profile.id, "workout_reminder", discriminator="a"),
            _notification(profile.id, "workout_reminder", discriminator="b"),
        ]
    )

    assert [n.discriminator for n in created] == ["a", "b"]
    assert len(repository.list_for_day(profile.id, DAY)) == 3


def test_list_is_newest_first_and_paginated(session, profile):
    repository = NotificationRepository(session)
    repository.insert_many(
        _notification(profile.id, f"kind_{index}", minutes=index) for index in range(5)
    )

    first_page = repository.list_for_profile(profile.id, limit=2)
    second_page = repository.list_for_profile(profile.id, limit=2, offset=2)

    assert [n.kind for n in first_page] == ["kind_4", "kind_3"]
    assert [n.kind for n in second_page] == ["kind_2", "kind_1"]
    assert first_page[0].created_at == BASE_TIME + timedelta(minutes=4)


def test_mark_read_skips_foreign_and_already_read(session, profile, foreign_profile):
    repository = NotificationRepository(session)
    own = repository.insert_many(
        [_notification(profile.id, "a"), _notification(profile.id, "b")]
    )
    foreign = repository.insert_many([_notification(foreign_profile.id, "a")])

    assert repository.mark_read(profile.id, [own[0].id, foreign[0].id, uuid4()]) == 1
    assert repository.mark_read(profile.id, [own[0].id, own[1].id]) == 1
    assert repository.count_unread(profile.id) == 0
    assert repository.count_unread(foreign_profile.id) == 1

    unread = repository.list_for_profile(foreign_profile.id, only_unread=True)
    assert [n.id for n in unread] == [foreign[0].id]


def test_mark_all_read_counts_changed_rows(session, profile):
    repository = NotificationRepository(session)
    repository.insert_many(_notification(profile.id, f"k{i}") for i in range(3))

    assert repository.mark_all_read(profile.id) == 3
    assert repository.mark_all_read(profile.id) == 0
    assert all(n.is_read for n in repository.list_for_profile(profile.id))


def test_insert_many_rolls_back_the_batch_on_failure(session, profile):
    repository = NotificationRepository(session)

    def batch():
        yield _notification(profile.id, "low_sleep")
        raise SQLAlchemyError("connection lost")

    with pytest.raises(SQLAlchemyError):
        repository.insert_many(batch())

    assert repository.list_for_day(profile.id, DAY) == []
