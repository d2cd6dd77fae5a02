"""Integration tests for the inbox HTTP endpoints."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import SQLAlchemyError

pytest.importorskip("fastapi")

from app.domain.entities import DailyMetric, Notification
from app.infrastructure.repositories import DailyMetricRepository, NotificationRepository
from app.infrastructure.security import create_owner_token

DAY = date(2024, 5, 6)


def _seed(session, profile_id, count):
    base = datetime(2024, 5, 6, 8, tzinfo=timezone.utc)
    return NotificationRepository(session).insert_many(
        Notification(
            id=None,
            profile_id=profile_id,
            kind=f"kind_{index}",
            title=f"Title {index}",
            body="Body",
            severity="info",
            source_date=DAY,
            created_at=base + timedelta(minutes=index),
        )
        for index in range(count)
    )


def test_requests_without_token_are_rejected(client, profile):
    response = client.get("/v1/inbox/unread-count", params={"profile_id": str(profile.id)})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_invalid_token_is_rejected(client, profile):
    response = client.get(
        "/v1/inbox",
        params={"profile_id": str(profile.id)},
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert response.status_code == 401


def test_foreign_profile_is_reported_as_missing(client, auth_headers, foreign_profile):
    response = client.get(
        "/v1/inbox", params={"profile_id": str(foreign_profile.id)}, headers=auth_headers
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "profile_not_found"


def test_list_is_paginated_and_filterable(client, session, auth_headers, profile):
    seeded = _seed(session, profile.id, 3)
    NotificationRepository(session).mark_read(profile.id, [seeded[2].id])

    response = client.get(
        "/v1/inbox",
        params={"profile_id": str(profile.id), "limit": 2},
        headers=auth_headers,
    )
    assert response.status_code == 200
    titles = [item["title"] for item in response.json()["notifications"]]
    assert titles == ["Title 2", "Title 1"]

    response = client.get(
        "/v1/inbox",
        params={"profile_id": str(profile.id), "only_unread": "true"},
        headers=auth_headers,
    )
    unread = response.json()["notifications"]
    assert [item["title"] for item in unread] == ["Title 1", "Title 0"]
    assert all(item["read_at"] is None for item in unread)


@pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"offset": -1}])
def test_list_rejects_bad_paging(client, auth_headers, profile, params):
    response = client.get(
        "/v1/inbox", params={"profile_id": str(profile.id), **params}, headers=auth_headers
    )

    assert response.status_code == 422


def test_mark_read_and_unread_count(client, session, auth_headers, profile, foreign_profile):
    own = _seed(session, profile.id, 2)
    foreign = _seed(session, foreign_profile.id, 1)

    response = client.post(
        "/v1/inbox/mark-read",
        json={
            "profile_id": str(profile.id),
            "ids": [str(own[0].id), str(own[0].id), str(foreign[0].id)],
        },
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json() == {"marked": 1}

    response = client.get(
        "/v1/inbox/unread-count", params={"profile_id": str(profile.id)}, headers=auth_headers
    )
    assert response.json() == {"unread": 1}


def test_mark_read_requires_ids(client, auth_headers, profile):
    response = client.post(
        "/v1/inbox/mark-read",
        json={"profile_id": str(profile.id), "ids": []},
        headers=auth_headers,
    )

    assert response.status_code == 422


def test_mark_all_read(client, session, auth_headers, profile):
    _seed(session, profile.id, 5)

    response = client.post(
        "/v1/inbox/mark-all-read", json={"profile_id": str(profile.id)}, headers=auth_headers
    )
    assert response.json() == {"marked": 5}

    response = client.get(
        "/v1/inbox/unread-count", params={"profile_id": str(profile.id)}, headers=auth_headers
    )
    assert response.json() == {"unread": 0}


def test_generate_creates_once(client, session, auth_headers, profile):
    DailyMetricRepository(session).upsert(
        DailyMetric(profile_id=profile.id, date=DAY, sleep_minutes=280)
    )
    payload = {
        "profile_id": str(profile.id),
        "date": DAY.isoformat(),
        "now": "2024-05-06T06:00:00Z",
    }

    first = client.post("/v1/inbox/generate", json=payload, headers=auth_headers)
    second = client.post("/v1/inbox/generate", json=payload, headers=auth_headers)

    assert first.status_code == 200
    body = first.json()
    assert body["created"] == 1
    assert body["notifications"][0]["kind"] == "low_sleep"
    assert body["notifications"][0]["severity"] == "warning"
    assert second.json() == {"created": 0, "notifications": []}


def test_generate_for_unknown_profile(client, auth_headers):
    response = client.post(
        "/v1/inbox/generate",
        json={"profile_id": str(uuid4()), "date": DAY.isoformat()},
        headers=auth_headers,
    )

    assert response.status_code == 404


def test_other_owner_cannot_read_inbox(client, session, profile):
    _seed(session, profile.id, 1)
    headers = {"Authorization": f"Bearer {create_owner_token('intruder')}"}

    response = client.get(
        "/v1/inbox/unread-count", params={"profile_id": str(profile.id)}, headers=headers
    )

    assert response.status_code == 404


def test_generate_with_out_of_range_client_offset_uses_utc(client, auth_headers, profile):
    response = client.post(
        "/v1/inbox/generate",
        json={
            "profile_id": str(profile.id),
            "date": DAY.isoformat(),
            "now": "2024-05-06T10:00:00Z",
            "client_time_zone": "UTC+25",
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert [n["kind"] for n in response.json()["notifications"]] == [
        "missing_morning_checkin"
    ]


def test_listed_notifications_expose_discriminator(client, session, auth_headers, profile):
    NotificationRepository(session).insert_many(
        [
            Notification(
                id=None,
                profile_id=profile.id,
                kind="workout_reminder",
                title="Workout today",
                body="Body",
                severity="info",
                source_date=DAY,
                discriminator="item-a",
                created_at=datetime(2024, 5, 6, 7, tzinfo=timezone.utc),
            )
        ]
    )

    response = client.get(
        "/v1/inbox", params={"profile_id": str(profile.id)}, headers=auth_headers
    )

    assert response.json()["notifications"][0]["discriminator"] == "item-a"


def test_storage_failure_during_generate_is_a_logged_500(
    client, session, auth_headers, profile, monkeypatch, caplog
):
    def fail(*args, **kwargs):
        raise SQLAlchemyError("metrics table unavailable")

    monkeypatch.setattr(DailyMetricRepository, "get", fail)

    with caplog.at_level(logging.ERROR):
        response = client.post(
            "/v1/inbox/generate",
            json={
                "profile_id": str(profile.id),
                "date": DAY.isoformat(),
                "now": "2024-05-06T10:00:00Z",
            },
            headers=auth_headers,
        )

    assert response.status_code == 500
    assert response.json() == {"detail": "internal_error"}
    assert "Inbox generate failed" in caplog.text
    assert NotificationRepository(session).list_for_day(profile.id, DAY) == []
