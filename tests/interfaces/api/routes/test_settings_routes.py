"""Integration tests for the notification settings endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")


def test_defaults_are_reported(client, auth_headers):
    response = client.get("/v1/settings", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["is_default"] is True
    assert body["settings"]["notifications_max_per_day"] == 4
    assert body["settings"]["quiet_start_minutes"] is None


def test_update_and_read_back(client, auth_headers):
    payload = {
        "time_zone": "UTC+02:00",
        "quiet_start_minutes": 1320,
        "quiet_end_minutes": 420,
        "min_steps": 7500,
    }

    response = client.put("/v1/settings", json=payload, headers=auth_headers)
    assert response.status_code == 200

    body = client.get("/v1/settings", headers=auth_headers).json()
    assert body["is_default"] is False
    assert body["settings"]["time_zone"] == "UTC+02:00"
    assert body["settings"]["quiet_end_minutes"] == 420
    assert body["settings"]["min_steps"] == 7500
    assert body["settings"]["min_sleep_minutes"] == 420


def test_half_quiet_window_is_rejected(client, auth_headers):
    response = client.put(
        "/v1/settings", json={"quiet_start_minutes": 1320}, headers=auth_headers
    )

    assert response.status_code == 422


def test_unknown_time_zone_is_rejected(client, auth_headers):
    response = client.put(
        "/v1/settings", json={"time_zone": "Atlantis/Capital"}, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "invalid time_zone"


def test_settings_require_authentication(client):
    assert client.get("/v1/settings").status_code == 401


@pytest.mark.parametrize("time_zone", ["UTC+30", "UTC-99", "UTC+05:99"])
def test_out_of_range_offsets_are_rejected(client, auth_headers, time_zone):
    response = client.put("/v1/settings", json={"time_zone": time_zone}, headers=auth_headers)

    assert response.status_code == 400
    assert client.get("/v1/settings", headers=auth_headers).json()["is_default"] is True
