"""Tests for merging, validating and storing notification settings."""

from __future__ import annotations

import pytest

from app.application.use_cases.settings import (
    defaults_from_config,
    ensure_valid_settings,
    load_settings_view,
    merge_settings,
    resolve_effective_settings,
    update_settings,
)
from app.config import Settings
from app.domain.entities import SettingsDefaults, UserSettings
from app.domain.exceptions import InvalidInputError


OWNER_ID = "owner-1"
DEFAULTS = SettingsDefaults()


def test_missing_overrides_yield_defaults():
    effective = merge_settings(None, DEFAULTS)

    assert effective.time_zone == "UTC"
    assert effective.notifications_max_per_day == 4
    assert effective.min_sleep_minutes == 420
    assert effective.quiet_start_minutes is None
    assert not effective.quiet_hours_enabled


def test_overrides_win_field_by_field():
    overrides = UserSettings(
        owner_user_id=OWNER_ID,
        time_zone="Europe/Madrid",
        notifications_max_per_day=0,
        min_steps=8000,
        quiet_start_minutes=1320,
        quiet_end_minutes=420,
    )

    effective = merge_settings(overrides, DEFAULTS)

    assert effective.time_zone == "Europe/Madrid"
    assert effective.notifications_max_per_day == 0
    assert effective.min_steps == 8000
    assert effective.min_sleep_minutes == DEFAULTS.min_sleep_minutes
    assert (effective.quiet_start_minutes, effective.quiet_end_minutes) == (1320, 420)


def test_client_time_zone_is_only_a_fallback():
    without_zone = UserSettings(owner_user_id=OWNER_ID)
    with_zone = UserSettings(owner_user_id=OWNER_ID, time_zone="Asia/Tokyo")

    assert merge_settings(None, DEFAULTS, fallback_time_zone="UTC+02:00").time_zone == "UTC+02:00"
    assert (
        merge_settings(without_zone, DEFAULTS, fallback_time_zone=" UTC+02:00 ").time_zone
        == "UTC+02:00"
    )
    assert (
        merge_settings(with_zone, DEFAULTS, fallback_time_zone="UTC+02:00").time_zone
        == "Asia/Tokyo"
    )


def test_defaults_follow_configuration():
    config = Settings(secret_key="x", notifications_max_per_day=6, default_steps_min=9000)

    defaults = defaults_from_config(config)

    assert defaults.notifications_max_per_day == 6
    assert defaults.min_steps == 9000


@pytest.mark.parametrize(
    "overrides",
    [
        {"time_zone": "Mars/Olympus"},
        {"quiet_start_minutes": 600},
        {"quiet_start_minutes": 1440, "quiet_end_minutes": 0},
        {"notifications_max_per_day": 11},
        {"min_steps": -1},
        {"time_zone": "UTC+30"},
        {"time_zone": "UTC-99"},
        {"time_zone": "UTC+05:99"},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(InvalidInputError):
        ensure_valid_settings(UserSettings(owner_user_id=OWNER_ID, **overrides))


def test_valid_offset_time_zone_is_accepted():
    ensure_valid_settings(UserSettings(owner_user_id=OWNER_ID, time_zone="UTC-05:30"))


def test_stored_settings_are_resolved(session):
    effective, is_default = load_settings_view(session, OWNER_ID, DEFAULTS)
    assert is_default is True
    assert effective == merge_settings(None, DEFAULTS)

    update_settings(
        session,
        UserSettings(owner_user_id=OWNER_ID, time_zone="  ", min_sleep_minutes=360),
    )

    effective = resolve_effective_settings(
        session, OWNER_ID, DEFAULTS, fallback_time_zone="UTC+01:00"
    )
    assert effective.min_sleep_minutes == 360
    assert effective.time_zone == "UTC+01:00"
    assert load_settings_view(session, OWNER_ID, DEFAULTS)[1] is False
