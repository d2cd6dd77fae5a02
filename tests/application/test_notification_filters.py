"""Unit tests for quiet hours, dedup and the daily cap."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from uuid import uuid4

import pytest

from app.application.use_cases.notifications.filters import (
    apply_daily_cap,
    apply_quiet_hours,
    drop_known,
    is_within_quiet_hours,
    prioritize,
)
from app.application.use_cases.settings import merge_settings
from app.domain.entities import (
    SEVERITY_INFO,
    SEVERITY_WARNING,
    NotificationCandidate,
    SettingsDefaults,
    UserSettings,
)

PROFILE_ID = uuid4()
DAY = date(2024, 5, 6)


def _candidate(kind: str, severity: str = SEVERITY_INFO, discriminator: str = ""):
    return NotificationCandidate(
        profile_id=PROFILE_ID,
        source_date=DAY,
        kind=kind,
        title=kind,
        body=kind,
        severity=severity,
        discriminator=discriminator,
    )


def _settings(quiet_start=None, quiet_end=None):
    overrides = UserSettings(
        owner_user_id="owner-1",
        quiet_start_minutes=quiet_start,
        quiet_end_minutes=quiet_end,
    )
    return merge_settings(overrides, SettingsDefaults())


@pytest.mark.parametrize(
    ("minute", "start", "end", "expected"),
    [
        (23 * 60, 22 * 60, 7 * 60, True),
        (6 * 60 + 30, 22 * 60, 7 * 60, True),
        (7 * 60, 22 * 60, 7 * 60, False),
        (12 * 60, 22 * 60, 7 * 60, False),
        (13 * 60, 12 * 60, 14 * 60, True),
        (14 * 60, 12 * 60, 14 * 60, False),
        (0, 600, 600, True),
        (1439, 600, 600, True),
    ],
)
def test_is_within_quiet_hours(minute, start, end, expected):
    assert is_within_quiet_hours(minute, start, end) is expected


def test_quiet_hours_silence_only_info():
    sleep = _candidate("low_sleep", SEVERITY_WARNING)
    checkin = _candidate("missing_morning_checkin")

    kept, suppressed = apply_quiet_hours(
        [sleep, checkin], _settings(22 * 60, 7 * 60), local_minute=6 * 60 + 30
    )

    assert kept == [sleep]
    assert suppressed == [checkin]


def test_quiet_hours_outside_window_keep_everything():
    checkin = _candidate("missing_morning_checkin")

    kept, suppressed = apply_quiet_hours([checkin], _settings(22 * 60, 7 * 60), 8 * 60)

    assert kept == [checkin]
    assert suppressed == []


def test_half_configured_quiet_window_is_disabled():
    checkin = _candidate("missing_morning_checkin")
    settings = _settings(quiet_start=22 * 60)

    assert not settings.quiet_hours_enabled
    kept, _ = apply_quiet_hours([checkin], settings, 23 * 60)
    assert kept == [checkin]


def test_drop_known_removes_existing_and_repeated_identities():
    existing = _candidate("low_sleep", SEVERITY_WARNING)
    workout_a = _candidate("workout_reminder", discriminator="a")
    workout_b = _candidate("workout_reminder", discriminator="b")

    fresh = drop_known(
        [existing, workout_a, workout_b, replace(workout_a, title="again")],
        [existing.identity],
    )

    assert fresh == [workout_a, workout_b]


def test_prioritize_orders_by_kind_then_unknown_warnings_first():
    candidates = [
        _candidate("vitamins_reminder"),
        _candidate("custom_info"),
        _candidate("custom_warning", SEVERITY_WARNING),
        _candidate("missing_morning_checkin"),
        _candidate("low_sleep", SEVERITY_WARNING),
    ]

    ordered = [candidate.kind for candidate in prioritize(candidates)]

    assert ordered == [
        "low_sleep",
        "missing_morning_checkin",
        "vitamins_reminder",
        "custom_warning",
        "custom_info",
    ]


def test_daily_cap_keeps_highest_priority():
    candidates = [
        _candidate("vitamins_reminder"),
        _candidate("workout_reminder", discriminator="x"),
        _candidate("low_steps", SEVERITY_WARNING),
    ]

    kept = apply_daily_cap(candidates, 2)

    assert [candidate.kind for candidate in kept] == ["low_steps", "workout_reminder"]


@pytest.mark.parametrize("budget", [0, -3])
def test_exhausted_budget_drops_everything(budget):
    assert apply_daily_cap([_candidate("low_sleep", SEVERITY_WARNING)], budget) == []


def test_daily_cap_honours_custom_priority():
    candidates = [_candidate("low_sleep", SEVERITY_WARNING), _candidate("vitamins_reminder")]

    kept = apply_daily_cap(candidates, 1, priority=("vitamins_reminder", "low_sleep"))

    assert [candidate.kind for candidate in kept] == ["vitamins_reminder"]
