"""Use case for computing the effective notification settings of a user."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.config import Settings
from app.domain.entities import EffectiveSettings, SettingsDefaults, UserSettings
from app.infrastructure.repositories import SettingsRepository


def defaults_from_config(config: Settings) -> SettingsDefaults:
    """Build the immutable defaults table from application configuration."""

    return SettingsDefaults(
        time_zone=config.default_time_zone,
        notifications_max_per_day=config.notifications_max_per_day,
        min_sleep_minutes=config.default_sleep_min_minutes,
        min_steps=config.default_steps_min,
        min_active_energy_kcal=config.default_active_energy_min_kcal,
        morning_checkin_minutes=config.default_morning_checkin_minutes,
        evening_checkin_minutes=config.default_evening_checkin_minutes,
        vitamins_minutes=config.default_vitamins_minutes,
    )


def _pick(value: int | None, default: int) -> int:
    return default if value is None else value


def merge_settings(
    overrides: UserSettings | None,
    defaults: SettingsDefaults,
    *,
    fallback_time_zone: str | None = None,
) -> EffectiveSettings:
    """Fill every unset field of ``overrides`` from ``defaults``.

    The quiet window is only honoured when both bounds are stored.
    ``fallback_time_zone`` (usually the client's zone) wins over the system
    default but never over a stored preference.
    """

    time_zone = (fallback_time_zone or "").strip() or defaults.time_zone
    if overrides is None:
        return EffectiveSettings(
            time_zone=time_zone,
            quiet_start_minutes=None,
            quiet_end_minutes=None,
            notifications_max_per_day=defaults.notifications_max_per_day,
            min_sleep_minutes=defaults.min_sleep_minutes,
            min_steps=defaults.min_steps,
            min_active_energy_kcal=defaults.min_active_energy_kcal,
            morning_checkin_minutes=defaults.morning_checkin_minutes,
            evening_checkin_minutes=defaults.evening_checkin_minutes,
            vitamins_minutes=defaults.vitamins_minutes,
        )

    if overrides.time_zone and overrides.time_zone.strip():
        time_zone = overrides.time_zone.strip()

    quiet_start = overrides.quiet_start_minutes
    quiet_end = overrides.quiet_end_minutes
    if quiet_start is None or quiet_end is None:
        quiet_start = quiet_end = None

    return EffectiveSettings(
        time_zone=time_zone,
        quiet_start_minutes=quiet_start,
        quiet_end_minutes=quiet_end,
        notifications_max_per_day=_pick(
            overrides.notifications_max_per_day, defaults.notifications_max_per_day
        ),
        min_sleep_minutes=_pick(overrides.min_sleep_minutes, defaults.min_sleep_minutes),
        min_steps=_pick(overrides.min_steps, defaults.min_steps),
        min_active_energy_kcal=_pick(
            overrides.min_active_energy_kcal, defaults.min_active_energy_kcal
        ),
        morning_checkin_minutes=_pick(
            overrides.morning_checkin_minutes, defaults.morning_checkin_minutes
        ),
        evening_checkin_minutes=_pick(
            overrides.evening_checkin_minutes, defaults.evening_checkin_minutes
        ),
        vitamins_minutes=_pick(overrides.vitamins_minutes, defaults.vitamins_minutes),
    )


def resolve_effective_settings(
    session: Session,
    owner_user_id: str,
    defaults: SettingsDefaults,
    *,
    fallback_time_zone: str | None = None,
) -> EffectiveSettings:
    """Return the effective settings of ``owner_user_id``.

    A missing settings row is normal and yields the defaults; storage errors
    propagate to the caller.
    """

    overrides = SettingsRepository(session).get(owner_user_id)
    return merge_settings(overrides, defaults, fallback_time_zone=fallback_time_zone)


def load_settings_view(
    session: Session, owner_user_id: str, defaults: SettingsDefaults
) -> tuple[EffectiveSettings, bool]:
    """Return the effective settings and whether they are pure defaults."""

    overrides = SettingsRepository(session).get(owner_user_id)
    return merge_settings(overrides, defaults), overrides is None


__all__ = [
    "defaults_from_config",
    "load_settings_view",
    "merge_settings",
    "resolve_effective_settings",
]
