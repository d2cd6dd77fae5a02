"""Domain values describing user notification preferences."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SettingsDefaults:
    """System-wide fallback values used when a user has no override."""

    time_zone: str = "UTC"
    notifications_max_per_day: int = 4
    min_sleep_minutes: int = 420
    min_steps: int = 6000
    min_active_energy_kcal: int = 200
    morning_checkin_minutes: int = 540
    evening_checkin_minutes: int = 1260
    vitamins_minutes: int = 720


@dataclass
class UserSettings:
    """Overrides stored for an account owner. ``None`` means "use the default"."""

    owner_user_id: str
    time_zone: str | None = None
    quiet_start_minutes: int | None = None
    quiet_end_minutes: int | None = None
    notifications_max_per_day: int | None = None
    min_sleep_minutes: int | None = None
    min_steps: int | None = None
    min_active_energy_kcal: int | None = None
    morning_checkin_minutes: int | None = None
    evening_checkin_minutes: int | None = None
    vitamins_minutes: int | None = None


@dataclass(frozen=True)
class EffectiveSettings:
    """Complete configuration obtained by merging overrides with defaults."""

    time_zone: str
    quiet_start_minutes: int | None
    quiet_end_minutes: int | None
    notifications_max_per_day: int
    min_sleep_minutes: int
    min_steps: int
    min_active_energy_kcal: int
    morning_checkin_minutes: int
    evening_checkin_minutes: int
    vitamins_minutes: int

    @property
    def quiet_hours_enabled(self) -> bool:
        return self.quiet_start_minutes is not None and self.quiet_end_minutes is not None


__all__ = ["EffectiveSettings", "SettingsDefaults", "UserSettings"]
