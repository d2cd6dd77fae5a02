"""Pydantic models describing notification preference payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

_MINUTE = {"ge": 0, "le": 1439}


class SettingsRead(BaseModel):
    """Effective settings after defaults have been applied."""

    time_zone: str
    quiet_start_minutes: int | None = None
    quiet_end_minutes: int | None = None
    notifications_max_per_day: int
    min_sleep_minutes: int
    min_steps: int
    min_active_energy_kcal: int
    morning_checkin_minutes: int
    evening_checkin_minutes: int
    vitamins_minutes: int


class SettingsResponse(BaseModel):
    settings: SettingsRead
    is_default: bool


class SettingsUpdate(BaseModel):
    """Overrides to store. Omitted or null fields fall back to the defaults."""

    time_zone: str | None = Field(default=None, max_length=64)
    quiet_start_minutes: int | None = Field(default=None, **_MINUTE)
    quiet_end_minutes: int | None = Field(default=None, **_MINUTE)
    notifications_max_per_day: int | None = Field(default=None, ge=0, le=10)
    min_sleep_minutes: int | None = Field(default=None, ge=0, le=1200)
    min_steps: int | None = Field(default=None, ge=0, le=50000)
    min_active_energy_kcal: int | None = Field(default=None, ge=0, le=5000)
    morning_checkin_minutes: int | None = Field(default=None, **_MINUTE)
    evening_checkin_minutes: int | None = Field(default=None, **_MINUTE)
    vitamins_minutes: int | None = Field(default=None, **_MINUTE)

    @model_validator(mode="after")
    def _validate_quiet_pair(self) -> "SettingsUpdate":
        if (self.quiet_start_minutes is None) != (self.quiet_end_minutes is None):
            raise ValueError(
                "quiet_start_minutes and quiet_end_minutes must be both set or both null"
            )
        return self


__all__ = ["SettingsRead", "SettingsResponse", "SettingsUpdate"]
