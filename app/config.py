"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_NOTIFICATION_PRIORITY: tuple[str, ...] = (
    "low_sleep",
    "low_steps",
    "low_active_energy",
    "missing_morning_checkin",
    "missing_evening_checkin",
    "workout_reminder",
    "vitamins_reminder",
    "meal_plan_reminder",
)


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./healthhub.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for verifying JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    notifications_max_per_day: int = Field(default=4, ge=0, le=10)
    default_sleep_min_minutes: int = Field(default=420, ge=0)
    default_steps_min: int = Field(default=6000, ge=0)
    default_active_energy_min_kcal: int = Field(default=200, ge=0)
    default_morning_checkin_minutes: int = Field(default=540, ge=0, le=1439)
    default_evening_checkin_minutes: int = Field(default=1260, ge=0, le=1439)
    default_vitamins_minutes: int = Field(default=720, ge=0, le=1439)
    default_time_zone: str = Field(default="UTC", min_length=1)

    activity_evaluation_cutoff_minutes: int = Field(
        default=1200,
        ge=0,
        le=1439,
        description="Local minute of day after which low steps/energy alerts may fire",
    )
    workout_reminder_lead_minutes: int = Field(
        default=30,
        ge=0,
        le=240,
        description="How long before a planned workout its reminder becomes due",
    )
    meal_plan_reminder_minutes: int = Field(
        default=480,
        ge=0,
        le=1439,
        description="Local minute of day from which the daily meal plan reminder is due",
    )
    notification_priority: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NOTIFICATION_PRIORITY),
        description="Notification kinds ordered from most to least important",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = [
    "DEFAULT_NOTIFICATION_PRIORITY",
    "Settings",
    "get_settings",
    "reset_settings_cache",
]
