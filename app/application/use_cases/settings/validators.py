"""Validation helpers for settings use cases."""

from app.domain.entities import UserSettings
from app.domain.exceptions import InvalidInputError
from app.utils import is_valid_timezone

_RANGES: dict[str, tuple[int, int]] = {
    "quiet_start_minutes": (0, 1439),
    "quiet_end_minutes": (0, 1439),
    "notifications_max_per_day": (0, 10),
    "min_sleep_minutes": (0, 1200),
    "min_steps": (0, 50000),
    "min_active_energy_kcal": (0, 5000),
    "morning_checkin_minutes": (0, 1439),
    "evening_checkin_minutes": (0, 1439),
    "vitamins_minutes": (0, 1439),
}


def ensure_valid_settings(settings: UserSettings) -> None:
    """Raise :class:`InvalidInputError` when ``settings`` breaks a constraint."""

    if settings.time_zone is not None and settings.time_zone.strip():
        if not is_valid_timezone(settings.time_zone):
            raise InvalidInputError("invalid time_zone")

    if (settings.quiet_start_minutes is None) != (settings.quiet_end_minutes is None):
        raise InvalidInputError(
            "quiet_start_minutes and quiet_end_minutes must be both set or both null"
        )

    for name, (low, high) in _RANGES.items():
        value = getattr(settings, name)
        if value is not None and not low <= value <= high:
            raise InvalidInputError(f"{name} must be in range {low}..{high}")


__all__ = ["ensure_valid_settings"]
