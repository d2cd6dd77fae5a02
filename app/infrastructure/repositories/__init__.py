"""Repository implementations for infrastructure layer."""

from .checkin_repository import CheckinRepository
from .metric_repository import DailyMetricRepository
from .meal_plan_repository import MealPlanRepository
from .notification_repository import NotificationRepository
from .profile_repository import ProfileRepository
from .settings_repository import SettingsRepository
from .supplement_repository import SupplementRepository
from .workout_repository import WorkoutRepository

__all__ = [
    "CheckinRepository",
    "DailyMetricRepository",
    "MealPlanRepository",
    "NotificationRepository",
    "ProfileRepository",
    "SettingsRepository",
    "SupplementRepository",
    "WorkoutRepository",
]
