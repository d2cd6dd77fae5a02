"""ORM models used by the application infrastructure."""

from .checkin import CheckinModel
from .daily_metric import DailyMetricModel
from .meal_plan import MealPlanItemModel, MealPlanModel
from .notification import NotificationModel
from .profile import ProfileModel
from .supplement import (
    SupplementDailyStatusModel,
    SupplementModel,
    SupplementScheduleModel,
)
from .user_settings import UserSettingsModel
from .workout import WorkoutCompletionModel, WorkoutPlanItemModel, WorkoutPlanModel

__all__ = [
    "CheckinModel",
    "DailyMetricModel",
    "MealPlanItemModel",
    "MealPlanModel",
    "NotificationModel",
    "ProfileModel",
    "SupplementDailyStatusModel",
    "SupplementModel",
    "SupplementScheduleModel",
    "UserSettingsModel",
    "WorkoutCompletionModel",
    "WorkoutPlanItemModel",
    "WorkoutPlanModel",
]
