"""Domain entities exposed by the application."""

from .checkin import CHECKIN_TYPE_EVENING, CHECKIN_TYPE_MORNING, Checkin
from .daily_metric import DailyMetric
from .meal_plan import MEAL_SLOTS, MealPlan, MealPlanItem
from .notification import (
    KIND_LOW_ACTIVE_ENERGY,
    KIND_LOW_SLEEP,
    KIND_LOW_STEPS,
    KIND_MEAL_PLAN_REMINDER,
    KIND_MISSING_EVENING_CHECKIN,
    KIND_MISSING_MORNING_CHECKIN,
    KIND_VITAMINS_REMINDER,
    KIND_WORKOUT_REMINDER,
    SEVERITY_INFO,
    SEVERITY_WARNING,
    Notification,
    NotificationCandidate,
    NotificationIdentity,
)
from .profile import Profile
from .settings import EffectiveSettings, SettingsDefaults, UserSettings
from .supplement import (
    ALL_DAYS_MASK,
    SUPPLEMENT_STATUS_SKIPPED,
    SUPPLEMENT_STATUS_TAKEN,
    Supplement,
    SupplementSchedule,
)
from .workout import (
    WORKOUT_STATUS_DONE,
    WORKOUT_STATUS_SKIPPED,
    WorkoutCompletion,
    WorkoutPlan,
    WorkoutPlanItem,
)

__all__ = [
    "ALL_DAYS_MASK",
    "CHECKIN_TYPE_EVENING",
    "CHECKIN_TYPE_MORNING",
    "Checkin",
    "DailyMetric",
    "EffectiveSettings",
    "KIND_LOW_ACTIVE_ENERGY",
    "KIND_LOW_SLEEP",
    "KIND_LOW_STEPS",
    "KIND_MEAL_PLAN_REMINDER",
    "KIND_MISSING_EVENING_CHECKIN",
    "KIND_MISSING_MORNING_CHECKIN",
    "KIND_VITAMINS_REMINDER",
    "KIND_WORKOUT_REMINDER",
    "MEAL_SLOTS",
    "MealPlan",
    "MealPlanItem",
    "Notification",
    "NotificationCandidate",
    "NotificationIdentity",
    "Profile",
    "SEVERITY_INFO",
    "SEVERITY_WARNING",
    "SUPPLEMENT_STATUS_SKIPPED",
    "SUPPLEMENT_STATUS_TAKEN",
    "SettingsDefaults",
    "Supplement",
    "SupplementSchedule",
    "UserSettings",
    "WORKOUT_STATUS_DONE",
    "WORKOUT_STATUS_SKIPPED",
    "WorkoutCompletion",
    "WorkoutPlan",
    "WorkoutPlanItem",
]
