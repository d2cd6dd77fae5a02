"""Candidate builders for the inbox generation pipeline.

Every builder is a pure function of a :class:`GenerationContext`. Builders never
see each other's output and never touch storage; the context already carries
the collaborator data they need. A builder whose data is missing (no workout
plan, no synced metrics, ...) simply proposes nothing.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from uuid import UUID

from app.domain.entities import (
    CHECKIN_TYPE_EVENING,
    CHECKIN_TYPE_MORNING,
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
    SUPPLEMENT_STATUS_TAKEN,
    DailyMetric,
    EffectiveSettings,
    MealPlanItem,
    NotificationCandidate,
    Profile,
    SupplementSchedule,
    WorkoutPlanItem,
)
from app.utils import format_minutes, is_day_in_mask, minute_of_day

DEFAULT_ACTIVITY_CUTOFF_MINUTES = 20 * 60
DEFAULT_WORKOUT_LEAD_MINUTES = 30
DEFAULT_MEAL_PLAN_REMINDER_MINUTES = 8 * 60


@dataclass(frozen=True)
class GenerationContext:
    """Everything a builder may look at for one generation run."""

    profile: Profile
    source_date: date
    now: datetime
    settings: EffectiveSettings
    tz: tzinfo
    checkin_types: frozenset[str] = frozenset()
    metric: DailyMetric | None = None
    supplement_names: Mapping[UUID, str] = field(default_factory=dict)
    supplement_schedules: Sequence[SupplementSchedule] = ()
    supplement_status: Mapping[UUID, str] = field(default_factory=dict)
    workout_items: Sequence[WorkoutPlanItem] = ()
    done_workout_item_ids: frozenset[UUID] = frozenset()
    meal_plan_items: Sequence[MealPlanItem] = ()
    activity_cutoff_minutes: int = DEFAULT_ACTIVITY_CUTOFF_MINUTES
    workout_lead_minutes: int = DEFAULT_WORKOUT_LEAD_MINUTES
    meal_plan_reminder_minutes: int = DEFAULT_MEAL_PLAN_REMINDER_MINUTES

    @property
    def local_now(self) -> datetime:
        return self.now.astimezone(self.tz)

    @property
    def local_minute(self) -> int:
        return minute_of_day(self.local_now)

    @property
    def is_today(self) -> bool:
        """``True`` when the evaluated date is the current profile-local day."""

        return self.local_now.date() == self.source_date

    @property
    def is_past_day(self) -> bool:
        return self.source_date < self.local_now.date()

    def candidate(
        self,
        kind: str,
        *,
        title: str,
        body: str,
        severity: str = SEVERITY_INFO,
        discriminator: str = "",
    ) -> NotificationCandidate:
        return NotificationCandidate(
            profile_id=self.profile.id,
            source_date=self.source_date,
            kind=kind,
            title=title,
            body=body,
            severity=severity,
            discriminator=discriminator,
        )


def _format_duration(minutes: int) -> str:
    hours, rest = divmod(minutes, 60)
    if not rest:
        return f"{hours}h"
    if not hours:
        return f"{rest}m"
    return f"{hours}h {rest}m"


def _checkin_reminder(
    context: GenerationContext,
    *,
    checkin_type: str,
    target_minutes: int,
    kind: str,
    title: str,
    body: str,
) -> NotificationCandidate | None:
    if not context.is_today:
        return None
    if context.local_minute < target_minutes:
        return None
    if checkin_type in context.checkin_types:
        return None
    return context.candidate(kind, title=title, body=body)


def build_morning_checkin_reminder(context: GenerationContext) -> NotificationCandidate | None:
    """Remind about a missing morning checkin once its target time has passed."""

    return _checkin_reminder(
        context,
        checkin_type=CHECKIN_TYPE_MORNING,
        target_minutes=context.settings.morning_checkin_minutes,
        kind=KIND_MISSING_MORNING_CHECKIN,
        title="Morning check-in missed",
        body="How was your morning? Fill in the morning check-in.",
    )


def build_evening_checkin_reminder(context: GenerationContext) -> NotificationCandidate | None:
    """Remind about a missing evening checkin once its target time has passed."""

    return _checkin_reminder(
        context,
        checkin_type=CHECKIN_TYPE_EVENING,
        target_minutes=context.settings.evening_checkin_minutes,
        kind=KIND_MISSING_EVENING_CHECKIN,
        title="Evening check-in missed",
        body="How was your day? Fill in the evening check-in.",
    )


def build_vitamins_reminder(context: GenerationContext) -> NotificationCandidate | None:
    """Emit one aggregated reminder listing every due, not yet taken supplement.

    A schedule entry is due from its own time (or the profile's vitamins time
    when the entry has none) until the end of the day.
    """

    if not context.is_today:
        return None

    today = context.source_date
    now_minutes = context.local_minute
    pending: set[str] = set()
    for schedule in context.supplement_schedules:
        if not schedule.is_enabled:
            continue
        if not is_day_in_mask(schedule.days_mask, today):
            continue
        due_at = schedule.time_minutes
        if due_at is None:
            due_at = context.settings.vitamins_minutes
        if now_minutes < due_at:
            continue
        if context.supplement_status.get(schedule.supplement_id) == SUPPLEMENT_STATUS_TAKEN:
            continue
        name = (context.supplement_names.get(schedule.supplement_id) or "").strip()
        if name:
            pending.add(name)

    if not pending:
        return None
    return context.candidate(
        KIND_VITAMINS_REMINDER,
        title="Vitamins reminder",
        body="Don't forget to take your vitamins: " + ", ".join(sorted(pending)),
    )


def is_within_workout_window(
    item: WorkoutPlanItem, minute: int, *, lead_minutes: int = DEFAULT_WORKOUT_LEAD_MINUTES
) -> bool:
    """``True`` for ``minute`` in ``[start - lead, start + duration]``."""

    start = item.time_minutes
    return start - lead_minutes <= minute <= start + item.duration_minutes


def build_workout_reminders(context: GenerationContext) -> list[NotificationCandidate]:
    """One reminder per planned item that is about to start or under way."""

    if not context.is_today:
        return []

    reminders: list[NotificationCandidate] = []
    for item in context.workout_items:
        if not is_day_in_mask(item.days_mask, context.source_date):
            continue
        if item.id in context.done_workout_item_ids:
            continue
        if not is_within_workout_window(
            item, context.local_minute, lead_minutes=context.workout_lead_minutes
        ):
            continue
        body = (
            f"Today: {item.label} at {format_minutes(item.time_minutes)}"
            f" • {item.duration_minutes} min"
        )
        if item.note:
            body = f"{body}. {item.note}"
        reminders.append(
            context.candidate(
                KIND_WORKOUT_REMINDER,
                title="Workout today",
                body=body,
                discriminator=str(item.id),
            )
        )
    return reminders


def build_meal_plan_reminder(context: GenerationContext) -> NotificationCandidate | None:
    """Point at today's meals of the active meal plan, once per day from the morning."""

    if not context.is_today or not context.meal_plan_items:
        return None
    if context.local_minute < context.meal_plan_reminder_minutes:
        return None

    items = context.meal_plan_items
    if len(items) == 1:
        body = f"Meal plan for today: {items[0].title}"
    else:
        body = f"Meal plan for today: {len(items)} meals"
    return context.candidate(KIND_MEAL_PLAN_REMINDER, title="Meal plan", body=body)


def build_low_sleep_alert(context: GenerationContext) -> NotificationCandidate | None:
    """Warn when last night's synced sleep is below the minimum.

    Sleep is final once it is synced, so there is no time-of-day cutoff.
    """

    metric = context.metric
    if metric is None or metric.sleep_minutes is None:
        return None
    minimum = context.settings.min_sleep_minutes
    if metric.sleep_minutes >= minimum:
        return None
    return context.candidate(
        KIND_LOW_SLEEP,
        title="Poor sleep",
        body=(
            f"Sleep: {_format_duration(metric.sleep_minutes)} "
            f"(below {_format_duration(minimum)}). Try going to bed earlier tonight."
        ),
        severity=SEVERITY_WARNING,
    )


def _activity_shortfall_is_final(context: GenerationContext) -> bool:
    if context.is_past_day:
        return True
    return context.is_today and context.local_minute >= context.activity_cutoff_minutes


def build_low_steps_alert(context: GenerationContext) -> NotificationCandidate | None:
    """Warn about a low step count once the day is nearly over."""

    metric = context.metric
    if metric is None or metric.steps is None:
        return None
    minimum = context.settings.min_steps
    if metric.steps >= minimum or not _activity_shortfall_is_final(context):
        return None
    return context.candidate(
        KIND_LOW_STEPS,
        title="Low activity",
        body=f"Steps: {metric.steps:,} of {minimum:,}. A 10-15 minute walk will help.",
        severity=SEVERITY_WARNING,
    )


def build_low_active_energy_alert(context: GenerationContext) -> NotificationCandidate | None:
    """Warn about low active energy once the day is nearly over."""

    metric = context.metric
    if metric is None or metric.active_energy_kcal is None:
        return None
    minimum = context.settings.min_active_energy_kcal
    if metric.active_energy_kcal >= minimum or not _activity_shortfall_is_final(context):
        return None
    return context.candidate(
        KIND_LOW_ACTIVE_ENERGY,
        title="Low active energy",
        body=(
            f"Active energy: {metric.active_energy_kcal} kcal of {minimum} kcal. "
            "Try to move a little more today."
        ),
        severity=SEVERITY_WARNING,
    )


SINGLE_CANDIDATE_BUILDERS: tuple[
    Callable[[GenerationContext], NotificationCandidate | None], ...
] = (
    build_low_sleep_alert,
    build_low_steps_alert,
    build_low_active_energy_alert,
    build_morning_checkin_reminder,
    build_evening_checkin_reminder,
    build_vitamins_reminder,
    build_meal_plan_reminder,
)


def collect_candidates(context: GenerationContext) -> list[NotificationCandidate]:
    """Run every builder and gather the non-empty results."""

    candidates = [
        candidate
        for builder in SINGLE_CANDIDATE_BUILDERS
        if (candidate := builder(context)) is not None
    ]
    candidates.extend(build_workout_reminders(context))
    return candidates


__all__ = [
    "DEFAULT_ACTIVITY_CUTOFF_MINUTES",
    "DEFAULT_MEAL_PLAN_REMINDER_MINUTES",
    "DEFAULT_WORKOUT_LEAD_MINUTES",
    "GenerationContext",
    "SINGLE_CANDIDATE_BUILDERS",
    "build_evening_checkin_reminder",
    "build_low_active_energy_alert",
    "build_low_sleep_alert",
    "build_low_steps_alert",
    "build_meal_plan_reminder",
    "build_morning_checkin_reminder",
    "build_vitamins_reminder",
    "build_workout_reminders",
    "collect_candidates",
    "is_within_workout_window",
]
