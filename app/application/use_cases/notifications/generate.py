"""Use case that turns a profile's current state into new inbox notifications."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from sqlalchemy.orm import Session

from app.application.use_cases.profiles import get_owned_profile
from app.application.use_cases.settings import (
    defaults_from_config,
    resolve_effective_settings,
)
from app.config import DEFAULT_NOTIFICATION_PRIORITY, Settings
from app.domain.entities import (
    WORKOUT_STATUS_DONE,
    EffectiveSettings,
    Notification,
    Profile,
    SettingsDefaults,
)
from app.domain.exceptions import InvalidInputError
from app.infrastructure.repositories import (
    CheckinRepository,
    DailyMetricRepository,
    MealPlanRepository,
    NotificationRepository,
    SupplementRepository,
    WorkoutRepository,
)
from app.utils import ensure_utc, now_utc, resolve_timezone

from .builders import (
    DEFAULT_ACTIVITY_CUTOFF_MINUTES,
    DEFAULT_MEAL_PLAN_REMINDER_MINUTES,
    DEFAULT_WORKOUT_LEAD_MINUTES,
    GenerationContext,
    collect_candidates,
)
from .filters import apply_daily_cap, apply_quiet_hours, drop_known

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationRequest:
    """Input of one generation run.

    ``now`` is injectable so a run is a replayable function of its inputs and
    of what has already been persisted.
    """

    profile_id: UUID
    date: date
    now: datetime | None = None
    client_time_zone: str | None = None


@dataclass(frozen=True)
class GenerationPolicy:
    """Tunables of the pipeline that do not come from user preferences."""

    defaults: SettingsDefaults = SettingsDefaults()
    priority: tuple[str, ...] = DEFAULT_NOTIFICATION_PRIORITY
    activity_cutoff_minutes: int = DEFAULT_ACTIVITY_CUTOFF_MINUTES
    workout_lead_minutes: int = DEFAULT_WORKOUT_LEAD_MINUTES
    meal_plan_reminder_minutes: int = DEFAULT_MEAL_PLAN_REMINDER_MINUTES

    @classmethod
    def from_config(cls, config: Settings) -> "GenerationPolicy":
        return cls(
            defaults=defaults_from_config(config),
            priority=tuple(config.notification_priority),
            activity_cutoff_minutes=config.activity_evaluation_cutoff_minutes,
            workout_lead_minutes=config.workout_reminder_lead_minutes,
            meal_plan_reminder_minutes=config.meal_plan_reminder_minutes,
        )


def _load_context(
    session: Session,
    *,
    profile: Profile,
    request: GenerationRequest,
    now: datetime,
    settings: EffectiveSettings,
    policy: GenerationPolicy,
) -> GenerationContext:
    """Read every collaborator the builders need. Any storage error propagates."""

    day = request.date
    checkins = CheckinRepository(session).list_for_range(profile.id, day, day)
    metric = DailyMetricRepository(session).get(profile.id, day)

    supplements = SupplementRepository(session)
    supplement_names = {s.id: s.name for s in supplements.list_supplements(profile.id)}
    schedules = supplements.list_schedules(profile.id)
    supplement_status = supplements.get_daily_status(profile.id, day) if schedules else {}

    workouts = WorkoutRepository(session)
    items = ()
    done_ids: frozenset[UUID] = frozenset()
    plan = workouts.get_active_plan(profile.owner_user_id, profile.id)
    if plan is not None:
        items = tuple(workouts.list_items(plan.id))
        done_ids = frozenset(
            completion.plan_item_id
            for completion in workouts.list_completions(profile.id, day, day)
            if completion.status == WORKOUT_STATUS_DONE
        )

    meal_plans = MealPlanRepository(session)
    meals = ()
    meal_plan = meal_plans.get_active_plan(profile.owner_user_id, profile.id)
    if meal_plan is not None:
        meals = tuple(meal_plans.list_items_for_day(meal_plan.id, day))

    return GenerationContext(
        profile=profile,
        source_date=day,
        now=now,
        settings=settings,
        tz=resolve_timezone(settings.time_zone),
        checkin_types=frozenset(checkin.type for checkin in checkins),
        metric=metric,
        supplement_names=supplement_names,
        supplement_schedules=tuple(schedules),
        supplement_status=supplement_status,
        workout_items=items,
        done_workout_item_ids=done_ids,
        activity_cutoff_minutes=policy.activity_cutoff_minutes,
        workout_lead_minutes=policy.workout_lead_minutes,
        meal_plan_items=meals,
        meal_plan_reminder_minutes=policy.meal_plan_reminder_minutes,
    )


def generate_notifications(
    session: Session,
    *,
    owner_user_id: str,
    request: GenerationRequest,
    policy: GenerationPolicy | None = None,
) -> Sequence[Notification]:
    """Evaluate every builder for ``request`` and persist what is new.

    Pipeline: effective settings, candidate builders, dedup against the day's
    existing notifications, quiet hours, daily cap, batch insert. Returns only
    the notifications created by this call. Failures abort the whole run.
    """

    if request.date is None:
        raise InvalidInputError("date is required")
    policy = policy or GenerationPolicy()
    now = ensure_utc(request.now) or now_utc()

    profile = get_owned_profile(
        session, owner_user_id=owner_user_id, profile_id=request.profile_id
    )
    settings = resolve_effective_settings(
        session,
        profile.owner_user_id,
        policy.defaults,
        fallback_time_zone=request.client_time_zone,
    )
    context = _load_context(
        session,
        profile=profile,
        request=request,
        now=now,
        settings=settings,
        policy=policy,
    )

    candidates = collect_candidates(context)

    repository = NotificationRepository(session)
    existing = repository.list_for_day(profile.id, request.date)
    fresh = drop_known(candidates, (n.identity for n in existing))
    audible, silenced = apply_quiet_hours(fresh, settings, context.local_minute)
    budget = settings.notifications_max_per_day - len(existing)
    selected = apply_daily_cap(audible, budget, policy.priority)

    created = repository.insert_many(
        candidate.to_notification(created_at=now) for candidate in selected
    )
    logger.info(
        "Generated inbox for profile %s on %s: %d candidates, %d already known, "
        "%d silenced by quiet hours, %d over the daily cap, %d created",
        profile.id,
        request.date,
        len(candidates),
        len(candidates) - len(fresh),
        len(silenced),
        len(audible) - len(selected),
        len(created),
    )
    return created


__all__ = ["GenerationPolicy", "GenerationRequest", "generate_notifications"]
