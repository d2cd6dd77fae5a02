"""Quiet-hours suppression, deduplication and daily cap for candidates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from app.config import DEFAULT_NOTIFICATION_PRIORITY
from app.domain.entities import (
    SEVERITY_INFO,
    SEVERITY_WARNING,
    EffectiveSettings,
    NotificationCandidate,
    NotificationIdentity,
)


def is_within_quiet_hours(minute: int, start: int, end: int) -> bool:
    """Return ``True`` when ``minute`` lies in the ``[start, end)`` window.

    A window with ``end < start`` wraps past midnight; ``start == end`` covers
    the whole day.
    """

    if start == end:
        return True
    if start < end:
        return start <= minute < end
    return minute >= start or minute < end


def apply_quiet_hours(
    candidates: Iterable[NotificationCandidate],
    settings: EffectiveSettings,
    local_minute: int,
) -> tuple[list[NotificationCandidate], list[NotificationCandidate]]:
    """Split ``candidates`` into ``(kept, suppressed)``.

    Only ``info`` candidates are silenced; warnings always pass.
    """

    candidates = list(candidates)
    if not settings.quiet_hours_enabled:
        return candidates, []
    if not is_within_quiet_hours(
        local_minute, settings.quiet_start_minutes, settings.quiet_end_minutes
    ):
        return candidates, []

    kept = [c for c in candidates if c.severity != SEVERITY_INFO]
    suppressed = [c for c in candidates if c.severity == SEVERITY_INFO]
    return kept, suppressed


def drop_known(
    candidates: Iterable[NotificationCandidate],
    known: Iterable[NotificationIdentity],
) -> list[NotificationCandidate]:
    """Drop candidates whose identity already exists or repeats in the batch."""

    seen = set(known)
    fresh: list[NotificationCandidate] = []
    for candidate in candidates:
        if candidate.identity in seen:
            continue
        seen.add(candidate.identity)
        fresh.append(candidate)
    return fresh


def prioritize(
    candidates: Iterable[NotificationCandidate],
    priority: Sequence[str] = DEFAULT_NOTIFICATION_PRIORITY,
) -> list[NotificationCandidate]:
    """Stable sort by the position of each kind in ``priority``.

    Kinds missing from ``priority`` go last, warnings ahead of infos.
    """

    ranks = {kind: index for index, kind in enumerate(priority)}
    unranked = len(ranks)

    def sort_key(candidate: NotificationCandidate) -> tuple[int, int]:
        rank = ranks.get(candidate.kind, unranked)
        return rank, 0 if candidate.severity == SEVERITY_WARNING else 1

    return sorted(candidates, key=sort_key)


def apply_daily_cap(
    candidates: Iterable[NotificationCandidate],
    budget: int,
    priority: Sequence[str] = DEFAULT_NOTIFICATION_PRIORITY,
) -> list[NotificationCandidate]:
    """Keep at most ``budget`` candidates, dropping the lowest priority first."""

    if budget <= 0:
        return []
    return prioritize(candidates, priority)[:budget]


__all__ = [
    "apply_daily_cap",
    "apply_quiet_hours",
    "drop_known",
    "is_within_quiet_hours",
    "prioritize",
]
