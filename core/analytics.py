"""Streak and heatmap analytics for habitrack.

All functions are pure projections over the registry; "today" is
injectable and defaults to the configured local date.
"""

from __future__ import annotations

from datetime import date, timedelta

from core.models import DateSet, HabitSummary, Registry
from core.workspace import today as _today


DEFAULT_WINDOW = 7

ONE_DAY = timedelta(days=1)


# ── Streaks ───────────────────────────────────────────────────


def current_streak(days: DateSet, today: date | None = None) -> int:
    """Consecutive completed days ending at (and including) today.

    Walks backward from today and stops at the first missing day, so a
    missing today gives 0.
    """
    if today is None:
        today = _today()
    streak = 0
    d = today
    while d in days:
        streak += 1
        d -= ONE_DAY
    return streak


def best_streak(days: DateSet) -> int:
    """Longest run of consecutive calendar days in the set (0 if empty)."""
    if not days:
        return 0
    ordered = days.sorted()
    best = cur = 1
    for prev, d in zip(ordered, ordered[1:]):
        if d - prev == ONE_DAY:
            cur += 1
        else:
            best = max(best, cur)
            cur = 1
    # trailing run
    return max(best, cur)


# ── Heatmap ───────────────────────────────────────────────────


def window_dates(today: date | None = None, window: int = DEFAULT_WINDOW) -> list[date]:
    """Dates from today - (window - 1) through today, oldest first."""
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")
    if today is None:
        today = _today()
    start = today - timedelta(days=window - 1)
    return [start + timedelta(days=i) for i in range(window)]


def heatmap(
    registry: Registry,
    today: date | None = None,
    window: int = DEFAULT_WINDOW,
) -> dict[str, list[bool]]:
    """Per-habit completion flags over the last *window* days."""
    dates = window_dates(today, window)
    return {name: [d in days for d in dates] for name, days in registry.all()}


# ── Summary ───────────────────────────────────────────────────


def summarize(registry: Registry, today: date | None = None) -> list[HabitSummary]:
    """One row per habit: total days, current streak, best streak."""
    if today is None:
        today = _today()
    return [
        HabitSummary(
            name=name,
            days=len(days),
            current_streak=current_streak(days, today),
            best_streak=best_streak(days),
        )
        for name, days in registry.all()
    ]
