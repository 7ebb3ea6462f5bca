"""Habit operations for habitrack: add, mark, select."""

from __future__ import annotations

import logging
from datetime import date

from core.errors import SelectionError
from core.models import Registry
from core.workspace import today as _today

logger = logging.getLogger(__name__)


def add_habit(registry: Registry, raw_name: str) -> str:
    """Register a habit from user input. Returns the normalized name.

    Raises ValidationError for an empty or whitespace-only name.
    """
    existed = raw_name in registry
    name = registry.register(raw_name)
    if not existed:
        logger.info("Added habit %s", name)
    return name


def mark_done(registry: Registry, name: str, day: date | None = None) -> date:
    """Record a completion for *name* on *day* (default today). Idempotent."""
    if day is None:
        day = _today()
    registry.get(name).add(day)
    logger.info("Marked %s for %s", name, day.isoformat())
    return day


def habit_choices(registry: Registry) -> list[str]:
    """Enumerated menu lines: '1) Read', '2) Run', ..."""
    return [f"{i}) {name}" for i, name in enumerate(registry.names(), start=1)]


def select_habit(registry: Registry, raw_choice: str) -> str:
    """Resolve a 1-based menu index to a habit name.

    Raises SelectionError for non-numeric or out-of-range input.
    """
    names = registry.names()
    try:
        idx = int(raw_choice.strip()) - 1
    except ValueError:
        raise SelectionError(f"Invalid selection: {raw_choice.strip()!r}") from None
    if idx < 0 or idx >= len(names):
        raise SelectionError(f"Invalid selection: {idx + 1} (choose 1-{len(names)})")
    return names[idx]
