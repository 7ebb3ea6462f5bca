"""Data model for habitrack: per-habit date sets and the habit registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator

from core.errors import NotFoundError, ValidationError


def normalize_name(name: str) -> str:
    """Trim and uppercase the first character; the rest is kept as-is.

    'read' -> 'Read', 'rEAD' -> 'READ'. Not a full case fold.
    """
    name = name.strip()
    if not name:
        return name
    return name[0].upper() + name[1:]


# ── DateSet ───────────────────────────────────────────────────


@dataclass
class DateSet:
    """Completion dates of a single habit. Unordered, no duplicates."""

    dates: set[date] = field(default_factory=set)

    def add(self, day: date) -> None:
        self.dates.add(day)

    def contains(self, day: date) -> bool:
        return day in self.dates

    def sorted(self) -> list[date]:
        return sorted(self.dates)

    def __contains__(self, day: object) -> bool:
        return day in self.dates

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self) -> Iterator[date]:
        return iter(self.dates)


# ── Registry ──────────────────────────────────────────────────


@dataclass
class Registry:
    """Mapping of normalized habit name -> DateSet.

    Iteration follows first registration, so display order is stable
    within a run.
    """

    habits: dict[str, DateSet] = field(default_factory=dict)

    def register(self, name: str) -> str:
        """Ensure a habit exists and return its normalized name.

        Re-registering keeps existing dates.
        """
        key = normalize_name(name)
        if not key:
            raise ValidationError("Name required.")
        self.habits.setdefault(key, DateSet())
        return key

    def get(self, name: str) -> DateSet:
        key = normalize_name(name)
        if key not in self.habits:
            raise NotFoundError(key)
        return self.habits[key]

    def all(self) -> list[tuple[str, DateSet]]:
        return list(self.habits.items())

    def names(self) -> list[str]:
        return list(self.habits)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self.habits

    def __len__(self) -> int:
        return len(self.habits)


# ── Analytics ─────────────────────────────────────────────────


@dataclass
class HabitSummary:
    name: str = ""
    days: int = 0
    current_streak: int = 0
    best_streak: int = 0
