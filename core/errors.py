"""Error taxonomy for habitrack.

Every error is recoverable: the CLI reports it and keeps running.
"""

from __future__ import annotations


class HabitError(Exception):
    """Base class for all habitrack errors."""


class ValidationError(HabitError):
    """Habit name is empty after normalization."""


class NotFoundError(HabitError):
    """No habit registered under the given name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Habit not found: {name}")
        self.name = name


class SelectionError(HabitError):
    """Habit selection index is non-numeric or out of range."""


class LoadError(HabitError):
    """The data file could not be read, or a line carries a bad date.

    For a bad date, *line_no* and *value* name the offending record.
    """

    def __init__(self, message: str, line_no: int | None = None, value: str | None = None) -> None:
        super().__init__(message)
        self.line_no = line_no
        self.value = value

    @classmethod
    def invalid_date(cls, line_no: int, value: str) -> LoadError:
        return cls(
            f"Could not load data: line {line_no}: invalid date {value!r}",
            line_no=line_no,
            value=value,
        )


class SaveError(HabitError):
    """Writing the data file failed."""
