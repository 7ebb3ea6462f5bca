"""Flat-file persistence for the habit registry.

One record per line: ``<habit>,<YYYY-MM-DD>``. No header, no escaping;
a comma inside a habit name does not survive a save/load cycle.

A habit-only line ``<habit>,`` registers a habit without a completion.
It is always accepted on load and only written when ``keep_empty`` is set.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path

from core.errors import LoadError, SaveError
from core.fileio import read_text, write_text_atomic
from core.models import Registry
from core.workspace import data_path

logger = logging.getLogger(__name__)

ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

LINE_BREAK = re.compile(r"\r\n|\r|\n")


# ── Decoding ──────────────────────────────────────────────────


def parse_line(line: str) -> tuple[str, str] | None:
    """Split a line into trimmed (habit, date-text) fields.

    Returns None for blank or malformed lines (no comma, or empty habit).
    """
    parts = line.split(",", 1)
    if len(parts) != 2:
        return None
    habit, value = parts[0].strip(), parts[1].strip()
    if not habit:
        return None
    return habit, value


def parse_date(value: str) -> date | None:
    """Parse a strict YYYY-MM-DD date; None if it is not one."""
    if not ISO_DATE.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def load_into(registry: Registry, text: str) -> int:
    """Insert every record of *text* into *registry*; return records loaded.

    Raises LoadError at the first unparseable date. Records before it
    stay in the registry.
    """
    loaded = 0
    for line_no, line in enumerate(LINE_BREAK.split(text), start=1):
        fields = parse_line(line)
        if fields is None:
            if line.strip():
                logger.warning("Skipping malformed line %d: %r", line_no, line)
            continue
        habit, value = fields
        if not value:
            registry.register(habit)
            continue
        day = parse_date(value)
        if day is None:
            raise LoadError.invalid_date(line_no, value)
        registry.get(registry.register(habit)).add(day)
        loaded += 1
    return loaded


def load_registry(path: Path | None = None) -> tuple[Registry, LoadError | None]:
    """Load the data file. Returns (registry, error).

    A missing file gives an empty registry. An unreadable or undecodable
    file gives an empty registry and a LoadError. On a bad date the
    registry holds whatever was read before that line.
    """
    if path is None:
        path = data_path()
    registry = Registry()
    if not path.exists():
        logger.info("No data file at %s, starting empty", path)
        return registry, None
    try:
        text = read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return registry, LoadError(f"Could not load data: {e}")
    try:
        count = load_into(registry, text)
    except LoadError as e:
        logger.warning("Load aborted: %s", e)
        return registry, e
    logger.info("Loaded %d records for %d habits from %s", count, len(registry), path)
    return registry, None


# ── Encoding ──────────────────────────────────────────────────


def dump_registry(registry: Registry, keep_empty: bool = False) -> str:
    """Serialize to file text: habits in registry order, dates ascending."""
    lines = []
    for name, days in registry.all():
        if not days:
            if keep_empty:
                lines.append(f"{name},")
            continue
        for d in days.sorted():
            lines.append(f"{name},{d.isoformat()}")
    return "".join(line + "\n" for line in lines)


def save_registry(
    registry: Registry,
    path: Path | None = None,
    keep_empty: bool = False,
) -> None:
    """Overwrite the data file with the registry contents.

    Raises SaveError on any I/O failure; the previous file is left intact.
    """
    if path is None:
        path = data_path()
    try:
        write_text_atomic(path, dump_registry(registry, keep_empty))
    except OSError as e:
        raise SaveError(f"Could not save: {e}") from e
    logger.info("Saved %d habits to %s", len(registry), path)
