"""Settings, timezone, path helpers for habitrack."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from core.fileio import read_yaml

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "habits.csv"
DEFAULT_CONFIG_FILE = "habits.yaml"
DEFAULT_LOG_FILE = "habitrack.log"


@dataclass
class Settings:
    timezone: str = "UTC"
    heatmap_window: int = 7
    keep_empty_habits: bool = False

    @classmethod
    def from_dict(cls, d: dict) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        window = d.get("heatmap_window", 7)
        if not isinstance(window, int) or isinstance(window, bool) or window < 1:
            logger.warning("Ignoring invalid heatmap_window: %r", window)
            window = 7
        keep_empty = d.get("keep_empty_habits", False)
        if not isinstance(keep_empty, bool):
            logger.warning("Ignoring invalid keep_empty_habits: %r", keep_empty)
            keep_empty = False
        return cls(
            timezone=str(d.get("timezone", "UTC")),
            heatmap_window=window,
            keep_empty_habits=keep_empty,
        )


# ── Path helpers ──────────────────────────────────────────────


def data_path() -> Path:
    """The habits data file (HABITS_FILE, else ./habits.csv)."""
    return Path(os.environ.get("HABITS_FILE", DEFAULT_DATA_FILE)).expanduser()


def config_path() -> Path:
    return Path(os.environ.get("HABITS_CONFIG", DEFAULT_CONFIG_FILE)).expanduser()


def log_path() -> Path:
    return Path(os.environ.get("HABITS_LOG", DEFAULT_LOG_FILE)).expanduser()


# ── Settings ──────────────────────────────────────────────────


def load_settings(path: Path | None = None) -> Settings:
    """Read habits.yaml; missing or malformed files give defaults."""
    if path is None:
        path = config_path()
    return Settings.from_dict(read_yaml(path))


def get_user_timezone(settings: Settings | None = None) -> ZoneInfo:
    """Configured timezone, defaulting to UTC."""
    if settings is None:
        settings = load_settings()
    try:
        return ZoneInfo(settings.timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using UTC", settings.timezone)
        return ZoneInfo("UTC")


def today(settings: Settings | None = None) -> date:
    """Today's date in the user's timezone."""
    return datetime.now(get_user_timezone(settings)).date()
