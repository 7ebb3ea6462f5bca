"""File I/O utilities for habitrack."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any

import yaml


def read_text(path: Path) -> str:
    """Read a text file, returning empty string if missing."""
    if not path.exists():
        return ""
    return path.read_text(encoding="utf-8")


def read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML file, returning empty dict if missing, empty or not a mapping."""
    text = read_text(path)
    if not text.strip():
        return {}
    try:
        result = yaml.safe_load(text)
    except yaml.YAMLError:
        return {}
    return result if isinstance(result, dict) else {}


def write_text_atomic(path: Path, content: str) -> None:
    """Atomic write: temp file in the same directory + fsync + replace."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", suffix=".csv")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, path)
    except Exception:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
