"""Shared test fixtures for habitrack tests."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
import yaml

from core.models import Registry


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary workspace with a data file and settings."""
    root = tmp_path / "workspace"
    root.mkdir()

    (root / "habits.csv").write_text(
        "Read,2026-02-09\n"
        "Read,2026-02-10\n"
        "run,2026-02-08\n"
        "Read,2026-02-11\n",
        encoding="utf-8",
    )

    settings = {"timezone": "UTC", "heatmap_window": 7}
    (root / "habits.yaml").write_text(
        yaml.dump(settings, default_flow_style=False), encoding="utf-8"
    )

    monkeypatch.setenv("HABITS_FILE", str(root / "habits.csv"))
    monkeypatch.setenv("HABITS_CONFIG", str(root / "habits.yaml"))
    monkeypatch.setenv("HABITS_LOG", str(root / "habitrack.log"))
    return root


@pytest.fixture
def registry() -> Registry:
    """A registry with one busy habit and one fresh one."""
    reg = Registry()
    reg.register("read")
    for d in (date(2026, 2, 9), date(2026, 2, 10), date(2026, 2, 11)):
        reg.get("Read").add(d)
    reg.register("Meditate")
    return reg
