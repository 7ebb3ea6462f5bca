"""Tests for core/workspace.py — settings and paths."""

from datetime import date
from pathlib import Path

from core.workspace import (
    Settings,
    data_path,
    get_user_timezone,
    load_settings,
    today,
)


def test_default_paths(monkeypatch):
    monkeypatch.delenv("HABITS_FILE", raising=False)
    assert data_path() == Path("habits.csv")


def test_env_paths(workspace):
    assert data_path() == workspace / "habits.csv"


def test_load_settings(workspace):
    s = load_settings()
    assert s.timezone == "UTC"
    assert s.heatmap_window == 7
    assert s.keep_empty_habits is False


def test_load_settings_missing(tmp_path):
    assert load_settings(tmp_path / "nope.yaml") == Settings()


def test_load_settings_invalid_window(tmp_path):
    path = tmp_path / "habits.yaml"
    path.write_text("heatmap_window: 0\nkeep_empty_habits: true\n", encoding="utf-8")
    s = load_settings(path)
    assert s.heatmap_window == 7
    assert s.keep_empty_habits is True


def test_load_settings_not_a_mapping(tmp_path):
    path = tmp_path / "habits.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_unknown_timezone_falls_back():
    tz = get_user_timezone(Settings(timezone="Nowhere/Special"))
    assert str(tz) == "UTC"


def test_today_is_a_date():
    assert isinstance(today(Settings()), date)


def test_load_settings_keep_empty_must_be_bool(tmp_path):
    path = tmp_path / "habits.yaml"
    path.write_text('keep_empty_habits: "false"\n', encoding="utf-8")
    assert load_settings(path).keep_empty_habits is False
    path.write_text("keep_empty_habits: yes\n", encoding="utf-8")
    assert load_settings(path).keep_empty_habits is True
