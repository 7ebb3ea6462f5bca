"""Tests for core/analytics.py — streaks, heatmap window, summaries."""

from datetime import date

import pytest

from core.analytics import best_streak, current_streak, heatmap, summarize, window_dates
from core.models import DateSet, Registry

TODAY = date(2026, 2, 11)


def dates(*isos: str) -> DateSet:
    return DateSet({date.fromisoformat(s) for s in isos})


def test_current_streak_three_days():
    ds = dates("2026-02-09", "2026-02-10", "2026-02-11")
    assert current_streak(ds, TODAY) == 3


def test_current_streak_today_missing():
    ds = dates("2026-02-09", "2026-02-10")
    assert current_streak(ds, TODAY) == 0


def test_current_streak_stops_at_gap():
    ds = dates("2026-02-01", "2026-02-02", "2026-02-10", "2026-02-11")
    assert current_streak(ds, TODAY) == 2


def test_current_streak_across_month_boundary():
    ds = dates("2026-02-28", "2026-03-01")
    assert current_streak(ds, date(2026, 3, 1)) == 2


def test_current_streak_empty():
    assert current_streak(DateSet(), TODAY) == 0


def test_best_streak_trailing_single_day():
    ds = dates("2025-01-01", "2025-01-02", "2025-01-03", "2025-01-10")
    assert best_streak(ds) == 3


def test_best_streak_trailing_run_wins():
    ds = dates("2025-01-01", "2025-01-05", "2025-01-06", "2025-01-07", "2025-01-08")
    assert best_streak(ds) == 4


def test_best_streak_unordered_input():
    ds = dates("2025-01-03", "2025-01-01", "2025-01-02")
    assert best_streak(ds) == 3


def test_best_streak_empty_and_single():
    assert best_streak(DateSet()) == 0
    assert best_streak(dates("2025-01-01")) == 1


def test_best_streak_year_boundary():
    ds = dates("2024-12-31", "2025-01-01")
    assert best_streak(ds) == 2


def test_window_dates():
    ws = window_dates(TODAY, 7)
    assert len(ws) == 7
    assert ws[0] == date(2026, 2, 5)
    assert ws[-1] == TODAY


def test_window_dates_invalid():
    with pytest.raises(ValueError):
        window_dates(TODAY, 0)


def test_heatmap(registry):
    result = heatmap(registry, TODAY, 7)
    assert list(result) == ["Read", "Meditate"]
    assert result["Read"] == [False, False, False, False, True, True, True]
    assert result["Meditate"] == [False] * 7


def test_heatmap_custom_window(registry):
    result = heatmap(registry, TODAY, 3)
    assert result["Read"] == [True, True, True]


def test_heatmap_empty_registry():
    assert heatmap(Registry(), TODAY) == {}


def test_summarize(registry):
    rows = summarize(registry, TODAY)
    assert [r.name for r in rows] == ["Read", "Meditate"]
    assert rows[0].days == 3
    assert rows[0].current_streak == 3
    assert rows[0].best_streak == 3
    assert (rows[1].days, rows[1].current_streak, rows[1].best_streak) == (0, 0, 0)
