"""
Tests for the performance statistics sink.
"""

from __future__ import annotations

import pytest

from gf1d.instrumentation import PerformanceStats, stage_timer


def test_stage_timer_without_stats_is_noop() -> None:
    with stage_timer(None, "row_filter_time"):
        pass


def test_stage_timer_accumulates() -> None:
    stats = PerformanceStats()
    with stage_timer(stats, "row_filter_time"):
        sum(range(1000))
    first = stats.row_filter_time
    with stage_timer(stats, "row_filter_time"):
        sum(range(1000))
    assert first > 0.0
    assert stats.row_filter_time > first


def test_stage_timer_records_on_error() -> None:
    stats = PerformanceStats()
    with pytest.raises(RuntimeError):
        with stage_timer(stats, "col_filter_time"):
            raise RuntimeError("boom")
    assert stats.col_filter_time > 0.0


def test_unknown_field_raises() -> None:
    with pytest.raises(KeyError):
        with stage_timer(PerformanceStats(), "image_width"):
            pass


def test_report_contents() -> None:
    stats = PerformanceStats(
        total_time=2.0,
        row_filter_time=1.0,
        col_filter_time=0.5,
        row_filter_calls=288,
        col_filter_calls=384,
        image_width=384,
        image_height=288,
    )
    report = stats.format_report()
    assert "384x288" in report
    assert "50.0%" in report
    assert "Average per call" in report


def test_report_with_zero_total_time() -> None:
    report = PerformanceStats().format_report()
    assert "0.0%" in report
    assert "Average per call" not in report


def test_row_bottleneck_suggestion() -> None:
    stats = PerformanceStats(total_time=1.0, row_filter_time=0.8, col_filter_time=0.1)
    hints = stats.optimization_suggestions()
    assert any("row filtering" in hint for hint in hints)


def test_large_image_suggestion() -> None:
    stats = PerformanceStats(total_time=1.0, image_width=2000, image_height=1000,
                             row_filter_calls=1000, col_filter_calls=2000)
    hints = stats.optimization_suggestions()
    assert any("Large image" in hint for hint in hints)
    assert any("Per-line overhead" in hint for hint in hints)


def test_as_dict() -> None:
    data = PerformanceStats(image_width=5).as_dict()
    assert data["image_width"] == 5
    assert set(data) >= {"total_time", "row_filter_calls", "col_filter_calls"}


def test_reset_clears_every_field() -> None:
    stats = PerformanceStats(total_time=3.0, row_filter_time=1.0, row_filter_calls=10, image_width=7)
    stats.reset()
    assert stats == PerformanceStats()
