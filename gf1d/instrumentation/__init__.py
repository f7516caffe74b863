"""Per-stage timing collected on behalf of the caller."""

from gf1d.instrumentation.stats import PerformanceStats, stage_timer

__all__ = ["PerformanceStats", "stage_timer"]
