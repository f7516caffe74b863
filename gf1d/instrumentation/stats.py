"""
Optional timing sink for the destriping pipeline.

The pipeline only writes into a ``PerformanceStats`` instance handed to it by
the caller; what happens with the numbers afterwards is up to the caller.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Dict, Iterator, List, Optional, Union

STAGE_FIELDS = (
    "preprocessing_time",
    "row_filter_time",
    "col_filter_time",
    "postprocessing_time",
    "total_time",
)


@dataclass
class PerformanceStats:
    """Elapsed seconds and call counts for one pipeline run."""

    total_time: float = 0.0
    row_filter_time: float = 0.0
    col_filter_time: float = 0.0
    preprocessing_time: float = 0.0
    postprocessing_time: float = 0.0
    row_filter_calls: int = 0
    col_filter_calls: int = 0
    image_width: int = 0
    image_height: int = 0

    def reset(self) -> None:
        """Zero every field so the handle describes a single run."""

        for name, value in asdict(PerformanceStats()).items():
            setattr(self, name, value)

    def as_dict(self) -> Dict[str, Union[int, float]]:
        return asdict(self)

    def _share(self, seconds: float) -> float:
        if self.total_time <= 0.0:
            return 0.0
        return seconds / self.total_time * 100.0

    def format_report(self) -> str:
        """Multi-line human-readable summary."""

        rule = "=" * 60
        lines = [
            rule,
            "Performance report",
            rule,
            f"  Image size:        {self.image_width}x{self.image_height}",
            f"  Total time:        {self.total_time:.4f} s",
            f"  Row filter calls:  {self.row_filter_calls}",
            f"  Col filter calls:  {self.col_filter_calls}",
            "",
            "  Time breakdown:",
        ]

        for label, seconds in (
            ("preprocessing", self.preprocessing_time),
            ("row filtering", self.row_filter_time),
            ("column filtering", self.col_filter_time),
            ("postprocessing", self.postprocessing_time),
        ):
            lines.append(f"    {label:<17} {seconds:.4f} s ({self._share(seconds):.1f}%)")

        if self.row_filter_calls > 0 and self.col_filter_calls > 0:
            lines.extend(
                [
                    "",
                    "  Average per call:",
                    f"    row filter        {self.row_filter_time / self.row_filter_calls * 1000.0:.4f} ms",
                    f"    column filter     {self.col_filter_time / self.col_filter_calls * 1000.0:.4f} ms",
                ]
            )

        lines.append(rule)
        return "\n".join(lines)

    def optimization_suggestions(self) -> List[str]:
        """Heuristic hints derived from the time distribution and image size."""

        hints: List[str] = []
        row_share = self._share(self.row_filter_time)
        col_share = self._share(self.col_filter_time)

        if row_share > 60.0 or col_share > 60.0:
            if row_share > col_share:
                hints.append(f"Bottleneck: row filtering ({row_share:.1f}% of total time)")
                hints.append("Process several rows per call or move the row pass to the torch backend")
            else:
                hints.append(f"Bottleneck: column filtering ({col_share:.1f}% of total time)")
                hints.append("Keep the image C-contiguous along columns before the column pass")

        if self.image_width * self.image_height > 1_000_000:
            hints.append("Large image: process in tiles to bound memory use")
            hints.append("Consider float32 storage instead of float64")

        if self.row_filter_calls > self.image_height * 0.8:
            hints.append("Per-line overhead: avoid copying rows and columns between stages")

        return hints


@contextmanager
def stage_timer(stats: Optional[PerformanceStats], field: str) -> Iterator[None]:
    """
    Add the wall time spent inside the block to ``stats.<field>``.

    Does nothing when ``stats`` is ``None``.
    """

    if stats is None:
        yield
        return

    if field not in STAGE_FIELDS:
        raise KeyError(f"Unknown timing field {field!r}")

    start = time.perf_counter()
    try:
        yield
    finally:
        setattr(stats, field, getattr(stats, field) + time.perf_counter() - start)
