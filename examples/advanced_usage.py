"""
Advanced gf1d usage scenarios.
"""

from __future__ import annotations

import numpy as np

from gf1d import GuidedDestriper, PerformanceStats
from gf1d.utils import add_column_stripes, make_smooth_scene


def example_with_intermediate_results() -> dict:
    """Retrieve every stage output for inspection."""

    noisy, _ = add_column_stripes(make_smooth_scene((128, 160), seed=4), seed=5)
    results = GuidedDestriper().process(noisy, return_intermediate=True)
    keys = ", ".join(results.keys())
    print(f"Intermediate results available: {keys}")
    return results


def example_performance_report() -> PerformanceStats:
    """Collect per-stage timings and print the report."""

    noisy, _ = add_column_stripes(make_smooth_scene((1024, 1280), seed=6), seed=7)
    stats = PerformanceStats()
    GuidedDestriper().process(noisy, stats=stats)
    print(stats.format_report())
    for hint in stats.optimization_suggestions():
        print(f"  - {hint}")
    return stats


def example_torch_backend() -> np.ndarray:
    """Run the same pipeline with PyTorch, on the GPU when one is available."""

    from gf1d.torch import denoise_torch

    noisy, _ = add_column_stripes(make_smooth_scene((288, 384), seed=8), seed=9)
    result = denoise_torch(noisy)
    print(f"Torch example ran on {result.device}")
    return result.cpu().numpy()


if __name__ == "__main__":
    example_with_intermediate_results()
    example_performance_report()
    example_torch_backend()
