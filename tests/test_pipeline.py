"""
Tests for the destriping pipeline.
"""

from __future__ import annotations

import numpy as np
import pytest

from gf1d import (
    DenoiseConfig,
    EmptyImageError,
    GuidedDestriper,
    InvalidParameterError,
    PerformanceStats,
    denoise,
)
from gf1d.core.config import derive_col_radius
from gf1d.utils import add_column_stripes, make_smooth_scene, stripe_residual


def test_constant_image_is_unchanged() -> None:
    img = np.full((40, 50), 0.62)
    results = GuidedDestriper().process(img, return_intermediate=True)
    np.testing.assert_allclose(results["output"], img, atol=1e-10)
    np.testing.assert_allclose(results["highpart"], 0.0, atol=1e-10)
    np.testing.assert_allclose(results["strip"], 0.0, atol=1e-10)


def test_column_stripes_are_flattened() -> None:
    clean = make_smooth_scene((96, 128), seed=0)
    noisy, _ = add_column_stripes(clean, amplitude=0.1, seed=1)

    result = denoise(noisy)

    assert result.shape == noisy.shape
    assert np.isfinite(result).all()
    assert stripe_residual(result, clean) < 0.5 * stripe_residual(noisy, clean)


def test_repeated_runs_are_bit_identical() -> None:
    rng = np.random.default_rng(7)
    img = rng.random((48, 64))
    np.testing.assert_array_equal(denoise(img), denoise(img))


def test_intermediate_results() -> None:
    rng = np.random.default_rng(8)
    img = rng.random((96, 40))
    results = GuidedDestriper().process(img, return_intermediate=True)

    for key in ("input", "smooth", "highpart", "strip", "output", "col_radius"):
        assert key in results
    assert results["col_radius"] == 12
    np.testing.assert_array_equal(results["highpart"], img - results["smooth"])
    np.testing.assert_array_equal(results["output"], img - results["strip"])


def test_output_keeps_input_base() -> None:
    rng = np.random.default_rng(9)
    img = rng.random((32, 32))
    results = GuidedDestriper(DenoiseConfig(col_radius=0)).process(img, return_intermediate=True)
    # A zero-width column window copies the highpass through, leaving the
    # row-smoothed image behind.
    np.testing.assert_allclose(results["output"], results["smooth"], atol=1e-12)


def test_input_not_modified() -> None:
    img = np.random.rand(24, 30)
    before = img.copy()
    denoise(img)
    np.testing.assert_array_equal(img, before)


@pytest.mark.parametrize(
    "height, expected",
    [(1, 0), (4, 0), (8, 0), (24, 2), (96, 12), (288, 36), (100, 12)],
)
def test_derived_column_radius(height: int, expected: int) -> None:
    assert derive_col_radius(height) == expected
    assert DenoiseConfig().resolve_col_radius(height) == expected


def test_column_radius_override() -> None:
    assert DenoiseConfig(col_radius=3).resolve_col_radius(500) == 3


def test_stats_are_filled() -> None:
    img = np.random.rand(20, 36)
    stats = PerformanceStats()
    denoise(img, stats=stats)

    assert stats.image_height == 20
    assert stats.image_width == 36
    assert stats.row_filter_calls == 20
    assert stats.col_filter_calls == 36
    assert stats.total_time > 0.0
    assert stats.total_time >= stats.row_filter_time + stats.col_filter_time


def test_image_narrower_than_row_window_raises() -> None:
    with pytest.raises(InvalidParameterError):
        denoise(np.ones((20, 8)))


def test_column_radius_too_large_raises() -> None:
    with pytest.raises(InvalidParameterError):
        denoise(np.ones((10, 20)), col_radius=5)


def test_empty_image_raises() -> None:
    with pytest.raises(EmptyImageError):
        denoise(np.zeros((0, 12)))


def test_nan_input_raises() -> None:
    img = np.random.rand(16, 16)
    img[3, 4] = np.nan
    with pytest.raises(InvalidParameterError):
        denoise(img)


def test_color_input_raises() -> None:
    with pytest.raises(InvalidParameterError):
        denoise(np.random.rand(16, 16, 3))


def test_valid_config() -> None:
    DenoiseConfig(row_radius=2, row_eps=0.5, col_eps=0.01, col_radius=4).validate()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"row_radius": -1},
        {"row_eps": 0.0},
        {"col_eps": -0.04},
        {"col_radius": -2},
        {"col_radius_scale": 0.0},
    ],
)
def test_invalid_config(kwargs) -> None:
    config = DenoiseConfig(**kwargs)
    with pytest.raises(InvalidParameterError):
        config.validate()
    with pytest.raises(InvalidParameterError):
        GuidedDestriper(config)


def test_reused_stats_describe_last_run_only() -> None:
    stats = PerformanceStats()
    denoise(np.random.rand(96, 40), stats=stats)
    stats.row_filter_time += 1000.0
    stats.total_time += 1000.0

    denoise(np.random.rand(24, 30), stats=stats)

    assert stats.image_height == 24
    assert stats.row_filter_calls == 24
    assert stats.col_filter_calls == 30
    assert stats.total_time < 1000.0
    assert stats.row_filter_time < 1000.0
    assert stats.total_time >= stats.row_filter_time + stats.col_filter_time
