"""
Tests for synthetic scenes and stripe metrics.
"""

from __future__ import annotations

import numpy as np
import pytest

from gf1d import EmptyImageError, ShapeMismatchError
from gf1d.utils import add_column_stripes, column_mean_profile, make_smooth_scene, stripe_residual


def test_smooth_scene_range_and_seed() -> None:
    scene = make_smooth_scene((32, 40), seed=3)
    assert scene.shape == (32, 40)
    assert np.isclose(scene.min(), 0.3)
    assert np.isclose(scene.max(), 0.7)
    np.testing.assert_array_equal(scene, make_smooth_scene((32, 40), seed=3))


def test_smooth_scene_rejects_empty_shape() -> None:
    with pytest.raises(EmptyImageError):
        make_smooth_scene((0, 10))


def test_stripes_are_column_constant() -> None:
    clean = np.zeros((10, 6))
    striped, offsets = add_column_stripes(clean, amplitude=0.2, seed=0)
    assert offsets.shape == (6,)
    np.testing.assert_allclose(striped - clean, np.tile(offsets, (10, 1)))
    np.testing.assert_allclose(column_mean_profile(striped), offsets)


def test_stripe_residual_ignores_global_offset() -> None:
    ref = np.random.default_rng(1).random((8, 12))
    assert stripe_residual(ref + 0.25, ref) == pytest.approx(0.0, abs=1e-12)


def test_stripe_residual_equals_offset_spread() -> None:
    ref = np.zeros((5, 20))
    striped, offsets = add_column_stripes(ref, seed=2)
    assert stripe_residual(striped, ref) == pytest.approx(float(np.std(offsets)))


def test_stripe_residual_shape_mismatch() -> None:
    with pytest.raises(ShapeMismatchError):
        stripe_residual(np.ones((3, 3)), np.ones((3, 4)))
