"""
Column stripe measurements.
"""

from __future__ import annotations

import numpy as np

from gf1d.core.exceptions import ShapeMismatchError
from gf1d.filters.box import as_image


def column_mean_profile(image) -> np.ndarray:
    """Mean intensity of every column."""

    return as_image(image).mean(axis=0)


def stripe_residual(image, reference) -> float:
    """
    Standard deviation of the per-column mean deviation from ``reference``.

    Zero when ``image`` differs from ``reference`` by at most a global offset.
    """

    img = as_image(image)
    ref = as_image(reference, "reference")
    if img.shape != ref.shape:
        raise ShapeMismatchError(f"Shapes differ: {img.shape} vs {ref.shape}")
    return float(np.std(column_mean_profile(img) - column_mean_profile(ref)))
