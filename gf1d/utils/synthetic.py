"""
Synthetic grayscale scenes with column stripe noise.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from scipy.ndimage import gaussian_filter

from gf1d.core.exceptions import EmptyImageError, InvalidParameterError
from gf1d.filters.box import as_image


def make_smooth_scene(
    shape: Tuple[int, int],
    smoothness: float = 12.0,
    seed: Optional[int] = None,
    value_range: Tuple[float, float] = (0.3, 0.7),
) -> np.ndarray:
    """
    Low-frequency random scene rescaled to ``value_range``.
    """

    rows, cols = shape
    if rows <= 0 or cols <= 0:
        raise EmptyImageError(f"Scene shape must be positive, got {shape}")
    if smoothness <= 0:
        raise InvalidParameterError(f"smoothness must be > 0, got {smoothness}")

    rng = np.random.default_rng(seed)
    scene = gaussian_filter(rng.random((rows, cols)), sigma=smoothness, mode="reflect")

    low, high = value_range
    span = float(scene.max() - scene.min())
    if span == 0.0:
        return np.full((rows, cols), 0.5 * (low + high))
    return low + (scene - scene.min()) / span * (high - low)


def add_column_stripes(
    image,
    amplitude: float = 0.1,
    seed: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Shift every column by a constant drawn from N(0, amplitude^2).

    Returns
    -------
    striped, offsets
        The noisy image and the per-column offsets that were added.
    """

    img = as_image(image)
    rng = np.random.default_rng(seed)
    offsets = rng.normal(0.0, amplitude, size=img.shape[1])
    return img + offsets[np.newaxis, :], offsets
