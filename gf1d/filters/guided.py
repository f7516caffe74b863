"""
One-dimensional guided filter (He et al., 2010) built on the box filter.

Within each window the output is modelled as ``q = a * I + b``; the per
window coefficients are averaged over all windows covering a pixel.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from gf1d.core.config import Axis, as_axis, check_eps
from gf1d.core.exceptions import ShapeMismatchError
from gf1d.filters.box import AxisLike, as_image, box_filter, check_window, window_count


def _check_pair(guide, src) -> Tuple[np.ndarray, np.ndarray]:
    guide_arr = as_image(guide, "guide")
    src_arr = as_image(src, "input")
    if guide_arr.shape != src_arr.shape:
        raise ShapeMismatchError(
            f"Guide shape {guide_arr.shape} does not match input shape {src_arr.shape}"
        )
    return guide_arr, src_arr


def linear_coefficients(
    guide,
    src,
    radius: int,
    eps: float,
    axis: AxisLike = Axis.ROW,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Per-window regression of ``src`` on ``guide``.

    Returns
    -------
    a, b, count
        Slope, intercept and the window count ``N`` used for averaging.
    """

    axis = as_axis(axis)
    I, p = _check_pair(guide, src)
    r = check_window(radius, I.shape[axis.array_axis], axis)
    eps = check_eps(eps)

    N = window_count(I.shape, r, axis)

    mean_I = box_filter(I, r, axis) / N
    mean_p = box_filter(p, r, axis) / N
    mean_Ip = box_filter(I * p, r, axis) / N
    cov_Ip = mean_Ip - mean_I * mean_p

    mean_II = box_filter(I * I, r, axis) / N
    var_I = mean_II - mean_I * mean_I

    a = cov_Ip / (var_I + eps)
    b = mean_p - a * mean_I
    return a, b, N


def guided_filter(
    guide,
    src,
    radius: int,
    eps: float,
    axis: AxisLike = Axis.ROW,
) -> np.ndarray:
    """
    Edge-preserving smoothing of ``src`` steered by ``guide`` along ``axis``.

    Parameters
    ----------
    guide : array_like
        Guidance image ``I``; may be ``src`` itself for self-guided smoothing.
    src : array_like
        Image ``p`` to filter, same shape as ``guide``.
    radius : int
        Window radius; the window holds ``2 * radius + 1`` samples.
    eps : float
        Regularisation (> 0). Small values keep edges, large values tend
        towards plain local averaging.
    """

    axis = as_axis(axis)
    a, b, N = linear_coefficients(guide, src, radius, eps, axis)
    I = as_image(guide, "guide")

    mean_a = box_filter(a, radius, axis) / N
    mean_b = box_filter(b, radius, axis) / N

    return mean_a * I + mean_b


def guided_filter_rows(guide, src, radius: int, eps: float) -> np.ndarray:
    """Guided filter applied independently to every row."""

    return guided_filter(guide, src, radius, eps, Axis.ROW)


def guided_filter_columns(guide, src, radius: int, eps: float) -> np.ndarray:
    """Guided filter applied independently to every column."""

    return guided_filter(guide, src, radius, eps, Axis.COLUMN)
