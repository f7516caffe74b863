"""
Torch analogues of the box and guided filters.

Same window arithmetic as ``gf1d.filters``; all rows (or columns) of the
tensor are filtered at once.
"""

from __future__ import annotations

import torch

from gf1d.core.config import Axis, as_axis, check_eps
from gf1d.core.exceptions import ShapeMismatchError
from gf1d.filters.box import AxisLike, check_window
from gf1d.torch.common import check_image_tensor


def box_filter(img: torch.Tensor, radius: int, axis: AxisLike = Axis.ROW) -> torch.Tensor:
    """
    Clamped sliding-window sum along ``axis`` of a 2-D tensor.
    """

    axis = as_axis(axis)
    check_image_tensor(img)
    dim = axis.array_axis
    n = img.shape[dim]
    r = check_window(radius, n, axis)

    cum = torch.cumsum(img.movedim(dim, -1), dim=-1)
    dst = torch.empty_like(cum)

    dst[:, : r + 1] = cum[:, r : 2 * r + 1]
    dst[:, r + 1 : n - r] = cum[:, 2 * r + 1 : n] - cum[:, : n - 2 * r - 1]
    if r > 0:
        dst[:, n - r :] = cum[:, n - 1 : n] - cum[:, n - 2 * r - 1 : n - r - 1]

    return dst.movedim(-1, dim)


def guided_filter(
    guide: torch.Tensor,
    src: torch.Tensor,
    radius: int,
    eps: float,
    axis: AxisLike = Axis.ROW,
) -> torch.Tensor:
    """
    Guided filter of ``src`` steered by ``guide`` along ``axis``.
    """

    axis = as_axis(axis)
    I = check_image_tensor(guide, "guide")
    p = check_image_tensor(src, "input")
    if I.shape != p.shape:
        raise ShapeMismatchError(
            f"Guide shape {tuple(I.shape)} does not match input shape {tuple(p.shape)}"
        )
    r = check_window(radius, I.shape[axis.array_axis], axis)
    eps = check_eps(eps)

    N = box_filter(torch.ones_like(I), r, axis)

    mean_I = box_filter(I, r, axis) / N
    mean_p = box_filter(p, r, axis) / N
    cov_Ip = box_filter(I * p, r, axis) / N - mean_I * mean_p
    var_I = box_filter(I * I, r, axis) / N - mean_I * mean_I

    a = cov_Ip / (var_I + eps)
    b = mean_p - a * mean_I

    mean_a = box_filter(a, r, axis) / N
    mean_b = box_filter(b, r, axis) / N
    return mean_a * I + mean_b
