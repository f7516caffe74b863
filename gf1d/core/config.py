"""
Configuration primitives for gf1d.

Defines the filtering direction enum and a dataclass collecting the
parameters of the two-pass destriping pipeline.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from gf1d.core.exceptions import InvalidParameterError


class Axis(Enum):
    """Direction along which a 1D filter slides."""

    ROW = "row"        # along each row (window spans neighbouring columns)
    COLUMN = "column"  # down each column (window spans neighbouring rows)

    @property
    def array_axis(self) -> int:
        """Index of the array dimension the window slides over."""

        return 1 if self is Axis.ROW else 0


def as_axis(axis) -> Axis:
    """Coerce an ``Axis`` or its string value, rejecting anything else."""

    try:
        return Axis(axis)
    except ValueError as exc:
        raise InvalidParameterError(
            f"axis must be one of {[a.value for a in Axis]}, got {axis!r}"
        ) from exc


# Column window heuristic: a quarter of the image height, halved.
COL_RADIUS_SCALE = 0.25


def derive_col_radius(height: int, scale: float = COL_RADIUS_SCALE) -> int:
    """
    Column-pass radius tied to the image height.

    ``round`` is half-to-even, matching the reference rounding for the
    exact ties that occur when ``height`` is a multiple of 8.
    """

    return max(int(round(0.5 * (height * scale - 1))), 0)


def check_radius(radius: int, name: str = "radius") -> int:
    if isinstance(radius, bool) or not isinstance(radius, (int, np.integer)):
        raise InvalidParameterError(f"{name} must be an integer, got {radius!r}")
    if radius < 0:
        raise InvalidParameterError(f"{name} must be >= 0, got {radius}")
    return int(radius)


def check_eps(eps: float, name: str = "eps") -> float:
    try:
        value = float(eps)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a real number, got {eps!r}") from exc
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameterError(f"{name} must be finite and > 0, got {eps!r}")
    return value


@dataclass
class DenoiseConfig:
    """
    Parameters for the row-smoothing / column-destriping pipeline.

    ``col_radius`` is derived from the image height when left as ``None``.
    """

    # Row pass (self-guided smoothing)
    row_radius: int = 4
    row_eps: float = 0.16

    # Column pass (cross-guided destriping)
    col_eps: float = 0.04
    col_radius: Optional[int] = None
    col_radius_scale: float = COL_RADIUS_SCALE

    def validate(self) -> None:
        """Validate configuration parameters."""

        check_radius(self.row_radius, "row_radius")
        check_eps(self.row_eps, "row_eps")
        check_eps(self.col_eps, "col_eps")

        if self.col_radius is not None:
            check_radius(self.col_radius, "col_radius")

        if not (0.0 < self.col_radius_scale <= 1.0):
            raise InvalidParameterError(
                f"col_radius_scale {self.col_radius_scale} out of range (0, 1]"
            )

    def resolve_col_radius(self, height: int) -> int:
        """Return the column-pass radius for an image of ``height`` rows."""

        if self.col_radius is not None:
            return int(self.col_radius)
        return derive_col_radius(height, self.col_radius_scale)
