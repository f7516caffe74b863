"""Synthetic test imagery and stripe metrics."""

from gf1d.utils.metrics import column_mean_profile, stripe_residual
from gf1d.utils.synthetic import add_column_stripes, make_smooth_scene

__all__ = [
    "make_smooth_scene",
    "add_column_stripes",
    "column_mean_profile",
    "stripe_residual",
]
