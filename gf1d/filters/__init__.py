"""Box and guided filters along a single image axis."""

from gf1d.filters.box import box_filter, box_filter_columns, box_filter_rows, window_count
from gf1d.filters.guided import (
    guided_filter,
    guided_filter_columns,
    guided_filter_rows,
    linear_coefficients,
)

__all__ = [
    "box_filter",
    "box_filter_rows",
    "box_filter_columns",
    "window_count",
    "guided_filter",
    "guided_filter_rows",
    "guided_filter_columns",
    "linear_coefficients",
]
