"""1D guided-filter destriping (gf1d).

Edge-preserving removal of column stripe noise from grayscale images using
two orthogonal one-dimensional guided-filter passes.
"""

from gf1d.core.config import Axis, DenoiseConfig
from gf1d.core.exceptions import (
    EmptyImageError,
    GuidedFilterError,
    InvalidParameterError,
    ShapeMismatchError,
)
from gf1d.core.pipeline import GuidedDestriper, denoise
from gf1d.filters import (
    box_filter,
    box_filter_columns,
    box_filter_rows,
    guided_filter,
    guided_filter_columns,
    guided_filter_rows,
)
from gf1d.instrumentation import PerformanceStats

__all__ = [
    "Axis",
    "DenoiseConfig",
    "GuidedDestriper",
    "PerformanceStats",
    "denoise",
    "box_filter",
    "box_filter_rows",
    "box_filter_columns",
    "guided_filter",
    "guided_filter_rows",
    "guided_filter_columns",
    "GuidedFilterError",
    "ShapeMismatchError",
    "InvalidParameterError",
    "EmptyImageError",
]

try:  # Optional PyTorch acceleration
    from gf1d.torch.pipeline import TorchGuidedDestriper, denoise_torch  # type: ignore

    __all__.extend(["TorchGuidedDestriper", "denoise_torch"])
except ImportError:  # pragma: no cover - torch not installed
    TorchGuidedDestriper = None  # type: ignore
    denoise_torch = None  # type: ignore

__version__ = "1.0.0"
