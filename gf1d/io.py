"""
Image I/O helpers (grayscale in, [0, 1] float64 out).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

import cv2
import numpy as np

PathLike = Union[str, os.PathLike]


def load_grayscale(path: PathLike) -> np.ndarray:
    """Load an image as grayscale float64 in [0, 1]. Raises on failure."""
    img = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE | cv2.IMREAD_ANYDEPTH)
    if img is None:
        raise FileNotFoundError(f"Could not read image: {path}")
    scale = 65535.0 if img.dtype == np.uint16 else 255.0
    return img.astype(np.float64) / scale


def to_uint8(image: np.ndarray) -> np.ndarray:
    """Clip to [0, 1] and scale to 8-bit."""
    return np.round(np.clip(image, 0.0, 1.0) * 255.0).astype(np.uint8)


def save_image(path: PathLike, image: np.ndarray) -> None:
    parent = Path(path).parent
    parent.mkdir(parents=True, exist_ok=True)
    try:
        written = cv2.imwrite(str(path), to_uint8(image))
    except cv2.error as exc:
        raise OSError(f"Could not write image: {path}") from exc
    if not written:
        raise OSError(f"Could not write image: {path}")
