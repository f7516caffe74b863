"""
Shared helpers for the torch-based gf1d implementation.
"""

from __future__ import annotations

from typing import Optional

import torch

from gf1d.core.exceptions import EmptyImageError, InvalidParameterError


def ensure_tensor(
    data,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    """
    Convert input data to a torch tensor on the requested device.
    """

    if isinstance(data, torch.Tensor):
        tensor = data.to(dtype=dtype)
        if device is not None:
            tensor = tensor.to(device)
        return tensor

    tensor = torch.as_tensor(data, dtype=dtype, device=device)
    return tensor


def check_image_tensor(img: torch.Tensor, name: str = "image") -> torch.Tensor:
    """
    Reject anything that is not a non-empty 2-D tensor.
    """

    if img.dim() != 2:
        raise InvalidParameterError(f"Expected a 2-D {name}, got shape {tuple(img.shape)}")
    if img.shape[0] == 0 or img.shape[1] == 0:
        raise EmptyImageError(f"{name} has no pixels: shape {tuple(img.shape)}")
    return img
