"""
PyTorch implementation of the destriping pipeline.
"""

from gf1d.torch.pipeline import TorchGuidedDestriper, denoise_torch

__all__ = ["TorchGuidedDestriper", "denoise_torch"]
