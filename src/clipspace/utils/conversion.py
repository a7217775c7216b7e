"""Type conversion utilities."""

from __future__ import annotations
from typing import Union
import numpy as np


def to_torch_tensor(
    x: Union[np.ndarray, "torch.Tensor", list],
    device: str = "cpu",
    dtype: "torch.dtype" = None,
    requires_grad: bool = False
):
    """
    Convert a matrix or point array to a PyTorch tensor.

    Args:
        x: Input (numpy array, torch tensor, or list)
        device: Target device
        dtype: Target dtype (default: keep the numpy precision)
        requires_grad: Whether to enable gradient computation

    Returns:
        PyTorch tensor on specified device
    """
    import torch

    if isinstance(x, torch.Tensor):
        tensor = x if dtype is None else x.to(dtype)
    else:
        tensor = torch.as_tensor(np.asarray(x), dtype=dtype)

    if device and tensor.device != torch.device(device):
        tensor = tensor.to(device)

    if requires_grad and not tensor.requires_grad:
        tensor.requires_grad_(True)

    return tensor


def to_numpy_array(
    x: Union[np.ndarray, "torch.Tensor", list],
    dtype: np.dtype = None
) -> np.ndarray:
    """
    Convert input to NumPy array.

    Args:
        x: Input (numpy array, torch tensor, or nested list)
        dtype: Target dtype (default: float64 unless x is already floating point)

    Returns:
        NumPy array
    """
    if hasattr(x, 'detach'):  # torch.Tensor
        x = x.detach().cpu().numpy()
    arr = np.asarray(x)
    if dtype is None:
        dtype = arr.dtype if np.issubdtype(arr.dtype, np.floating) else np.float64
    return arr.astype(dtype, copy=False)
