"""Camera matrix utilities."""

from __future__ import annotations
from typing import Tuple
import numpy as np

from ..utils.debug import debug_print


def ensure_4x4_matrix(m, dtype=None) -> np.ndarray:
    """
    Convert input to 4x4 numpy array.

    Args:
        m: Input matrix (4x4 array or flat list of 16 floats, row-major)
        dtype: Target dtype (default: float64 unless m is already floating point)

    Returns:
        4x4 numpy array

    Raises:
        ValueError: If input cannot be reshaped to 4x4
    """
    M = np.asarray(m)
    if dtype is None:
        dtype = M.dtype if np.issubdtype(M.dtype, np.floating) else np.float64
    M = M.astype(dtype, copy=False)

    if M.shape == (16,):
        M = M.reshape(4, 4)

    if M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4 matrix or flat length-16 array, got shape {M.shape}"
        )

    return M


def invert_transform(m: np.ndarray) -> np.ndarray:
    """
    Compute inverse of 4x4 transformation matrix.

    A singular matrix has no inverse; the result is then all NaN so that
    callers see non-finite output instead of an exception.

    Args:
        m: 4x4 transformation matrix

    Returns:
        Inverted 4x4 matrix with the dtype of m
    """
    # linalg has no half-precision kernels
    work = m.astype(np.promote_types(m.dtype, np.float32), copy=False)
    try:
        inv = np.linalg.inv(work)
    except np.linalg.LinAlgError:
        debug_print("[invert_transform] singular matrix, returning NaN inverse")
        inv = np.full((4, 4), np.nan, dtype=work.dtype)
    return inv.astype(m.dtype, copy=False)


def to_scalars(dtype, *values) -> Tuple[np.floating, ...]:
    """Cast builder arguments to numpy scalars of the requested precision."""
    scalar_type = np.dtype(dtype).type
    return tuple(scalar_type(v) for v in values)
