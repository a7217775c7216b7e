"""Debug utilities."""

from __future__ import annotations
from typing import Tuple
import os

import numpy as np

DEBUG_ENV_VAR = "CLIPSPACE_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def get_array_stats(array: np.ndarray) -> Tuple[int, float, float]:
    """
    Summarize an array for debug output.

    Returns:
        (non-finite count, min, max) where min/max ignore non-finite entries
    """
    finite = np.isfinite(array)
    n_bad = int(array.size - np.count_nonzero(finite))
    if n_bad == array.size:
        return n_bad, float("nan"), float("nan")
    values = array[finite]
    return n_bad, float(values.min()), float(values.max())


def debug_matrix_info(name: str, array: np.ndarray):
    """Print shape, dtype and range of a matrix or point array."""
    if is_debug_enabled():
        n_bad, mn, mx = get_array_stats(np.asarray(array))
        print(f"[{name}] shape={tuple(np.shape(array))} dtype={np.asarray(array).dtype} "
              f"min={mn:.4f} max={mx:.4f} non_finite={n_bad}")
