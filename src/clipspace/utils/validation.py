"""Input shape validation.

Only structural problems are rejected here. Numeric degeneracy (equal
bounds, zero aspect, singular matrices) is left to propagate as inf/NaN.
"""

from __future__ import annotations
from typing import Tuple
import numpy as np

from ..core.conventions import Viewport


def validate_points(points: np.ndarray, name: str = "points") -> Tuple[np.ndarray, bool]:
    """
    Validate a single 3-vector or an (N, 3) batch.

    Args:
        points: Point array
        name: Argument name used in the error message

    Returns:
        (points as (N, 3), True if the input was a single vector)

    Raises:
        ValueError: If the array is not (3,) or (N, 3)
    """
    if points.ndim == 1 and points.shape[0] == 3:
        return points.reshape(1, 3), True
    if points.ndim == 2 and points.shape[1] == 3:
        return points, False
    raise ValueError(f"{name} must be (3,) or (N, 3), got {points.shape}")


def validate_viewport(viewport) -> Viewport:
    """
    Convert a length-4 sequence (x, y, width, height) into a Viewport.

    Raises:
        ValueError: If the viewport does not have exactly four components
    """
    if isinstance(viewport, Viewport):
        return viewport
    values = np.asarray(viewport, dtype=np.float64).reshape(-1)
    if values.shape != (4,):
        raise ValueError(
            f"viewport must have 4 components (x, y, width, height), got shape {values.shape}"
        )
    return Viewport(*(float(v) for v in values))
