"""Symmetric perspective projections from a field of view."""

from __future__ import annotations
import numpy as np

from ..core.conventions import Handedness, HandednessLike, NdcDepth, NdcDepthLike
from .frustum import build_frustum_matrix
from .utils import to_scalars


def build_perspective_matrix(
    fovy: float,
    aspect: float,
    near: float,
    far: float,
    handedness: HandednessLike = Handedness.LEFT,
    ndc: NdcDepthLike = NdcDepth.NEGATIVE_ONE_TO_ONE,
    dtype=np.float64
) -> np.ndarray:
    """
    Build a symmetric perspective matrix.

    The near-plane window is derived from the field of view and handed to
    build_frustum_matrix, so symmetric and off-axis frusta share one set of
    sign and depth conventions.

    Args:
        fovy: Vertical field of view in radians, in (0, pi)
        aspect: Width / height
        near, far: Positive distances to the clipping planes
        handedness: Handedness.LEFT or Handedness.RIGHT
        ndc: NDC depth range, [-1, 1] or [0, 1]
        dtype: Floating-point element type of the result

    Returns:
        4x4 projection matrix
    """
    fovy, aspect, near = to_scalars(dtype, fovy, aspect, near)
    half = np.dtype(dtype).type(0.5)
    with np.errstate(over="ignore", invalid="ignore"):
        half_top = near * np.tan(fovy * half)
        half_right = half_top * aspect
    return build_frustum_matrix(
        -half_right, half_right, -half_top, half_top, near, far,
        handedness=handedness, ndc=ndc, dtype=dtype,
    )


def build_perspective_fov_matrix(
    fov: float,
    width: float,
    height: float,
    near: float,
    far: float,
    handedness: HandednessLike = Handedness.LEFT,
    ndc: NdcDepthLike = NdcDepth.NEGATIVE_ONE_TO_ONE,
    dtype=np.float64
) -> np.ndarray:
    """
    Build a symmetric perspective matrix from viewport dimensions.

    Equivalent to build_perspective_matrix(fov, width / height, ...).

    Args:
        fov: Vertical field of view in radians
        width, height: Viewport size (any unit, only the ratio matters)
        near, far: Positive distances to the clipping planes
    """
    width, height = to_scalars(dtype, width, height)
    with np.errstate(divide="ignore", invalid="ignore"):
        aspect = width / height
    return build_perspective_matrix(
        fov, aspect, near, far, handedness=handedness, ndc=ndc, dtype=dtype
    )
