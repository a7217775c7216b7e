"""Orthographic projection matrix construction."""

from __future__ import annotations
import numpy as np

from ..core.conventions import (
    Handedness,
    HandednessLike,
    NdcDepth,
    NdcDepthLike,
    resolve_handedness,
    resolve_ndc,
)
from .utils import to_scalars


def build_ortho_matrix(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    handedness: HandednessLike = Handedness.LEFT,
    ndc: NdcDepthLike = NdcDepth.NEGATIVE_ONE_TO_ONE,
    dtype=np.float64
) -> np.ndarray:
    """
    Build a parallel projection matrix for an axis-aligned view box.

    The box [left, right] x [bottom, top] x [near, far] is mapped linearly onto
    the canonical clip cube. Eye-space depth is +z for a left-handed camera
    and -z for a right-handed one; near lands on the low end of the NDC depth
    range and far on the high end.

    Args:
        left, right: Lateral bounds
        bottom, top: Vertical bounds
        near, far: Depth bounds (distances along the view direction)
        handedness: Handedness.LEFT or Handedness.RIGHT
        ndc: NDC depth range, [-1, 1] or [0, 1]
        dtype: Floating-point element type of the result

    Returns:
        4x4 projection matrix (row-major, column-vector convention)

    Notes:
        - Left- and right-handed results differ only in M[2, 2]
        - Equal bounds are not rejected and produce inf/NaN entries
    """
    handedness = resolve_handedness(handedness)
    ndc = resolve_ndc(ndc)
    l, r, b, t, n, f = to_scalars(dtype, left, right, bottom, top, near, far)
    one, two = to_scalars(dtype, 1.0, 2.0)
    s = np.dtype(dtype).type(handedness.z_sign)

    M = np.zeros((4, 4), dtype=dtype)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        M[0, 0] = two / (r - l)
        M[1, 1] = two / (t - b)
        M[0, 3] = -(r + l) / (r - l)
        M[1, 3] = -(t + b) / (t - b)

        if ndc.is_symmetric:
            M[2, 2] = s * two / (f - n)
            M[2, 3] = -(f + n) / (f - n)
        else:
            M[2, 2] = s * one / (f - n)
            M[2, 3] = -n / (f - n)

    M[3, 3] = one
    return M


def build_ortho_2d_matrix(
    left: float,
    right: float,
    bottom: float,
    top: float,
    ndc: NdcDepthLike = NdcDepth.NEGATIVE_ONE_TO_ONE,
    dtype=np.float64
) -> np.ndarray:
    """
    Build a matrix for projecting two-dimensional coordinates onto the screen.

    Same as a right-handed [-1, 1] ortho matrix with near=-1 and far=1: z is
    negated and otherwise passed through.

    Notes:
        - ndc is validated but has no effect; 2D geometry carries no depth
          range, so the z row is [0, 0, -1, 0] for both conventions
    """
    resolve_ndc(ndc)
    return build_ortho_matrix(
        left, right, bottom, top, -1.0, 1.0,
        handedness=Handedness.RIGHT,
        ndc=NdcDepth.NEGATIVE_ONE_TO_ONE,
        dtype=dtype,
    )
