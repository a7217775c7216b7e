"""General (possibly off-axis) perspective frustum construction."""

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


def build_frustum_matrix(
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
    Build a perspective projection matrix from six clipping-plane bounds.

    left/right/bottom/top are measured on the near plane, so the frustum
    may be asymmetric. All other perspective builders delegate here.

    Args:
        left, right, bottom, top: Near-plane window bounds
        near, far: Positive distances to the clipping planes
        handedness: Handedness.LEFT (looks down +Z) or Handedness.RIGHT (-Z)
        ndc: NDC depth range, [-1, 1] or [0, 1]
        dtype: Floating-point element type of the result

    Returns:
        4x4 projection matrix (row-major, column-vector convention)

    Notes:
        - clip.w = z_eye for LH and -z_eye for RH
        - Depth encoding for [-1, 1]: z_ndc = ((f+n)*d - 2*f*n) / ((f-n)*d),
          with d the distance along the view direction
        - Depth encoding for [0, 1]:  z_ndc = (f*d - f*n) / ((f-n)*d)
    """
    handedness = resolve_handedness(handedness)
    ndc = resolve_ndc(ndc)
    l, r, b, t, n, f = to_scalars(dtype, left, right, bottom, top, near, far)
    two, = to_scalars(dtype, 2.0)
    s = np.dtype(dtype).type(handedness.z_sign)

    M = np.zeros((4, 4), dtype=dtype)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        # Scale to NDC
        M[0, 0] = two * n / (r - l)
        M[1, 1] = two * n / (t - b)

        # Off-axis shift, scaled by z so it survives the divide
        M[0, 2] = -s * (r + l) / (r - l)
        M[1, 2] = -s * (t + b) / (t - b)

        if ndc.is_symmetric:
            M[2, 2] = s * (f + n) / (f - n)
            M[2, 3] = -(two * f * n) / (f - n)
        else:
            M[2, 2] = s * f / (f - n)
            M[2, 3] = -(f * n) / (f - n)

    # Perspective division
    M[3, 2] = s
    return M
