"""Object space <-> window space mapping."""

from __future__ import annotations
from typing import Sequence, Union
import numpy as np

from ..core.conventions import NdcDepth, NdcDepthLike, Viewport, resolve_ndc
from ..camera.utils import ensure_4x4_matrix, invert_transform
from ..utils.conversion import to_numpy_array
from ..utils.debug import debug_matrix_info
from ..utils.validation import validate_points, validate_viewport

ViewportLike = Union[Viewport, Sequence[float], np.ndarray]


def _prepare(points, model, proj, viewport, name: str):
    model = ensure_4x4_matrix(to_numpy_array(model))
    proj = ensure_4x4_matrix(to_numpy_array(proj))
    dtype = np.result_type(model.dtype, proj.dtype)
    pts, single = validate_points(to_numpy_array(points, dtype=dtype), name)
    return pts, single, proj @ model, validate_viewport(viewport), dtype


def _homogeneous(pts: np.ndarray) -> np.ndarray:
    return np.concatenate([pts, np.ones((pts.shape[0], 1), dtype=pts.dtype)], axis=1)


def project_points(
    obj,
    model,
    proj,
    viewport: ViewportLike,
    ndc: NdcDepthLike = NdcDepth.NEGATIVE_ONE_TO_ONE
) -> np.ndarray:
    """
    Map object coordinates to window coordinates.

    Args:
        obj: (3,) point or (N, 3) points in object space
        model: (4, 4) model-view matrix
        proj: (4, 4) projection matrix
        viewport: (x, y, width, height) in pixels
        ndc: NDC depth range the projection matrix was built for

    Returns:
        Window coordinates with the same shape as obj. x/y are in pixels
        (y grows upward, as in GL window space); z is always in [0, 1].

    Notes:
        - Points with clip.w == 0 (on the eye plane) give inf/NaN
        - The ndc argument is trusted; a mismatch with proj is not detected
    """
    ndc = resolve_ndc(ndc)
    pts, single, mvp, vp, dtype = _prepare(obj, model, proj, viewport, "obj")
    half = dtype.type(0.5)

    clip = _homogeneous(pts) @ mvp.T

    with np.errstate(divide="ignore", invalid="ignore"):
        # Perspective division
        ndc_xyz = clip[:, :3] / clip[:, 3:4]

    win = np.empty_like(ndc_xyz)
    win[:, 0] = (ndc_xyz[:, 0] * half + half) * vp.width + vp.x
    win[:, 1] = (ndc_xyz[:, 1] * half + half) * vp.height + vp.y
    win[:, 2] = ndc_xyz[:, 2] * half + half if ndc.is_symmetric else ndc_xyz[:, 2]

    if not np.isfinite(win).all():
        debug_matrix_info("project_points: non-finite window coords", win)

    return win[0] if single else win


def unproject_points(
    win,
    model,
    proj,
    viewport: ViewportLike,
    ndc: NdcDepthLike = NdcDepth.NEGATIVE_ONE_TO_ONE
) -> np.ndarray:
    """
    Map window coordinates back to object coordinates.

    Inverse of project_points for the same model, proj, viewport and ndc.

    Args:
        win: (3,) or (N, 3) window coordinates, z in [0, 1]
        model: (4, 4) model-view matrix
        proj: (4, 4) projection matrix
        viewport: (x, y, width, height) in pixels
        ndc: NDC depth range the projection matrix was built for

    Returns:
        Object-space points with the same shape as win. A singular
        proj @ model yields NaN components.
    """
    ndc = resolve_ndc(ndc)
    pts, single, mvp, vp, dtype = _prepare(win, model, proj, viewport, "win")
    one, two = dtype.type(1.0), dtype.type(2.0)

    inverse = invert_transform(mvp)

    ndc_xyz = np.empty_like(pts)
    with np.errstate(divide="ignore", invalid="ignore"):
        ndc_xyz[:, 0] = (pts[:, 0] - vp.x) / vp.width * two - one
        ndc_xyz[:, 1] = (pts[:, 1] - vp.y) / vp.height * two - one
    ndc_xyz[:, 2] = pts[:, 2] * two - one if ndc.is_symmetric else pts[:, 2]

    obj = _homogeneous(ndc_xyz) @ inverse.T

    with np.errstate(divide="ignore", invalid="ignore"):
        out = obj[:, :3] / obj[:, 3:4]

    if not np.isfinite(out).all():
        debug_matrix_info("unproject_points: non-finite object coords", out)

    return out[0] if single else out
