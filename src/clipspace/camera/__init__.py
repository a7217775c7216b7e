"""Projection matrix builders."""

from .utils import (
    ensure_4x4_matrix,
    invert_transform,
)
from .ortho import build_ortho_matrix, build_ortho_2d_matrix
from .frustum import build_frustum_matrix
from .perspective import build_perspective_matrix, build_perspective_fov_matrix
from .config import make_projection_from_config, load_projection_config

__all__ = [
    "ensure_4x4_matrix",
    "invert_transform",
    "build_ortho_matrix",
    "build_ortho_2d_matrix",
    "build_frustum_matrix",
    "build_perspective_matrix",
    "build_perspective_fov_matrix",
    "make_projection_from_config",
    "load_projection_config",
]
