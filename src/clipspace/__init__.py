"""
clipspace - Projection matrices and window-space mapping

Builds the classic fixed-function view-volume matrices with explicit
handedness and NDC depth convention, and maps points between object space
and window space.

Components:
    - Core: Handedness / NDC depth conventions, viewport, config
    - Camera: Orthographic, frustum and perspective builders
    - Mapping: project / unproject
    - Utils: Conversion, validation, debug output

Example:
    >>> import numpy as np
    >>> from clipspace import build_perspective_matrix, project_points, unproject_points
    >>>
    >>> proj = build_perspective_matrix(np.radians(60.0), 16 / 9, 0.1, 100.0,
    ...                                 handedness="rh", ndc="zo")
    >>> model = np.eye(4)
    >>> viewport = (0, 0, 1280, 720)
    >>>
    >>> win = project_points([0.0, 0.0, -5.0], model, proj, viewport, ndc="zo")
    >>> obj = unproject_points(win, model, proj, viewport, ndc="zo")
"""

__version__ = "1.0.0"

# Core
from .core import (
    Handedness,
    NdcDepth,
    Viewport,
    ProjectionConfig,
)

# Camera
from .camera import (
    build_ortho_matrix,
    build_ortho_2d_matrix,
    build_frustum_matrix,
    build_perspective_matrix,
    build_perspective_fov_matrix,
    make_projection_from_config,
    load_projection_config,
    ensure_4x4_matrix,
    invert_transform,
)

# Mapping
from .mapping import (
    project_points,
    unproject_points,
)

# Utils
from .utils import (
    to_torch_tensor,
    to_numpy_array,
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",

    # Core
    "Handedness",
    "NdcDepth",
    "Viewport",
    "ProjectionConfig",

    # Camera
    "build_ortho_matrix",
    "build_ortho_2d_matrix",
    "build_frustum_matrix",
    "build_perspective_matrix",
    "build_perspective_fov_matrix",
    "make_projection_from_config",
    "load_projection_config",
    "ensure_4x4_matrix",
    "invert_transform",

    # Mapping
    "project_points",
    "unproject_points",

    # Utils
    "to_torch_tensor",
    "to_numpy_array",
    "debug_print",
    "is_debug_enabled",
]
