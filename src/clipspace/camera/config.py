"""Projection configuration parser."""

from __future__ import annotations
from typing import Any, Dict, Optional, Union
import numpy as np
from omegaconf import DictConfig, OmegaConf

from ..core.config import ProjectionConfig
from .ortho import build_ortho_matrix, build_ortho_2d_matrix
from .frustum import build_frustum_matrix
from .perspective import build_perspective_matrix, build_perspective_fov_matrix

_BOX_KEYS = ("left", "right", "bottom", "top", "near", "far")

_CONVENTION_KEYS = ("handedness", "ndc")

# type -> (builder, required keys, convention keys the builder accepts)
_BUILDERS = {
    "ortho": (build_ortho_matrix, _BOX_KEYS, _CONVENTION_KEYS),
    "ortho_2d": (build_ortho_2d_matrix, ("left", "right", "bottom", "top"), ("ndc",)),
    "frustum": (build_frustum_matrix, _BOX_KEYS, _CONVENTION_KEYS),
    "perspective": (build_perspective_matrix, ("fovy", "aspect", "near", "far"), _CONVENTION_KEYS),
    "perspective_fov": (
        build_perspective_fov_matrix, ("fov", "width", "height", "near", "far"), _CONVENTION_KEYS
    ),
}


def load_projection_config(path: str) -> DictConfig:
    """Load a projection description from a YAML file."""
    return OmegaConf.load(path)


def make_projection_from_config(
    projection_cfg: Union[Dict[str, Any], DictConfig],
    defaults: Optional[ProjectionConfig] = None
) -> np.ndarray:
    """
    Build a projection matrix from a configuration dictionary.

    Args:
        projection_cfg: Dictionary (or OmegaConf node) with keys:
            Required:
                - type: ortho | ortho_2d | frustum | perspective | perspective_fov
                - the parameters of that builder, e.g. fovy/aspect/near/far
            Optional:
                - handedness: "lh" or "rh" (not accepted by ortho_2d)
                - ndc: "symmetric" ([-1, 1]) or "zo" ([0, 1])
                - dtype: numpy dtype name, e.g. "float32"
                - degrees: if true, fovy/fov are given in degrees
        defaults: Conventions used when handedness/ndc/dtype are omitted

    Returns:
        4x4 projection matrix

    Raises:
        ValueError: If the type is unknown, a required parameter is missing,
            ndc is a boolean, or a convention key does not apply to the type

    Notes:
        - Boolean ndc values are rejected because YAML reads a bare `no`
          as False, which would otherwise select [0, 1]

    Example:
        >>> cfg = {"type": "perspective", "fovy": 60.0, "degrees": True,
        ...        "aspect": 16 / 9, "near": 0.1, "far": 100.0, "handedness": "rh"}
        >>> proj = make_projection_from_config(cfg)
    """
    if isinstance(projection_cfg, DictConfig):
        projection_cfg = OmegaConf.to_container(projection_cfg, resolve=True)
    if defaults is None:
        defaults = ProjectionConfig()

    kind = str(projection_cfg.get("type", "perspective")).lower()
    if kind not in _BUILDERS:
        raise ValueError(
            f"Unknown projection type {kind!r}, expected one of {sorted(_BUILDERS)}"
        )
    builder, keys, convention_keys = _BUILDERS[kind]

    missing = [k for k in keys if k not in projection_cfg]
    if missing:
        raise ValueError(f"Projection type {kind!r} is missing parameters: {missing}")

    unsupported = [
        k for k in _CONVENTION_KEYS if k in projection_cfg and k not in convention_keys
    ]
    if unsupported:
        raise ValueError(f"Projection type {kind!r} does not accept: {unsupported}")

    if isinstance(projection_cfg.get("ndc"), bool):
        raise ValueError(
            f"ndc must be a name such as 'symmetric' or 'zo', got boolean "
            f"{projection_cfg['ndc']!r} (YAML reads a bare no/yes as a boolean)"
        )

    params = {k: float(projection_cfg[k]) for k in keys}
    if projection_cfg.get("degrees", False):
        for k in ("fovy", "fov"):
            if k in params:
                params[k] = float(np.radians(params[k]))

    conventions = ProjectionConfig(
        handedness=projection_cfg.get("handedness", defaults.handedness),
        ndc=projection_cfg.get("ndc", defaults.ndc),
        dtype=projection_cfg.get("dtype", defaults.dtype),
    )
    for k in convention_keys:
        params[k] = getattr(conventions, k)

    return builder(**params, dtype=conventions.dtype)
