"""Shared conventions and configuration."""

from .conventions import (
    Handedness,
    NdcDepth,
    Viewport,
    resolve_handedness,
    resolve_ndc,
)
from .config import ProjectionConfig

__all__ = [
    "Handedness",
    "NdcDepth",
    "Viewport",
    "resolve_handedness",
    "resolve_ndc",
    "ProjectionConfig",
]
