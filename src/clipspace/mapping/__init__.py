"""Coordinate mapping between object and window space."""

from .project import project_points, unproject_points

__all__ = [
    "project_points",
    "unproject_points",
]
