"""Coordinate conventions shared by the builders and the mappers."""

from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Union


class Handedness(str, Enum):
    """Eye-space handedness baked into the z row of a projection matrix."""

    LEFT = "lh"
    RIGHT = "rh"

    @property
    def z_sign(self) -> float:
        """+1 when the camera looks down +Z (LH), -1 when it looks down -Z (RH)."""
        return 1.0 if self is Handedness.LEFT else -1.0


class NdcDepth(str, Enum):
    """
    Depth range of normalized device coordinates.

    NEGATIVE_ONE_TO_ONE is the OpenGL convention, ZERO_TO_ONE the one used by
    Direct3D, Vulkan and Metal.
    """

    NEGATIVE_ONE_TO_ONE = "symmetric"
    ZERO_TO_ONE = "zo"

    @property
    def is_symmetric(self) -> bool:
        return self is NdcDepth.NEGATIVE_ONE_TO_ONE


class Viewport(NamedTuple):
    """Window-space rectangle NDC x/y are mapped into."""

    x: float
    y: float
    width: float
    height: float


_HANDEDNESS_ALIASES = {
    "lh": Handedness.LEFT,
    "left": Handedness.LEFT,
    "left_handed": Handedness.LEFT,
    "rh": Handedness.RIGHT,
    "right": Handedness.RIGHT,
    "right_handed": Handedness.RIGHT,
}

_NDC_ALIASES = {
    "gl": NdcDepth.NEGATIVE_ONE_TO_ONE,
    "opengl": NdcDepth.NEGATIVE_ONE_TO_ONE,
    "symmetric": NdcDepth.NEGATIVE_ONE_TO_ONE,
    "negative_one_to_one": NdcDepth.NEGATIVE_ONE_TO_ONE,
    "zo": NdcDepth.ZERO_TO_ONE,
    "zero_to_one": NdcDepth.ZERO_TO_ONE,
    "zero_based": NdcDepth.ZERO_TO_ONE,
}

HandednessLike = Union[Handedness, str]
NdcDepthLike = Union[NdcDepth, str, bool]


def resolve_handedness(value: HandednessLike) -> Handedness:
    """
    Normalize a handedness selector.

    Args:
        value: Handedness member or one of "lh", "rh", "left", "right"

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(value, Handedness):
        return value
    key = str(value).strip().lower()
    if key not in _HANDEDNESS_ALIASES:
        raise ValueError(
            f"Unknown handedness {value!r}, expected one of {sorted(_HANDEDNESS_ALIASES)}"
        )
    return _HANDEDNESS_ALIASES[key]


def resolve_ndc(value: NdcDepthLike) -> NdcDepth:
    """
    Normalize an NDC depth selector.

    Booleans follow the classic `oglNdc` flag: True selects [-1, 1],
    False selects [0, 1].

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(value, NdcDepth):
        return value
    if isinstance(value, bool):
        return NdcDepth.NEGATIVE_ONE_TO_ONE if value else NdcDepth.ZERO_TO_ONE
    key = str(value).strip().lower()
    if key not in _NDC_ALIASES:
        raise ValueError(
            f"Unknown NDC depth convention {value!r}, expected one of {sorted(_NDC_ALIASES)}"
        )
    return _NDC_ALIASES[key]
