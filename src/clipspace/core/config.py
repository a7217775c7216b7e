"""Projection configuration."""

from dataclasses import dataclass

import numpy as np

from .conventions import Handedness, NdcDepth, resolve_handedness, resolve_ndc


@dataclass
class ProjectionConfig:
    """Conventions applied when a builder call leaves them unspecified."""

    handedness: Handedness = Handedness.LEFT
    ndc: NdcDepth = NdcDepth.NEGATIVE_ONE_TO_ONE
    dtype: type = np.float64

    def __post_init__(self):
        self.handedness = resolve_handedness(self.handedness)
        self.ndc = resolve_ndc(self.ndc)
        self.dtype = np.dtype(self.dtype).type
