"""
Separation feature for separation3d.

Fences, walls and other thin barriers between land-use parcels. Heights
come from last returns only, excluding building and water returns, so
the estimate reflects the barrier rather than adjacent roofs or water.
"""

from ..models.classes import TopoClass
from ..models.sample import ElevationSample
from ..processing.elevation import admit_separation_sample
from .base import TopoFeature


class SeparationFeature(TopoFeature):
    """Hard, flat-topped separation feature."""

    def admit_sample(self, sample: ElevationSample) -> bool:
        return admit_separation_sample(sample)

    def classify(self) -> TopoClass:
        return TopoClass.SEPARATION

    def is_hard(self) -> bool:
        return True

    def get_mtl(self) -> str:
        return "usemtl Separation"
