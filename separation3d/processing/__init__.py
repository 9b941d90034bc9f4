"""
Processing modules for separation3d.

Contains footprint validation, elevation estimation and spatial indexing.
"""

from .footprint import normalize_footprint, ConstructionError
from .elevation import (
    ElevationEstimator,
    admit_separation_sample,
    percentile_height,
    NoSamplesError,
    FeatureStateError,
)
from .spatial_index import SpatialIndex, GridSpatialIndex

__all__ = [
    'normalize_footprint',
    'ConstructionError',
    'ElevationEstimator',
    'admit_separation_sample',
    'percentile_height',
    'NoSamplesError',
    'FeatureStateError',
    'SpatialIndex',
    'GridSpatialIndex',
]
