"""
Utility functions for separation3d.
"""

from .math_utils import (
    orientation,
    segments_intersect,
    point_to_segment_distance,
)
from .polygon_utils import (
    point_in_polygon,
    polygon_signed_area,
    polygon_centroid,
    ensure_ccw,
    is_simple_ring,
    distance_to_ring,
)
from .triangulation import (
    triangulate_polygon,
    validate_triangulation,
    TriangulationError,
)

__all__ = [
    'orientation',
    'segments_intersect',
    'point_to_segment_distance',
    'point_in_polygon',
    'polygon_signed_area',
    'polygon_centroid',
    'ensure_ccw',
    'is_simple_ring',
    'distance_to_ring',
    'triangulate_polygon',
    'validate_triangulation',
    'TriangulationError',
]
