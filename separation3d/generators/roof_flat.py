"""
Flat roof generator for separation3d.

Generates the horizontal cap of a lifted feature by triangulating the
footprint ring. Falls back to a centroid fan on triangulation failure.
"""

from typing import List, Sequence
import logging

from ..models.geometry import Point2D, Triangle3D
from ..utils.polygon_utils import polygon_centroid
from ..utils.triangulation import triangulate_polygon, TriangulationError

logger = logging.getLogger(__name__)


def generate_flat_roof(
    ring: Sequence[Point2D],
    roof_z: float,
    feature_id: str = ""
) -> List[Triangle3D]:
    """
    Generate flat roof triangles for a footprint.

    Every vertex is placed at roof_z. Triangles are wound CCW seen
    from above, so their normals point up.

    Args:
        ring: Footprint vertices in CCW order (open ring)
        roof_z: Roof elevation
        feature_id: Feature identifier, for log messages only

    Returns:
        List of roof triangles
    """
    try:
        triangles = triangulate_polygon(ring)
    except TriangulationError as e:
        logger.warning(
            f"Feature {feature_id}: Triangulation failed: {e}. "
            f"Falling back to centroid fan."
        )
        return _generate_fan_roof(ring, roof_z)

    return [
        Triangle3D(
            ring[a].at_z(roof_z),
            ring[b].at_z(roof_z),
            ring[c].at_z(roof_z)
        )
        for a, b, c in triangles
    ]


def _generate_fan_roof(ring: Sequence[Point2D], roof_z: float) -> List[Triangle3D]:
    """
    Generate fan triangulation from centroid (fallback).

    This works for convex and star-shaped polygons and is a last resort
    for when ear clipping fails.
    """
    n = len(ring)
    if n < 3:
        return []

    center = polygon_centroid(ring).at_z(roof_z)

    return [
        Triangle3D(center, ring[i].at_z(roof_z), ring[(i + 1) % n].at_z(roof_z))
        for i in range(n)
    ]
