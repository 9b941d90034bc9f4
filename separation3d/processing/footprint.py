"""
Footprint processing for separation3d.

Validates and normalizes raw 2D rings into Footprint instances.
Degenerate input is rejected here, at feature construction, so the
surface builder never sees a ring it cannot extrude.
"""

from typing import Iterable, Sequence, Tuple, Union
import logging

from ..config import DEGENERATE_AREA_EPSILON
from ..models.geometry import Point2D, Footprint
from ..utils.polygon_utils import (
    ensure_ccw,
    is_simple_ring,
    polygon_signed_area,
    remove_consecutive_duplicates,
    strip_closing_vertex,
)

logger = logging.getLogger(__name__)

PointLike = Union[Point2D, Tuple[float, float], Sequence[float]]


class ConstructionError(ValueError):
    """Raised when a feature footprint is degenerate."""
    pass


def to_point(p: PointLike) -> Point2D:
    """Coerce a Point2D or an (x, y) pair to Point2D."""
    if isinstance(p, Point2D):
        return p
    try:
        x, y = p[0], p[1]
    except (TypeError, IndexError) as e:
        raise ConstructionError(f"Invalid footprint vertex {p!r}") from e
    return Point2D(float(x), float(y))


def normalize_footprint(points: Iterable[PointLike]) -> Footprint:
    """
    Build a validated Footprint from a raw exterior ring.

    Steps:
    1. Coerce vertices to Point2D
    2. Drop the repeated closing vertex, if present
    3. Collapse consecutive duplicate vertices
    4. Require at least 3 distinct vertices, non-zero area and
       no self-intersection
    5. Reorder to counter-clockwise

    Args:
        points: Ring vertices, open or closed, any winding

    Returns:
        Footprint with a CCW open ring

    Raises:
        ConstructionError: If the ring is degenerate
    """
    ring = [to_point(p) for p in points]
    ring = strip_closing_vertex(ring)
    ring = remove_consecutive_duplicates(ring)

    distinct = len(set(ring))
    if distinct < 3:
        raise ConstructionError(
            f"Footprint must have at least 3 distinct vertices, got {distinct}"
        )

    if abs(polygon_signed_area(ring)) < DEGENERATE_AREA_EPSILON:
        raise ConstructionError("Footprint has zero area")

    if not is_simple_ring(ring):
        raise ConstructionError("Footprint ring self-intersects")

    if polygon_signed_area(ring) < 0:
        logger.debug(f"Reversing clockwise footprint ring ({len(ring)} vertices)")
        ring = ensure_ccw(ring)

    return Footprint(ring=tuple(ring))
