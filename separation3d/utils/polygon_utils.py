"""
Polygon utilities for separation3d.

Provides functions for point-in-polygon tests, area calculations,
winding normalization, simplicity checks and distance queries
on footprint rings.
"""

from typing import List, Sequence
import math

from ..models.geometry import Point2D
from .math_utils import segments_intersect, point_to_segment_distance


def point_in_polygon(point: Point2D, ring: Sequence[Point2D]) -> bool:
    """
    Test if point is inside a polygon ring using ray casting algorithm.

    Args:
        point: Point to test
        ring: List of polygon vertices (closed or open)

    Returns:
        True if point is inside or on edge
    """
    n = len(ring)
    if n < 3:
        return False

    inside = False
    j = n - 1

    for i in range(n):
        xi, yi = ring[i].x, ring[i].y
        xj, yj = ring[j].x, ring[j].y

        if _point_on_segment(point, ring[i], ring[j]):
            return True

        # Ray casting
        if ((yi > point.y) != (yj > point.y)) and \
           (point.x < (xj - xi) * (point.y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def polygon_signed_area(ring: Sequence[Point2D]) -> float:
    """
    Compute signed area using shoelace formula.

    Args:
        ring: List of polygon vertices

    Returns:
        Signed area (positive = CCW, negative = CW)
    """
    n = len(ring)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += ring[i].x * ring[j].y
        area -= ring[j].x * ring[i].y

    return area / 2.0


def polygon_centroid(ring: Sequence[Point2D]) -> Point2D:
    """
    Compute vertex centroid of a ring (mean of its vertices).

    Args:
        ring: List of polygon vertices (open ring)

    Returns:
        Centroid point
    """
    n = len(ring)
    if n == 0:
        return Point2D(0.0, 0.0)

    return Point2D(
        sum(p.x for p in ring) / n,
        sum(p.y for p in ring) / n
    )


def is_clockwise(ring: Sequence[Point2D]) -> bool:
    """Check if polygon ring is clockwise (negative area)."""
    return polygon_signed_area(ring) < 0


def ensure_ccw(ring: Sequence[Point2D]) -> List[Point2D]:
    """
    Ensure ring is counter-clockwise, reversing if needed.

    Args:
        ring: List of polygon vertices

    Returns:
        Ring in CCW order
    """
    if is_clockwise(ring):
        return list(reversed(ring))
    return list(ring)


def strip_closing_vertex(ring: Sequence[Point2D]) -> List[Point2D]:
    """Drop the last vertex if it repeats the first."""
    ring = list(ring)
    if len(ring) > 1 and ring[0].x == ring[-1].x and ring[0].y == ring[-1].y:
        ring = ring[:-1]
    return ring


def remove_consecutive_duplicates(ring: Sequence[Point2D]) -> List[Point2D]:
    """
    Collapse runs of identical consecutive vertices, wrapping around.

    Args:
        ring: Open ring (no closing vertex)

    Returns:
        Ring in which no vertex equals its successor
    """
    result: List[Point2D] = []
    for p in ring:
        if not result or result[-1] != p:
            result.append(p)

    while len(result) > 1 and result[0] == result[-1]:
        result.pop()

    return result


def is_simple_ring(ring: Sequence[Point2D]) -> bool:
    """
    Check that no two non-adjacent edges of an open ring touch.

    O(n^2) over edges; footprints of separation features are small.

    Args:
        ring: Open ring with distinct consecutive vertices

    Returns:
        True if the ring does not self-intersect
    """
    n = len(ring)
    if n < 3:
        return False

    for i in range(n):
        a1 = ring[i]
        a2 = ring[(i + 1) % n]

        for j in range(i + 1, n):
            # Adjacent edges share an endpoint by construction
            if j == i + 1 or (i == 0 and j == n - 1):
                continue

            b1 = ring[j]
            b2 = ring[(j + 1) % n]

            if segments_intersect(a1, a2, b1, b2):
                return False

    # Adjacent edges that fold back onto each other
    for i in range(n):
        prev_p = ring[i - 1]
        curr_p = ring[i]
        next_p = ring[(i + 1) % n]
        if _is_spike(prev_p, curr_p, next_p):
            return False

    return True


def distance_to_ring(point: Point2D, ring: Sequence[Point2D]) -> float:
    """
    Distance from a point to a polygon, zero if inside.

    Args:
        point: Query point
        ring: Open ring

    Returns:
        0.0 if point is inside or on the boundary, else distance to
        the nearest edge
    """
    if point_in_polygon(point, ring):
        return 0.0

    n = len(ring)
    return min(
        point_to_segment_distance(point, ring[i], ring[(i + 1) % n])
        for i in range(n)
    )


def _is_spike(prev_p: Point2D, curr_p: Point2D, next_p: Point2D) -> bool:
    """Check if the ring reverses direction at curr_p (zero-width spike)."""
    v1_x = curr_p.x - prev_p.x
    v1_y = curr_p.y - prev_p.y
    v2_x = next_p.x - curr_p.x
    v2_y = next_p.y - curr_p.y

    cross = v1_x * v2_y - v1_y * v2_x
    dot = v1_x * v2_x + v1_y * v2_y

    return cross == 0 and dot < 0


def _point_on_segment(p: Point2D, a: Point2D, b: Point2D,
                      tolerance: float = 1e-6) -> bool:
    """Check if point is on line segment (within tolerance)."""
    ab_x = b.x - a.x
    ab_y = b.y - a.y

    ap_x = p.x - a.x
    ap_y = p.y - a.y

    # Cross product (should be ~0 if collinear)
    cross = abs(ab_x * ap_y - ab_y * ap_x)

    ab_len = math.sqrt(ab_x * ab_x + ab_y * ab_y)
    if ab_len < 1e-10:
        return p.distance_to(a) < tolerance

    if cross / ab_len > tolerance:
        return False

    # Check if projection is within segment
    dot = ap_x * ab_x + ap_y * ab_y
    t = dot / (ab_len * ab_len)

    return -tolerance <= t <= 1 + tolerance
