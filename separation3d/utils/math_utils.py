"""
Mathematical utilities for separation3d.

Provides segment intersection and point/segment distance helpers
used by footprint validation and sample routing.
"""

from ..models.geometry import Point2D


def orientation(a: Point2D, b: Point2D, c: Point2D) -> float:
    """
    Twice the signed area of triangle (a, b, c).

    Positive = CCW turn, negative = CW turn, zero = collinear.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def segments_intersect(
    p1: Point2D, p2: Point2D,
    p3: Point2D, p4: Point2D
) -> bool:
    """
    Check whether two closed line segments share at least one point.

    Handles collinear overlap and touching endpoints.

    Args:
        p1, p2: First segment endpoints
        p3, p4: Second segment endpoints

    Returns:
        True if the segments intersect or touch
    """
    d1 = orientation(p3, p4, p1)
    d2 = orientation(p3, p4, p2)
    d3 = orientation(p1, p2, p3)
    d4 = orientation(p1, p2, p4)

    if ((d1 > 0 and d2 < 0) or (d1 < 0 and d2 > 0)) and \
       ((d3 > 0 and d4 < 0) or (d3 < 0 and d4 > 0)):
        return True

    if d1 == 0 and _within_bounds(p1, p3, p4):
        return True
    if d2 == 0 and _within_bounds(p2, p3, p4):
        return True
    if d3 == 0 and _within_bounds(p3, p1, p2):
        return True
    if d4 == 0 and _within_bounds(p4, p1, p2):
        return True

    return False


def point_to_segment_distance(point: Point2D, seg_p1: Point2D, seg_p2: Point2D) -> float:
    """
    Compute minimum distance from point to line segment.

    Args:
        point: The point
        seg_p1, seg_p2: Segment endpoints

    Returns:
        Distance from point to nearest point on segment
    """
    dx = seg_p2.x - seg_p1.x
    dy = seg_p2.y - seg_p1.y

    length_sq = dx * dx + dy * dy
    if length_sq < 1e-10:
        return point.distance_to(seg_p1)

    # Project point onto line, clamped to [0, 1]
    t = max(0, min(1, (
        (point.x - seg_p1.x) * dx +
        (point.y - seg_p1.y) * dy
    ) / length_sq))

    nearest = Point2D(
        seg_p1.x + t * dx,
        seg_p1.y + t * dy
    )

    return point.distance_to(nearest)


def _within_bounds(p: Point2D, a: Point2D, b: Point2D) -> bool:
    """Check if p lies inside the bounding box of segment ab."""
    return (
        min(a.x, b.x) <= p.x <= max(a.x, b.x) and
        min(a.y, b.y) <= p.y <= max(a.y, b.y)
    )
