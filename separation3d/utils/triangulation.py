"""
Triangulation utilities for separation3d.

Provides the ear clipping triangulation used for roof caps and
a validator for triangulation results.
"""

from typing import List, Optional, Sequence, Tuple

from ..models.geometry import Point2D


class TriangulationError(Exception):
    """Raised when triangulation fails."""
    pass


def triangulate_polygon(ring: Sequence[Point2D]) -> List[Tuple[int, int, int]]:
    """
    Triangulate a simple polygon using ear clipping algorithm.

    Args:
        ring: List of polygon vertices in CCW order (open ring)

    Returns:
        List of triangle tuples (i, j, k) as indices into the input ring,
        each wound CCW

    Raises:
        TriangulationError: If triangulation fails
    """
    n = len(ring)
    if n < 3:
        raise TriangulationError("Polygon must have at least 3 vertices")

    if n == 3:
        return [(0, 1, 2)]

    # Make working copy of indices
    indices = list(range(n))
    triangles = []

    while len(indices) > 3:
        ear_found = False

        for i in range(len(indices)):
            prev_i = (i - 1) % len(indices)
            next_i = (i + 1) % len(indices)

            if _is_ear(ring, indices, prev_i, i, next_i):
                triangles.append((indices[prev_i], indices[i], indices[next_i]))
                indices.pop(i)
                ear_found = True
                break

        if not ear_found:
            # Collinear runs leave no strict ear; clip a zero-area vertex instead
            for i in range(len(indices)):
                prev_idx = indices[(i - 1) % len(indices)]
                curr_idx = indices[i]
                next_idx = indices[(i + 1) % len(indices)]

                if _cross(ring[prev_idx], ring[curr_idx], ring[next_idx]) == 0:
                    indices.pop(i)
                    ear_found = True
                    break

            if not ear_found:
                raise TriangulationError(
                    f"Failed to find ear in polygon with {len(indices)} remaining vertices"
                )

    # Add final triangle
    a, b, c = indices
    if _cross(ring[a], ring[b], ring[c]) > 0:
        triangles.append((a, b, c))

    if not triangles:
        raise TriangulationError("Polygon has zero area")

    return triangles


def _is_ear(
    ring: Sequence[Point2D],
    indices: List[int],
    prev_i: int,
    curr_i: int,
    next_i: int
) -> bool:
    """
    Check if vertex at curr_i forms an ear.

    An ear is a triangle that:
    1. Has a convex vertex at curr_i
    2. Contains no other polygon vertices
    """
    prev_p = ring[indices[prev_i]]
    curr_p = ring[indices[curr_i]]
    next_p = ring[indices[next_i]]

    # Must be strictly convex
    if _cross(prev_p, curr_p, next_p) <= 0:
        return False

    # Check that no other vertex is inside the triangle
    for i, idx in enumerate(indices):
        if i in (prev_i, curr_i, next_i):
            continue

        if _point_in_triangle(ring[idx], prev_p, curr_p, next_p):
            return False

    return True


def _cross(prev_p: Point2D, curr_p: Point2D, next_p: Point2D) -> float:
    """
    Turn at curr_p going from prev_p to next_p.

    For a CCW polygon, convex = positive cross product.
    """
    v1_x = curr_p.x - prev_p.x
    v1_y = curr_p.y - prev_p.y
    v2_x = next_p.x - curr_p.x
    v2_y = next_p.y - curr_p.y

    return v1_x * v2_y - v1_y * v2_x


def _point_in_triangle(
    p: Point2D,
    v0: Point2D,
    v1: Point2D,
    v2: Point2D
) -> bool:
    """
    Check if point is inside triangle or on its boundary.
    """
    def sign(p1: Point2D, p2: Point2D, p3: Point2D) -> float:
        return (p1.x - p3.x) * (p2.y - p3.y) - (p2.x - p3.x) * (p1.y - p3.y)

    d1 = sign(p, v0, v1)
    d2 = sign(p, v1, v2)
    d3 = sign(p, v2, v0)

    has_neg = (d1 < 0) or (d2 < 0) or (d3 < 0)
    has_pos = (d1 > 0) or (d2 > 0) or (d3 > 0)

    return not (has_neg and has_pos)


def validate_triangulation(
    vertices: Sequence[Point2D],
    triangles: List[Tuple[int, int, int]],
    expected_area: Optional[float] = None
) -> List[str]:
    """
    Validate triangulation result.

    Args:
        vertices: List of vertices
        triangles: List of triangle index tuples
        expected_area: Expected polygon area (optional)

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if not triangles:
        errors.append("No triangles generated")
        return errors

    n = len(vertices)

    # Check index validity
    for i, (a, b, c) in enumerate(triangles):
        if a < 0 or a >= n or b < 0 or b >= n or c < 0 or c >= n:
            errors.append(f"Triangle {i} has invalid index")

    if errors:
        return errors

    # Check for degenerate triangles
    for i, (a, b, c) in enumerate(triangles):
        area = triangle_area(vertices[a], vertices[b], vertices[c])
        if abs(area) < 1e-10:
            errors.append(f"Triangle {i} is degenerate (zero area)")

    # Check total area
    if expected_area is not None:
        total_area = sum(
            abs(triangle_area(vertices[a], vertices[b], vertices[c]))
            for a, b, c in triangles
        )
        if abs(total_area - expected_area) > expected_area * 1e-9:
            errors.append(
                f"Total triangulated area {total_area:.6f} differs from "
                f"expected {expected_area:.6f}"
            )

    return errors


def triangle_area(v0: Point2D, v1: Point2D, v2: Point2D) -> float:
    """Compute signed area of triangle."""
    return 0.5 * (
        (v1.x - v0.x) * (v2.y - v0.y) -
        (v2.x - v0.x) * (v1.y - v0.y)
    )
