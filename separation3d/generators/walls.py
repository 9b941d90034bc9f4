"""
Wall mesh generator for separation3d.

Generates the vertical wall faces of a lifted feature, one rectangular
quad per footprint edge, from the base elevation up to the roof.
"""

from typing import List, Sequence

from ..models.geometry import Point2D, Triangle3D


def generate_walls(
    ring: Sequence[Point2D],
    base_z: float,
    top_z: float
) -> List[Triangle3D]:
    """
    Generate wall triangles for a footprint ring.

    For each edge (A, B), including the closing edge from the last vertex
    back to the first, the quad {A_base, B_base, B_top, A_top} is split
    along the A_base-B_top diagonal into:
    - (A_base, B_base, B_top)
    - (A_base, B_top, A_top)

    With a CCW ring and top_z above base_z the normals point outward.

    Args:
        ring: Footprint vertices in CCW order (open ring)
        base_z: Wall base elevation
        top_z: Wall top elevation (resolved height)

    Returns:
        List of wall triangles, two per edge in ring order
    """
    triangles: List[Triangle3D] = []
    n = len(ring)

    for i in range(n):
        p0 = ring[i]
        p1 = ring[(i + 1) % n]

        bl = p0.at_z(base_z)
        br = p1.at_z(base_z)
        tr = p1.at_z(top_z)
        tl = p0.at_z(top_z)

        triangles.append(Triangle3D(bl, br, tr))
        triangles.append(Triangle3D(bl, tr, tl))

    return triangles
