"""
Mesh data model for separation3d.

Provides TriangleMesh, the lifted surface of one feature: a horizontal
roof cap and the vertical wall faces along every footprint edge.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .geometry import Point3D, Triangle3D


@dataclass(frozen=True)
class TriangleMesh:
    """
    Triangulated shell of a lifted feature.

    Attributes:
        roof: Horizontal cap triangles, all vertices at the resolved height,
              wound CCW seen from above (upward normal)
        walls: Vertical wall triangles, two per footprint edge in ring
               order, wound for an outward normal

    Both sequences are tuples so a mesh can be handed to any number of
    formatters without being modified.
    """
    roof: Tuple[Triangle3D, ...] = field(default_factory=tuple)
    walls: Tuple[Triangle3D, ...] = field(default_factory=tuple)

    def roof_count(self) -> int:
        """Get number of roof triangles."""
        return len(self.roof)

    def wall_count(self) -> int:
        """Get number of wall triangles."""
        return len(self.walls)

    def triangle_count(self) -> int:
        """Get total number of triangles."""
        return len(self.roof) + len(self.walls)

    def triangles(self) -> List[Triangle3D]:
        """Roof triangles followed by wall triangles."""
        return list(self.roof) + list(self.walls)

    def is_empty(self) -> bool:
        """Check if mesh has no geometry."""
        return not self.roof and not self.walls

    def validate(self, height: float, base_z: float) -> List[str]:
        """
        Validate height propagation through the mesh.

        Args:
            height: Expected roof / wall top elevation
            base_z: Expected wall base elevation

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.roof:
            errors.append("Mesh has no roof triangles")

        if len(self.walls) % 2 != 0:
            errors.append(f"Odd number of wall triangles ({len(self.walls)})")

        for i, tri in enumerate(self.roof):
            for v in tri.vertices:
                if v.z != height:
                    errors.append(
                        f"Roof triangle {i} has vertex at z={v.z}, expected {height}"
                    )

        for i, tri in enumerate(self.walls):
            for v in tri.vertices:
                if v.z != height and v.z != base_z:
                    errors.append(
                        f"Wall triangle {i} has vertex at z={v.z}, "
                        f"expected {base_z} or {height}"
                    )

        return errors

    def compute_bounds(self) -> Optional[Tuple[Tuple[float, float, float],
                                                 Tuple[float, float, float]]]:
        """
        Compute bounding box of the mesh.

        Returns:
            ((min_x, min_y, min_z), (max_x, max_y, max_z)) or None if empty
        """
        points = [v for tri in self.triangles() for v in tri.vertices]
        if not points:
            return None

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        zs = [p.z for p in points]

        return (
            (min(xs), min(ys), min(zs)),
            (max(xs), max(ys), max(zs))
        )

    def to_indexed(self) -> Tuple[List[Tuple[float, float, float]], List[List[int]]]:
        """
        Convert to shared-vertex form.

        Identical vertices are emitted once. Faces use 1-based indexing
        for OBJ compatibility.

        Returns:
            (vertices, faces) with roof faces first, then wall faces
        """
        vertices: List[Tuple[float, float, float]] = []
        lookup: Dict[Point3D, int] = {}
        faces: List[List[int]] = []

        for tri in self.triangles():
            face = []
            for v in tri.vertices:
                idx = lookup.get(v)
                if idx is None:
                    vertices.append((v.x, v.y, v.z))
                    idx = len(vertices)  # 1-based
                    lookup[v] = idx
                face.append(idx)
            faces.append(face)

        return vertices, faces

    def __repr__(self) -> str:
        return f"TriangleMesh(roof={len(self.roof)}, walls={len(self.walls)})"
