"""
Core geometry types for separation3d.

Provides Point2D, Point3D, BBox, Footprint and Triangle3D classes used
throughout the lifter for representing footprints and surface meshes.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import math


@dataclass(frozen=True, slots=True)
class Point2D:
    """2D point in projected map coordinates."""
    x: float
    y: float

    def distance_to(self, other: 'Point2D') -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def at_z(self, z: float) -> 'Point3D':
        """Lift to 3D at the given elevation."""
        return Point3D(self.x, self.y, z)


@dataclass(frozen=True, slots=True)
class Point3D:
    """3D point in projected map coordinates."""
    x: float
    y: float
    z: float

    def __sub__(self, other: 'Point3D') -> 'Point3D':
        """Vector subtraction."""
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def cross(self, other: 'Point3D') -> 'Point3D':
        """3D cross product."""
        return Point3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


@dataclass(slots=True)
class BBox:
    """Axis-aligned bounding box in 2D."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def intersects(self, other: 'BBox') -> bool:
        """Check if this bbox intersects another."""
        return not (
            self.max_x < other.min_x or
            self.min_x > other.max_x or
            self.max_y < other.min_y or
            self.min_y > other.max_y
        )

    def expand(self, margin: float) -> 'BBox':
        """Return a new bbox expanded by margin on all sides."""
        return BBox(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin
        )

    @staticmethod
    def from_points(points: List[Point2D]) -> 'BBox':
        """Create bbox from a list of points."""
        if not points:
            raise ValueError("Cannot create BBox from empty point list")

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return BBox(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True)
class Footprint:
    """
    Validated 2D exterior ring of a feature.

    Attributes:
        ring: Distinct vertices in counter-clockwise order, without
              a repeated closing vertex. The closing edge from the last
              vertex back to the first is implicit.

    Instances are built by processing.footprint.normalize_footprint,
    which rejects degenerate input.
    """
    ring: Tuple[Point2D, ...]
    _bbox: Optional[BBox] = field(default=None, repr=False, compare=False)

    @property
    def bbox(self) -> BBox:
        """Get or compute bounding box."""
        if self._bbox is None:
            # frozen dataclass: cache through object.__setattr__
            object.__setattr__(self, '_bbox', BBox.from_points(list(self.ring)))
        return self._bbox

    @property
    def vertex_count(self) -> int:
        """Number of distinct vertices (= number of edges)."""
        return len(self.ring)

    def edges(self) -> List[Tuple[Point2D, Point2D]]:
        """Consecutive vertex pairs, including the closing edge."""
        n = len(self.ring)
        return [(self.ring[i], self.ring[(i + 1) % n]) for i in range(n)]

    def signed_area(self) -> float:
        """
        Compute signed area using shoelace formula.
        Positive = CCW, Negative = CW.
        """
        return _signed_area(self.ring)

    def area(self) -> float:
        """Unsigned area of the ring."""
        return abs(self.signed_area())


@dataclass(frozen=True, slots=True)
class Triangle3D:
    """Triangle with three 3D vertices in winding order."""
    v0: Point3D
    v1: Point3D
    v2: Point3D

    @property
    def vertices(self) -> Tuple[Point3D, Point3D, Point3D]:
        return (self.v0, self.v1, self.v2)

    def normal(self) -> Point3D:
        """Unnormalized face normal, (v1 - v0) x (v2 - v0)."""
        return (self.v1 - self.v0).cross(self.v2 - self.v0)

    def projected_area(self) -> float:
        """Signed area of the XY projection (positive = CCW seen from above)."""
        return 0.5 * (
            (self.v1.x - self.v0.x) * (self.v2.y - self.v0.y) -
            (self.v2.x - self.v0.x) * (self.v1.y - self.v0.y)
        )


def _signed_area(ring) -> float:
    """
    Compute signed area of a ring using shoelace formula.
    Positive = CCW, Negative = CW.
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
