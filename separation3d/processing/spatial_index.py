"""
Spatial indexing for sample routing.

Provides efficient lookup of the features whose footprints may lie
within reach of an elevation sample, using a grid-based spatial index
over footprint bounding boxes.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..models.geometry import Point2D, BBox
from ..config import SPATIAL_INDEX_CELL_SIZE


class SpatialIndex(ABC):
    """Abstract base class for spatial indexing."""

    @abstractmethod
    def query(self, bbox: BBox) -> List[int]:
        """
        Query items whose bounding box may intersect the given box.

        Args:
            bbox: Bounding box to query

        Returns:
            List of item indices that may intersect
        """
        pass

    @abstractmethod
    def query_point(self, point: Point2D, radius: float = 0.0) -> List[int]:
        """
        Query items that may lie within radius of the given point.

        Args:
            point: Point to query
            radius: Search radius around point

        Returns:
            List of item indices
        """
        pass


class GridSpatialIndex(SpatialIndex):
    """
    Grid-based spatial index over item bounding boxes.

    Divides the extent into a regular grid and maps each cell to the
    items whose bounding box overlaps it.
    """

    def __init__(
        self,
        boxes: Sequence[BBox],
        cell_size: float = SPATIAL_INDEX_CELL_SIZE,
        bounds: Optional[BBox] = None
    ):
        """
        Initialize spatial index.

        Args:
            boxes: Bounding boxes of the items to index
            cell_size: Size of grid cells
            bounds: Optional bounds to use (computed from boxes if None)
        """
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")

        self.boxes = list(boxes)
        self.cell_size = cell_size

        if bounds is not None:
            self.bounds = bounds
        elif self.boxes:
            min_x = min(b.min_x for b in self.boxes)
            min_y = min(b.min_y for b in self.boxes)
            max_x = max(b.max_x for b in self.boxes)
            max_y = max(b.max_y for b in self.boxes)
            self.bounds = BBox(min_x, min_y, max_x, max_y)
        else:
            self.bounds = BBox(0, 0, 0, 0)

        self.grid: Dict[Tuple[int, int], Set[int]] = {}
        self._build_index()

    def _build_index(self) -> None:
        """Build the spatial index grid."""
        for idx, box in enumerate(self.boxes):
            for cell in self._get_cells_for_bbox(box):
                if cell not in self.grid:
                    self.grid[cell] = set()
                self.grid[cell].add(idx)

    def _get_cell(self, x: float, y: float) -> Tuple[int, int]:
        """Get grid cell coordinates for a point."""
        # floor division keeps points left of / below the bounds in their own cells
        cell_x = int((x - self.bounds.min_x) // self.cell_size)
        cell_y = int((y - self.bounds.min_y) // self.cell_size)
        return (cell_x, cell_y)

    def _get_cells_for_bbox(self, bbox: BBox) -> List[Tuple[int, int]]:
        """Get all grid cells that overlap a bounding box."""
        min_cell = self._get_cell(bbox.min_x, bbox.min_y)
        max_cell = self._get_cell(bbox.max_x, bbox.max_y)

        cells = []
        for cx in range(min_cell[0], max_cell[0] + 1):
            for cy in range(min_cell[1], max_cell[1] + 1):
                cells.append((cx, cy))

        return cells

    def query(self, bbox: BBox) -> List[int]:
        """
        Query items whose bounding box may intersect the given box.

        Args:
            bbox: Bounding box to query

        Returns:
            Sorted list of item indices (deduplicated)
        """
        result_set: Set[int] = set()

        for cell in self._get_cells_for_bbox(bbox):
            if cell in self.grid:
                result_set.update(self.grid[cell])

        return sorted(i for i in result_set if self.boxes[i].intersects(bbox))

    def query_point(self, point: Point2D, radius: float = 0.0) -> List[int]:
        """
        Query items that may lie within radius of the given point.

        Args:
            point: Point to query
            radius: Search radius around point

        Returns:
            Sorted list of item indices
        """
        search = BBox(point.x, point.y, point.x, point.y).expand(max(0.0, radius))
        return self.query(search)

    def get_stats(self) -> Dict[str, int]:
        """Get index statistics."""
        total_entries = sum(len(items) for items in self.grid.values())

        return {
            'num_items': len(self.boxes),
            'num_cells': len(self.grid),
            'total_entries': total_entries,
            'avg_per_cell': total_entries // max(1, len(self.grid)),
        }
