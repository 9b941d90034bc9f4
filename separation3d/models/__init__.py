"""
Data models for separation3d.
"""

from .geometry import Point2D, Point3D, BBox, Footprint, Triangle3D
from .classes import LasClass, TopoClass
from .sample import ElevationSample
from .mesh import TriangleMesh

__all__ = [
    'Point2D', 'Point3D', 'BBox', 'Footprint', 'Triangle3D',
    'LasClass', 'TopoClass',
    'ElevationSample',
    'TriangleMesh',
]
