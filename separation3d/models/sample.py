"""
Elevation sample model for separation3d.
"""

from dataclasses import dataclass

from .classes import LasClass
from .geometry import Point2D


@dataclass(frozen=True, slots=True)
class ElevationSample:
    """
    One elevation measurement offered to a feature during the scan phase.

    Attributes:
        position: Planimetric position of the return
        z: Measured elevation (meters)
        radius: Horizontal search radius used by the point-cloud stage
        classification: LAS classification of the return
        is_last_return: True if this was the final return of its pulse
    """
    position: Point2D
    z: float
    radius: float = 0.0
    classification: LasClass = LasClass.UNCLASSIFIED
    is_last_return: bool = True
