"""
Surface builder for separation3d.

Combines the flat roof and wall generators into the closed shell of a
lifted feature.
"""

import logging

from ..models.geometry import Footprint
from ..models.mesh import TriangleMesh
from ..config import DEFAULT_BASE_ELEVATION
from .roof_flat import generate_flat_roof
from .walls import generate_walls

logger = logging.getLogger(__name__)


def build_surface(
    footprint: Footprint,
    height: float,
    base_z: float = DEFAULT_BASE_ELEVATION,
    feature_id: str = ""
) -> TriangleMesh:
    """
    Extrude a footprint to a triangulated shell.

    Args:
        footprint: Validated footprint (CCW open ring)
        height: Resolved height; roof and wall tops are placed here
        base_z: Wall base elevation
        feature_id: Feature identifier, for log messages only

    Returns:
        TriangleMesh with roof triangles and 2 * N wall triangles
    """
    if height < base_z:
        logger.warning(
            f"Feature {feature_id}: height {height:.3f} is below base "
            f"{base_z:.3f}; wall normals will face inward"
        )

    roof = generate_flat_roof(footprint.ring, height, feature_id)
    walls = generate_walls(footprint.ring, base_z, height)

    mesh = TriangleMesh(roof=tuple(roof), walls=tuple(walls))

    logger.debug(
        f"Feature {feature_id}: built {mesh.roof_count()} roof and "
        f"{mesh.wall_count()} wall triangles"
    )
    return mesh
