"""
Classification enums for separation3d.

Provides the LAS point classification codes carried by elevation
samples and the topographic class reported by lifted features.
"""

from enum import Enum, IntEnum


class LasClass(IntEnum):
    """ASPRS LAS 1.4 point classification codes."""
    CREATED_NEVER_CLASSIFIED = 0
    UNCLASSIFIED = 1
    GROUND = 2
    LOW_VEGETATION = 3
    MEDIUM_VEGETATION = 4
    HIGH_VEGETATION = 5
    BUILDING = 6
    LOW_POINT = 7
    RESERVED = 8
    WATER = 9
    RAIL = 10
    ROAD_SURFACE = 11
    WIRE_GUARD = 13
    WIRE_CONDUCTOR = 14
    TRANSMISSION_TOWER = 15
    WIRE_CONNECTOR = 16
    BRIDGE_DECK = 17
    HIGH_NOISE = 18


class TopoClass(Enum):
    """Topographic class of a reconstructed feature."""
    BUILDING = "building"
    WATER = "water"
    BRIDGE = "bridge"
    ROAD = "road"
    TERRAIN = "terrain"
    FOREST = "forest"
    SEPARATION = "separation"
