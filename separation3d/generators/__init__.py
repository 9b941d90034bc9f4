"""
Mesh generators for separation3d.

Contains the wall generator, the flat roof generator and the surface
builder that combines them.
"""

from .walls import generate_walls
from .roof_flat import generate_flat_roof
from .surface_builder import build_surface

__all__ = [
    'generate_walls',
    'generate_flat_roof',
    'build_surface',
]
