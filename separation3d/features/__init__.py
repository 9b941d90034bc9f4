"""
Feature kinds for separation3d.
"""

from .base import TopoFeature, FeatureState
from .separation import SeparationFeature

__all__ = [
    'TopoFeature',
    'FeatureState',
    'SeparationFeature',
]
