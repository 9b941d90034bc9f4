"""
separation3d

Lifts 2D separation footprints (fences, walls, hedges between parcels)
into 3D meshes using classified point-cloud elevation samples.

Typical use:
    features = create_separations(records, config)
    assign_samples(features, samples)
    report = lift_features(features, config)
    export_obj(features, "separations.obj")
"""

__version__ = "0.1.0"

from .config import LiftConfig, NoSamplesPolicy, DEFAULT_CONFIG
from .features import FeatureState, SeparationFeature, TopoFeature
from .io import ExportStats, export_obj, validate_obj_file
from .models import ElevationSample, LasClass, TopoClass, TriangleMesh
from .pipeline import (
    LiftReport,
    assign_samples,
    create_separations,
    lift_features,
    setup_logging,
)
from .processing import ConstructionError, FeatureStateError, NoSamplesError

__all__ = [
    '__version__',
    'LiftConfig',
    'NoSamplesPolicy',
    'DEFAULT_CONFIG',
    'FeatureState',
    'SeparationFeature',
    'TopoFeature',
    'ExportStats',
    'export_obj',
    'validate_obj_file',
    'ElevationSample',
    'LasClass',
    'TopoClass',
    'TriangleMesh',
    'LiftReport',
    'assign_samples',
    'create_separations',
    'lift_features',
    'setup_logging',
    'ConstructionError',
    'FeatureStateError',
    'NoSamplesError',
]
