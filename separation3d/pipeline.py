"""
separation3d batch pipeline.

Runs the scan and lift phases for a batch of features with one explicit
LiftConfig:

1. Route every elevation sample to the features within its reach
2. Lift every feature (percentile height + surface mesh)
3. Apply the no-samples policy to features that cannot be lifted
4. Report batch statistics

Usage:
    config = LiftConfig(height_percentile=0.8)
    assign_samples(features, samples)
    report = lift_features(features, config)
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from .config import LiftConfig, NoSamplesPolicy, DEFAULT_CONFIG
from .features.base import TopoFeature
from .features.separation import SeparationFeature
from .models.sample import ElevationSample
from .processing.elevation import NoSamplesError
from .processing.footprint import PointLike
from .processing.spatial_index import GridSpatialIndex
from .utils.polygon_utils import distance_to_ring

logger = logging.getLogger(__name__)


@dataclass
class LiftReport:
    """Statistics from one batch lift."""
    features_total: int = 0
    features_lifted: int = 0
    features_skipped: int = 0
    features_already_lifted: int = 0  # included in features_lifted
    roof_triangles: int = 0
    wall_triangles: int = 0
    processing_time_ms: int = 0
    skipped_ids: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True if every feature was lifted."""
        return self.features_lifted == self.features_total


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging to console and optionally to file.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO
        log_file: Optional path to log file. If provided, logs will be written to file.
    """
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


def create_separations(
    records: Iterable[Tuple[str, Sequence[PointLike], Mapping[str, str]]],
    config: LiftConfig = DEFAULT_CONFIG,
    layer_name: str = ""
) -> List[SeparationFeature]:
    """
    Build separation features for a batch with the batch's configuration.

    Args:
        records: (feature_id, footprint ring, attributes) tuples
        config: Batch configuration supplying percentile and base elevation
        layer_name: Source layer name stored on every feature

    Returns:
        List of SeparationFeature, in input order

    Raises:
        ConstructionError: If any footprint is degenerate
    """
    return [
        SeparationFeature(
            ring,
            feature_id,
            attributes,
            layer_name=layer_name,
            height_percentile=config.height_percentile,
            base_elevation=config.base_elevation,
        )
        for feature_id, ring, attributes in records
    ]


def assign_samples(
    features: Sequence[TopoFeature],
    samples: Iterable[ElevationSample]
) -> int:
    """
    Route elevation samples to the features within their reach.

    A sample reaches a feature when its position lies inside the
    footprint or within sample.radius of its boundary. Each feature
    then applies its own admission rule. Features that are already
    lifted are passed over, so a partly lifted batch can be re-sampled.

    Args:
        features: Features of the batch; lifted ones receive nothing
        samples: Samples from the point-cloud stage

    Returns:
        Number of (sample, feature) deliveries made
    """
    if not features:
        return 0

    index = GridSpatialIndex([f.footprint.bbox for f in features])
    deliveries = 0
    admitted = 0

    for sample in samples:
        for idx in index.query_point(sample.position, sample.radius):
            feature = features[idx]
            if feature.is_lifted:
                logger.debug(f"Feature {feature.id}: already lifted, sample not delivered")
                continue
            if distance_to_ring(sample.position, feature.footprint.ring) <= sample.radius:
                deliveries += 1
                if feature.add_elevation_point(sample):
                    admitted += 1

    logger.info(f"Routed {deliveries} sample deliveries, {admitted} admitted")
    return deliveries


def lift_features(
    features: Sequence[TopoFeature],
    config: LiftConfig = DEFAULT_CONFIG
) -> LiftReport:
    """
    Lift every feature of a batch.

    Features without admitted samples are handled by
    config.no_samples_policy: SKIP leaves them unlifted and records their
    ids; FAIL re-raises NoSamplesError for the first one. Features lifted
    by an earlier run are counted as lifted and left unchanged, so a batch
    can be re-run after more samples arrive.

    Args:
        features: Features of the batch
        config: Batch configuration

    Returns:
        LiftReport with batch statistics

    Raises:
        NoSamplesError: Under NoSamplesPolicy.FAIL
    """
    start_time = time.time()
    report = LiftReport(features_total=len(features))

    for i, feature in enumerate(features):
        if feature.is_lifted:
            report.features_already_lifted += 1
            logger.debug(f"Feature {feature.id}: already lifted, kept")
        else:
            try:
                feature.lift()
            except NoSamplesError:
                if config.no_samples_policy is NoSamplesPolicy.FAIL:
                    logger.error(f"Feature {feature.id}: no admitted samples, aborting batch")
                    raise
                report.features_skipped += 1
                report.skipped_ids.append(feature.id)
                logger.warning(f"Feature {feature.id}: no admitted samples, skipped")
                continue

        report.features_lifted += 1
        report.roof_triangles += feature.mesh.roof_count()
        report.wall_triangles += feature.mesh.wall_count()

        if config.verbose and (i + 1) % 100 == 0:
            logger.info(f"Lifted {i + 1}/{len(features)} features")

    report.processing_time_ms = int((time.time() - start_time) * 1000)

    logger.info(
        f"Lifted {report.features_lifted} features, "
        f"skipped {report.features_skipped} "
        f"({report.roof_triangles} roof / {report.wall_triangles} wall triangles)"
    )
    return report
