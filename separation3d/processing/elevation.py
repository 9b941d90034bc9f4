"""
Elevation estimator for separation3d.

Collects the elevations of admitted samples for one feature and reduces
them to a single representative height with a percentile statistic.

Admission is feature-kind specific: separation features keep only last
returns that are not classified as building or water, so the height
reflects the structure itself rather than surrounding roofs or water.
"""

from typing import Callable, List, Sequence, Tuple
import logging
import math

import numpy as np

from ..models.classes import LasClass
from ..models.sample import ElevationSample

logger = logging.getLogger(__name__)

AdmissionRule = Callable[[ElevationSample], bool]

# Classifications never used for separation heights
SEPARATION_EXCLUDED_CLASSES = frozenset({LasClass.BUILDING, LasClass.WATER})


class NoSamplesError(Exception):
    """Raised when a height is requested from an empty elevation buffer."""
    pass


class FeatureStateError(RuntimeError):
    """Raised when a feature is used out of lifecycle order."""
    pass


def admit_separation_sample(sample: ElevationSample) -> bool:
    """
    Admission rule for separation features.

    Args:
        sample: Candidate elevation sample

    Returns:
        True iff the sample is a last return and is classified as
        neither building nor water
    """
    return (
        sample.is_last_return
        and sample.classification not in SEPARATION_EXCLUDED_CLASSES
    )


def percentile_height(values: Sequence[float], percentile: float) -> float:
    """
    Value at a fractional percentile of a sample of elevations.

    Sorts ascending and takes the value at rank p * (n - 1), linearly
    interpolated between the two bracketing order statistics.
    For [1, 2, 3, 4, 5] at 0.8 this is 1 + 0.8 * 4 = 4.2.

    Args:
        values: Elevations (any order)
        percentile: Fraction in [0, 1]

    Returns:
        Interpolated percentile value

    Raises:
        NoSamplesError: If values is empty
        ValueError: If percentile is outside [0, 1]
    """
    if not (0.0 <= percentile <= 1.0):
        raise ValueError(f"percentile must be between 0 and 1, got {percentile}")

    if len(values) == 0:
        raise NoSamplesError("Cannot compute a percentile of zero samples")

    arr = np.asarray(values, dtype=np.float64)
    return float(np.percentile(arr, percentile * 100.0, method="linear"))


class ElevationEstimator:
    """
    Elevation buffer plus admission rule for one feature.

    The buffer is append-only while open. A successful resolve()
    freezes it; a failed one (empty buffer) leaves it open so more
    samples can be added and resolve() retried.
    """

    def __init__(self, admission_rule: AdmissionRule = admit_separation_sample):
        """
        Initialize estimator.

        Args:
            admission_rule: Predicate deciding which samples contribute
        """
        self.admission_rule = admission_rule
        self._elevations: List[float] = []
        self._frozen = False
        self._rejected = 0

    @property
    def elevations(self) -> Tuple[float, ...]:
        """Accepted elevations in arrival order."""
        return tuple(self._elevations)

    @property
    def sample_count(self) -> int:
        """Number of accepted samples."""
        return len(self._elevations)

    @property
    def rejected_count(self) -> int:
        """Number of samples discarded by the admission rule."""
        return self._rejected

    @property
    def is_frozen(self) -> bool:
        """True once a height has been resolved."""
        return self._frozen

    def add_sample(self, sample: ElevationSample) -> bool:
        """
        Offer a sample to the buffer.

        Samples failing the admission rule, or carrying a non-finite
        elevation, are discarded without error.

        Args:
            sample: Candidate elevation sample

        Returns:
            True if the sample's elevation was appended

        Raises:
            FeatureStateError: If the buffer is frozen
        """
        if self._frozen:
            raise FeatureStateError("Elevation buffer is frozen; height already resolved")

        if not math.isfinite(sample.z):
            self._rejected += 1
            logger.debug(f"Discarding sample with non-finite elevation {sample.z!r}")
            return False

        if not self.admission_rule(sample):
            self._rejected += 1
            return False

        self._elevations.append(float(sample.z))
        return True

    def compute(self, percentile: float) -> float:
        """
        Compute the percentile height without freezing the buffer.

        Args:
            percentile: Fraction in [0, 1]

        Returns:
            Height of the current buffer

        Raises:
            NoSamplesError: If no sample has been accepted
        """
        return percentile_height(self._elevations, percentile)

    def freeze(self) -> None:
        """Close the buffer; further samples and resolves are rejected."""
        if self._frozen:
            raise FeatureStateError("Height already resolved")
        self._frozen = True

    def resolve(self, percentile: float) -> float:
        """
        Compute the percentile height and freeze the buffer.

        Args:
            percentile: Fraction in [0, 1]

        Returns:
            Resolved height

        Raises:
            NoSamplesError: If no sample has been accepted (buffer stays open)
            FeatureStateError: If the buffer is already frozen
        """
        if self._frozen:
            raise FeatureStateError("Height already resolved")

        height = self.compute(percentile)
        self.freeze()

        logger.debug(
            f"Resolved height {height:.3f} from {len(self._elevations)} samples "
            f"(p={percentile}, rejected={self._rejected})"
        )
        return height
