"""
Configuration constants for the separation3d lifter.

Contains the tunable parameters for height estimation, surface
generation, and export, plus the per-batch runtime configuration.
"""

from dataclasses import dataclass
from enum import Enum


# =============================================================================
# NO-SAMPLES POLICY
# =============================================================================

class NoSamplesPolicy(Enum):
    """
    What a batch run does with a feature that never received a sample.

    SKIP: (Default) Leave the feature unlifted, report it as skipped and
          continue with the rest of the batch.

    FAIL: Abort the batch by re-raising NoSamplesError for the first
          feature that cannot be lifted.
    """
    SKIP = "skip"
    FAIL = "fail"


# =============================================================================
# HEIGHT ESTIMATION
# =============================================================================

# Percentile of accepted elevations used as the feature height (0..1).
# 0.8 = 80th percentile; robust against a few low ground returns
# and against stray high returns.
DEFAULT_HEIGHT_PERCENTILE = 0.8

# =============================================================================
# SURFACE GENERATION
# =============================================================================

# Z coordinate of wall bases when no ground reference is supplied (meters)
DEFAULT_BASE_ELEVATION = 0.0

# Footprints with a smaller absolute area (m^2) are rejected as degenerate
DEGENERATE_AREA_EPSILON = 1e-10

# =============================================================================
# SAMPLE ROUTING
# =============================================================================

# Grid cell size for the feature spatial index (meters)
SPATIAL_INDEX_CELL_SIZE = 50.0

# =============================================================================
# EXPORT SETTINGS
# =============================================================================

# OBJ export precision (decimal places)
OBJ_VERTEX_PRECISION = 3

# Export with per-feature groups
OBJ_EXPORT_GROUPS = True


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class LiftConfig:
    """
    Runtime configuration for one batch of feature lifts.

    One instance is shared by every feature of a batch; a batch with a
    different threshold builds its own.
    """

    # Height estimation
    height_percentile: float = DEFAULT_HEIGHT_PERCENTILE

    # Wall base elevation (ground reference)
    base_elevation: float = DEFAULT_BASE_ELEVATION

    # Features without accepted samples
    no_samples_policy: NoSamplesPolicy = NoSamplesPolicy.SKIP

    # Debug/report
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if not (0.0 <= self.height_percentile <= 1.0):
            raise ValueError(
                f"height_percentile must be between 0 and 1, got {self.height_percentile}"
            )

        if not isinstance(self.no_samples_policy, NoSamplesPolicy):
            raise ValueError(
                f"no_samples_policy must be a NoSamplesPolicy, got {self.no_samples_policy!r}"
            )


# Default configuration instance
DEFAULT_CONFIG = LiftConfig()
