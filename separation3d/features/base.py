"""
Feature base for separation3d.

Provides TopoFeature, the shared lifecycle of every lifted feature kind:
footprint validation at construction, sample collection, a one-time
lift that resolves the height and builds the mesh, and the read-only
query surface used by formatters.

Feature kinds subclass TopoFeature and supply their admission rule,
classification and material. The percentile and mesh algorithms are
shared free functions (processing.elevation, generators.surface_builder).
"""

from abc import ABC, abstractmethod
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple
import logging

from ..config import DEFAULT_BASE_ELEVATION, DEFAULT_HEIGHT_PERCENTILE
from ..generators.surface_builder import build_surface
from ..models.classes import LasClass, TopoClass
from ..models.geometry import Footprint, Point2D, Triangle3D
from ..models.mesh import TriangleMesh
from ..models.sample import ElevationSample
from ..processing.elevation import (
    ElevationEstimator,
    FeatureStateError,
    NoSamplesError,
)
from ..processing.footprint import PointLike, normalize_footprint

logger = logging.getLogger(__name__)


class FeatureState(Enum):
    """Lifecycle state of a feature."""
    CONSTRUCTED = "constructed"
    SAMPLING = "sampling"
    LIFTED = "lifted"


class TopoFeature(ABC):
    """
    Abstract lifted feature.

    Lifecycle: CONSTRUCTED -> SAMPLING -> LIFTED. Samples are accepted
    until lift() succeeds. A lift that fails with NoSamplesError leaves
    the feature in SAMPLING, so more samples may be added and lift()
    retried. After a successful lift the height and mesh never change.
    """

    def __init__(
        self,
        footprint: Iterable[PointLike],
        feature_id: str,
        attributes: Optional[Mapping[str, str]] = None,
        layer_name: str = "",
        height_percentile: float = DEFAULT_HEIGHT_PERCENTILE,
        base_elevation: float = DEFAULT_BASE_ELEVATION
    ):
        """
        Initialize feature.

        Args:
            footprint: Exterior ring vertices (Point2D or (x, y) pairs)
            feature_id: Opaque identifier
            attributes: Attribute name -> string value
            layer_name: Source layer the footprint was read from
            height_percentile: Percentile (0..1) used to resolve the height
            base_elevation: Z of wall bases

        Raises:
            ConstructionError: If the footprint is degenerate
            ValueError: If height_percentile is outside [0, 1]
        """
        if not (0.0 <= height_percentile <= 1.0):
            raise ValueError(
                f"height_percentile must be between 0 and 1, got {height_percentile}"
            )

        self._footprint: Footprint = normalize_footprint(footprint)
        self._id = str(feature_id)
        self._attributes = MappingProxyType(dict(attributes or {}))
        self._layer_name = layer_name
        self._height_percentile = height_percentile
        self._base_elevation = base_elevation

        self._estimator = ElevationEstimator(self.admit_sample)
        self._state = FeatureState.CONSTRUCTED
        self._height: Optional[float] = None
        self._mesh: Optional[TriangleMesh] = None

    # -------------------------------------------------------------------------
    # Kind-specific behavior
    # -------------------------------------------------------------------------

    @abstractmethod
    def admit_sample(self, sample: ElevationSample) -> bool:
        """Decide whether a sample contributes to this feature's height."""
        pass

    @abstractmethod
    def classify(self) -> TopoClass:
        """Topographic class of this feature kind."""
        pass

    @abstractmethod
    def is_hard(self) -> bool:
        """True for impermeable features that always occlude."""
        pass

    @abstractmethod
    def get_mtl(self) -> str:
        """OBJ material line for this feature kind."""
        pass

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def add_elevation_point(self, sample: ElevationSample) -> bool:
        """
        Offer an elevation sample to the feature.

        Args:
            sample: Candidate sample

        Returns:
            True if the sample was admitted

        Raises:
            FeatureStateError: If the feature has already been lifted
        """
        if self._state is FeatureState.LIFTED:
            raise FeatureStateError(f"Feature {self._id} is already lifted")

        self._state = FeatureState.SAMPLING
        return self._estimator.add_sample(sample)

    def add_sample(
        self,
        x: float,
        y: float,
        z: float,
        radius: float = 0.0,
        classification: LasClass = LasClass.UNCLASSIFIED,
        last_return: bool = True
    ) -> bool:
        """Convenience wrapper around add_elevation_point."""
        sample = ElevationSample(
            position=Point2D(x, y),
            z=z,
            radius=radius,
            classification=classification,
            is_last_return=last_return,
        )
        return self.add_elevation_point(sample)

    # -------------------------------------------------------------------------
    # Lifting
    # -------------------------------------------------------------------------

    def resolve_height(self) -> float:
        """Reduce the elevation buffer to one height; lift() commits it."""
        return self._estimator.compute(self._height_percentile)

    def build_mesh(self, height: float) -> TriangleMesh:
        """Extrude the footprint from the base elevation to height."""
        return build_surface(self._footprint, height, self._base_elevation, self._id)

    def lift(self) -> float:
        """
        Resolve the height and build the mesh.

        Returns:
            Resolved height

        Raises:
            NoSamplesError: If no sample was admitted; the feature stays
                in SAMPLING and lift() may be retried
            FeatureStateError: If the feature has already been lifted
        """
        if self._state is FeatureState.LIFTED:
            raise FeatureStateError(f"Feature {self._id} is already lifted")

        try:
            height = self.resolve_height()
        except NoSamplesError:
            self._state = FeatureState.SAMPLING
            logger.debug(f"Feature {self._id}: no admitted samples, height unresolved")
            raise

        mesh = self.build_mesh(height)

        # Nothing is committed until the mesh exists
        self._estimator.freeze()
        self._mesh = mesh
        self._height = height
        self._state = FeatureState.LIFTED

        logger.debug(
            f"Feature {self._id}: lifted to {height:.3f} from "
            f"{self._estimator.sample_count} samples"
        )
        return height

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def layer_name(self) -> str:
        return self._layer_name

    @property
    def attributes(self) -> Mapping[str, str]:
        """Read-only view of the attribute map."""
        return self._attributes

    def get_attribute(self, name: str) -> Optional[str]:
        """Attribute value by name, or None if absent."""
        return self._attributes.get(name)

    @property
    def footprint(self) -> Footprint:
        return self._footprint

    @property
    def height_percentile(self) -> float:
        return self._height_percentile

    @property
    def base_elevation(self) -> float:
        return self._base_elevation

    @property
    def state(self) -> FeatureState:
        return self._state

    @property
    def is_lifted(self) -> bool:
        return self._state is FeatureState.LIFTED

    @property
    def sample_count(self) -> int:
        """Number of admitted samples so far."""
        return self._estimator.sample_count

    @property
    def elevations(self) -> Tuple[float, ...]:
        """Admitted elevations in arrival order."""
        return self._estimator.elevations

    @property
    def height(self) -> Optional[float]:
        """Resolved height, or None before a successful lift."""
        return self._height

    @property
    def mesh(self) -> Optional[TriangleMesh]:
        """Lifted mesh, or None before a successful lift."""
        return self._mesh

    @property
    def roof_triangles(self) -> Tuple[Triangle3D, ...]:
        return self._lifted_mesh().roof

    @property
    def wall_triangles(self) -> Tuple[Triangle3D, ...]:
        return self._lifted_mesh().walls

    def _lifted_mesh(self) -> TriangleMesh:
        if self._mesh is None:
            raise FeatureStateError(f"Feature {self._id} has not been lifted")
        return self._mesh

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, "
            f"vertices={self._footprint.vertex_count}, state={self._state.value})"
        )
