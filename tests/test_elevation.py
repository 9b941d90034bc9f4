"""
Tests for separation3d.processing.elevation.
"""

import pytest

from separation3d.models import ElevationSample, LasClass, Point2D
from separation3d.processing.elevation import (
    ElevationEstimator,
    FeatureStateError,
    NoSamplesError,
    SEPARATION_EXCLUDED_CLASSES,
    admit_separation_sample,
    percentile_height,
)


def _sample(z, cls=LasClass.GROUND, last=True):
    return ElevationSample(Point2D(0.0, 0.0), z, classification=cls, is_last_return=last)


class TestAdmitSeparationSample:
    """Tests for the separation admission rule."""

    @pytest.mark.parametrize("cls", list(LasClass))
    def test_last_returns(self, cls):
        expected = cls not in (LasClass.BUILDING, LasClass.WATER)
        assert admit_separation_sample(_sample(1.0, cls, last=True)) is expected

    @pytest.mark.parametrize("cls", list(LasClass))
    def test_non_last_returns_always_rejected(self, cls):
        assert admit_separation_sample(_sample(1.0, cls, last=False)) is False

    def test_excluded_set(self):
        assert SEPARATION_EXCLUDED_CLASSES == {LasClass.BUILDING, LasClass.WATER}


class TestPercentileHeight:
    """Tests for percentile_height."""

    def test_eightieth_percentile(self):
        assert percentile_height([1, 2, 3, 4, 5], 0.8) == pytest.approx(4.2)

    def test_order_independent(self):
        assert percentile_height([5, 1, 4, 2, 3], 0.8) == pytest.approx(4.2)

    def test_two_values(self):
        assert percentile_height([10.0, 12.0], 0.8) == pytest.approx(11.6)

    def test_single_value(self):
        assert percentile_height([7.5], 0.8) == 7.5

    def test_extremes(self):
        values = [3.0, 1.0, 2.0]
        assert percentile_height(values, 0.0) == 1.0
        assert percentile_height(values, 1.0) == 3.0

    def test_median(self):
        assert percentile_height([1.0, 2.0, 3.0, 4.0], 0.5) == pytest.approx(2.5)

    def test_empty_raises(self):
        with pytest.raises(NoSamplesError):
            percentile_height([], 0.8)

    @pytest.mark.parametrize("p", [-0.1, 1.5])
    def test_invalid_percentile(self, p):
        with pytest.raises(ValueError):
            percentile_height([1.0], p)

    def test_returns_python_float(self):
        assert type(percentile_height([1, 2], 0.5)) is float


class TestElevationEstimator:
    """Tests for ElevationEstimator."""

    def test_filters_samples(self):
        est = ElevationEstimator()
        assert est.add_sample(_sample(10.0)) is True
        assert est.add_sample(_sample(5.0, last=False)) is False
        assert est.add_sample(_sample(20.0, LasClass.BUILDING)) is False
        assert est.add_sample(_sample(1.0, LasClass.WATER)) is False
        assert est.add_sample(_sample(12.0, LasClass.HIGH_VEGETATION)) is True

        assert est.elevations == (10.0, 12.0)
        assert est.sample_count == 2
        assert est.rejected_count == 3

    @pytest.mark.parametrize("z", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_elevation_discarded(self, z):
        est = ElevationEstimator()
        assert est.add_sample(_sample(z)) is False
        assert est.rejected_count == 1

        with pytest.raises(NoSamplesError):
            est.resolve(0.8)

    def test_non_finite_does_not_reach_height(self):
        est = ElevationEstimator()
        for z in (1.0, float("nan"), 3.0, float("inf")):
            est.add_sample(_sample(z))

        assert est.elevations == (1.0, 3.0)
        assert est.resolve(0.5) == 2.0

    def test_compute_does_not_freeze(self):
        est = ElevationEstimator()
        est.add_sample(_sample(2.0))

        assert est.compute(0.8) == 2.0
        assert not est.is_frozen
        est.add_sample(_sample(4.0))
        assert est.compute(1.0) == 4.0

    def test_freeze_twice(self):
        est = ElevationEstimator()
        est.freeze()
        with pytest.raises(FeatureStateError):
            est.freeze()

    def test_resolve(self):
        est = ElevationEstimator()
        for z in (1, 2, 3, 4, 5):
            est.add_sample(_sample(z))

        assert est.resolve(0.8) == pytest.approx(4.2)
        assert est.is_frozen

    def test_resolve_empty_stays_open(self):
        est = ElevationEstimator()
        with pytest.raises(NoSamplesError):
            est.resolve(0.8)

        assert not est.is_frozen
        est.add_sample(_sample(3.0))
        assert est.resolve(0.8) == 3.0

    def test_frozen_rejects_samples(self):
        est = ElevationEstimator()
        est.add_sample(_sample(3.0))
        est.resolve(0.8)

        with pytest.raises(FeatureStateError):
            est.add_sample(_sample(4.0))

    def test_frozen_rejects_second_resolve(self):
        est = ElevationEstimator()
        est.add_sample(_sample(3.0))
        est.resolve(0.8)

        with pytest.raises(FeatureStateError):
            est.resolve(0.8)

    def test_custom_admission_rule(self):
        est = ElevationEstimator(lambda s: s.z > 0)
        est.add_sample(_sample(-1.0))
        est.add_sample(_sample(2.0, LasClass.BUILDING))
        assert est.elevations == (2.0,)
