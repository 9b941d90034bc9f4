import pytest

from separation3d.models import ElevationSample, LasClass, Point2D
from separation3d.features import SeparationFeature


@pytest.fixture
def unit_square():
    """Unit square footprint, counter-clockwise, open ring"""
    return [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.fixture
def l_shape():
    """Concave L-shaped footprint with area 3"""
    return [
        (0.0, 0.0), (2.0, 0.0), (2.0, 1.0),
        (1.0, 1.0), (1.0, 2.0), (0.0, 2.0),
    ]


@pytest.fixture
def fence_strip():
    """Thin 10 m x 0.2 m fence footprint"""
    return [(0.0, 0.0), (10.0, 0.0), (10.0, 0.2), (0.0, 0.2)]


@pytest.fixture
def scenario_samples():
    """Samples of the unit-square scenario: only the first two are admitted"""
    center = Point2D(0.5, 0.5)
    return [
        ElevationSample(center, 10.0, classification=LasClass.GROUND, is_last_return=True),
        ElevationSample(center, 12.0, classification=LasClass.GROUND, is_last_return=True),
        ElevationSample(center, 5.0, classification=LasClass.GROUND, is_last_return=False),
        ElevationSample(center, 20.0, classification=LasClass.BUILDING, is_last_return=True),
    ]


@pytest.fixture
def square_feature(unit_square):
    """Unit-square separation feature with attributes"""
    return SeparationFeature(
        unit_square,
        "sep-1",
        {"type": "fence", "material": "wood"},
        layer_name="separations",
    )


@pytest.fixture
def lifted_square(square_feature, scenario_samples):
    """Unit-square feature lifted from the scenario samples"""
    for sample in scenario_samples:
        square_feature.add_elevation_point(sample)
    square_feature.lift()
    return square_feature
