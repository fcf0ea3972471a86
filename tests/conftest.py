import pytest

from girder_rebar.core.loads import DesignForces
from girder_rebar.models.inputs import BridgeGeometry


@pytest.fixture
def geometry_300x500():
    """10 m span, 300 x 500 section, 1.8 m axle spacing, 2 m girder spacing."""
    return BridgeGeometry.from_user_units(10000, 300, 500, wheel_span_m=1.8, girder_spacing=2000)


@pytest.fixture
def geometry_400x800():
    return BridgeGeometry.from_user_units(10000, 400, 800, wheel_span_m=1.8, girder_spacing=2000)


@pytest.fixture
def zero_forces():
    return DesignForces(max_moment=0.0, max_shear=0.0)
