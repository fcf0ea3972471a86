"""Input validation and unit conversion tests."""

import pytest
from pydantic import ValidationError

from girder_rebar.exceptions import InputValidationError
from girder_rebar.models.inputs import BridgeGeometry, GirderDesignInput, parse_design_input


VALID = {
    "span": 10000,
    "width": 300,
    "height": 600,
    "vehicle_load": 550,
    "wheel_span": 1.8,
    "girder_spacing": 2000,
}


class TestGirderDesignInput:

    def test_valid_input(self):
        request = parse_design_input(VALID)
        assert request.span == 10000
        assert request.vehicle_load_n == pytest.approx(550_000)

    def test_to_geometry_converts_wheel_span(self):
        geometry = parse_design_input(VALID).to_geometry()
        assert geometry == BridgeGeometry(10000.0, 300.0, 600.0, 1800.0, 2000.0)

    @pytest.mark.parametrize("field", list(VALID))
    def test_non_positive_rejected(self, field):
        data = dict(VALID, **{field: 0})
        with pytest.raises(InputValidationError) as exc_info:
            parse_design_input(data)
        assert field in str(exc_info.value)
        assert exc_info.value.errors

    def test_missing_field_rejected(self):
        data = dict(VALID)
        del data["height"]
        with pytest.raises(InputValidationError, match="height"):
            parse_design_input(data)

    def test_non_numeric_rejected(self):
        with pytest.raises(InputValidationError):
            parse_design_input(dict(VALID, span="long"))

    def test_frozen(self):
        request = GirderDesignInput(**VALID)
        with pytest.raises(ValidationError):
            request.span = 5


class TestBridgeGeometry:

    def test_from_user_units(self):
        geometry = BridgeGeometry.from_user_units(12000, 400, 800, 2.5, 1800)
        assert geometry.wheel_span == pytest.approx(2500)
        assert geometry.girder_spacing == 1800

    def test_immutable(self, geometry_300x500):
        with pytest.raises(AttributeError):
            geometry_300x500.span = 1
