"""Cost estimation tests."""

import math

import pytest

from girder_rebar.config import DesignSettings
from girder_rebar.core.cost import CostEstimator
from girder_rebar.core.flexure import FlexuralLayout, bar_area
from girder_rebar.core.shear import ShearPlan
from girder_rebar.models.inputs import BridgeGeometry


def make_layout(diameter=14, count=3):
    return FlexuralLayout(
        diameter=diameter, rows=1, count_row1=count, count_row2=0,
        effective_depth=455.0, xi=0.04, required_area=447.2,
        provided_area=count * bar_area(diameter), bars_per_row_max=6,
    )


def make_shear(spacing=200.0, bent=False, bent_count=0):
    return ShearPlan(
        stirrup_diameter=8, stirrup_legs=2, stirrup_spacing=spacing,
        bent_bars_used=bent, bent_bar_count=bent_count,
        concrete_capacity=72_345.0, steel_demand=0.0, unclamped_spacing=math.inf,
    )


@pytest.fixture
def estimator():
    return CostEstimator()


class TestGirderCount:

    def test_deck_width_over_spacing(self, estimator):
        assert estimator.girder_count(2000) == pytest.approx(5.0)
        assert estimator.girder_count(3000) == pytest.approx(10000 / 3000)

    def test_at_least_two_girders(self, estimator):
        assert estimator.girder_count(6000) == 2.0

    def test_deck_width_configurable(self):
        estimator = CostEstimator(settings=DesignSettings(deck_width=12000))
        assert estimator.girder_count(2000) == pytest.approx(6.0)


class TestRebarRate:

    def test_base_diameter_at_base_rate(self, estimator):
        assert estimator.rebar_rate(14) == pytest.approx(3500)

    def test_escalation_per_mm(self, estimator):
        assert estimator.rebar_rate(28) == pytest.approx(3500 * 1.35)

    def test_stirrups_below_base_are_cheaper(self, estimator):
        assert estimator.rebar_rate(8) == pytest.approx(3500 * 0.85)


class TestPrice:

    def test_itemised_costs(self, estimator, geometry_300x500):
        cost = estimator.price(make_layout(), make_shear(), geometry_300x500)

        assert cost.girder_count == pytest.approx(5.0)
        assert cost.concrete_volume == pytest.approx(1.5)
        assert cost.concrete_cost == pytest.approx(4500)
        assert cost.stirrup_count == pytest.approx(50)
        assert cost.labor_cost == pytest.approx((3 + 50) * 300 * 5)

        flex = bar_area(14) * 3 * 10000 * 7.85e-6 * 3500
        stirrups = 2 * bar_area(8) * 1600 * 50 * 7.85e-6 * 3500 * 0.85
        assert cost.steel_cost == pytest.approx((flex + stirrups) * 5)
        assert cost.total_cost == pytest.approx(
            cost.concrete_cost + cost.steel_cost + cost.labor_cost
        )

    def test_bent_bars_add_steel_only(self, estimator, geometry_300x500):
        plain = estimator.price(make_layout(), make_shear(), geometry_300x500)
        bent = estimator.price(make_layout(), make_shear(bent=True, bent_count=2), geometry_300x500)

        extra = bar_area(14) * 2 * 500 * 0.5 * 7.85e-6 * 3500 * 5
        assert bent.steel_cost - plain.steel_cost == pytest.approx(extra)
        assert bent.labor_cost == plain.labor_cost
        assert bent.concrete_cost == plain.concrete_cost

    def test_closer_stirrups_cost_more(self, estimator, geometry_300x500):
        wide = estimator.price(make_layout(), make_shear(200), geometry_300x500)
        close = estimator.price(make_layout(), make_shear(100), geometry_300x500)
        assert close.stirrup_count == pytest.approx(100)
        assert close.total_cost > wide.total_cost

    def test_stirrup_count_not_rounded(self, estimator, geometry_300x500):
        cost = estimator.price(make_layout(), make_shear(175), geometry_300x500)
        assert cost.stirrup_count == pytest.approx(10000 / 175)

    def test_unit_rates_from_settings(self, geometry_300x500):
        settings = DesignSettings(concrete_rate=1200, tie_rate=0)
        cost = CostEstimator(settings=settings).price(make_layout(), make_shear(), geometry_300x500)
        assert cost.concrete_cost == pytest.approx(9000)
        assert cost.labor_cost == 0

    def test_wider_girder_spacing_means_fewer_girders(self, estimator):
        narrow = BridgeGeometry.from_user_units(10000, 300, 500, 1.8, 2000)
        wide = BridgeGeometry.from_user_units(10000, 300, 500, 1.8, 2500)
        assert (estimator.price(make_layout(), make_shear(), wide).total_cost
                < estimator.price(make_layout(), make_shear(), narrow).total_cost)
