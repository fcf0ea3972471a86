"""Design search tests: optimality, tie-break, infeasibility and engine state."""

import pytest

from girder_rebar.config import DesignSettings
from girder_rebar.core.cost import CostBreakdown, CostEstimator
from girder_rebar.core.flexure import Rejected
from girder_rebar.core.optimizer import (
    INFEASIBLE_MESSAGE, DesignOptimizer, RebarDesignEngine, SearchState, design_girder,
)
from girder_rebar.models.inputs import BridgeGeometry
from girder_rebar.models.outputs import DesignStatus


class ConstantCostEstimator(CostEstimator):
    """Prices every candidate the same."""

    def price(self, layout, shear, geometry):
        return CostBreakdown(
            concrete_cost=1000.0, steel_cost=1000.0, labor_cost=1000.0,
            girder_count=1.0, concrete_volume=1.0, steel_weight=1.0, stirrup_count=1.0,
        )


@pytest.fixture
def narrow_geometry():
    return BridgeGeometry.from_user_units(10000, 60, 500, 1.8, 2000)


class TestOptimality:

    def test_winner_is_cheapest_feasible(self, geometry_400x800):
        optimizer = DesignOptimizer()
        design = optimizer.design(geometry_400x800, 200_000)

        assert design.design_possible
        assert design.status == DesignStatus.FOUND

        forces = optimizer.load_analyzer.analyze(geometry_400x800, 200_000)
        costs = {}
        for d in optimizer.settings.candidate_diameters:
            layout = optimizer.flexure_planner.plan(d, geometry_400x800, forces)
            if isinstance(layout, Rejected):
                continue
            shear = optimizer.shear_designer.design(layout, geometry_400x800, forces)
            costs[d] = optimizer.cost_estimator.price(layout, shear, geometry_400x800).total_cost

        assert 14 in costs
        assert design.total_cost == pytest.approx(min(costs.values()))
        assert design.flexure_rebar_diameter == min(costs, key=costs.get)

    def test_cost_fields_sum(self, geometry_400x800):
        design = design_girder(geometry_400x800, 200_000)
        assert design.total_cost == pytest.approx(
            design.concrete_cost + design.steel_cost + design.labor_cost
        )

    def test_candidate_summaries(self, geometry_400x800):
        design = design_girder(geometry_400x800, 200_000)
        assert [c.diameter for c in design.candidates] == [14, 16, 18, 20, 22, 25, 28]
        selected = [c for c in design.candidates if c.selected]
        assert len(selected) == 1
        assert selected[0].diameter == design.flexure_rebar_diameter
        assert selected[0].total_cost == pytest.approx(design.total_cost)
        for c in design.candidates:
            if c.feasible:
                assert c.total_cost >= design.total_cost
            else:
                assert c.rejection_reason

    def test_forces_reported(self, geometry_400x800):
        optimizer = DesignOptimizer()
        forces = optimizer.load_analyzer.analyze(geometry_400x800, 200_000)
        design = optimizer.design(geometry_400x800, 200_000)
        assert design.max_moment == pytest.approx(forces.max_moment)
        assert design.max_shear == pytest.approx(forces.max_shear)

    def test_deterministic(self, geometry_400x800):
        first = design_girder(geometry_400x800, 350_000)
        second = design_girder(geometry_400x800, 350_000)
        assert first == second


class TestTieBreak:

    def test_equal_costs_keep_first_feasible(self, geometry_300x500):
        optimizer = DesignOptimizer()
        optimizer.cost_estimator = ConstantCostEstimator()
        design = optimizer.design(geometry_300x500, 0.0)

        assert design.flexure_rebar_diameter == 14
        assert design.total_cost == pytest.approx(3000)
        assert design.candidates[0].selected
        assert not any(c.selected for c in design.candidates[1:])

    def test_unordered_candidate_set_still_prefers_smallest(self, geometry_300x500):
        settings = DesignSettings(candidate_diameters=(28, 14, 20))
        optimizer = DesignOptimizer(settings=settings)
        optimizer.cost_estimator = ConstantCostEstimator()
        design = optimizer.design(geometry_300x500, 0.0)

        assert [c.diameter for c in design.candidates] == [14, 20, 28]
        assert design.flexure_rebar_diameter == 14

    def test_restricted_candidate_set(self, geometry_400x800):
        settings = DesignSettings(candidate_diameters=(20,))
        design = design_girder(geometry_400x800, 200_000, settings=settings)
        assert design.flexure_rebar_diameter == 20
        assert len(design.candidates) == 1


class TestDesignProperties:

    @pytest.mark.parametrize("width, height, load", [
        (300, 600, 100_000),
        (400, 800, 200_000),
        (400, 800, 400_000),
        (400, 1000, 650_000),
        (500, 1200, 1_000_000),
    ])
    def test_feasible_designs_respect_limits(self, width, height, load):
        geometry = BridgeGeometry.from_user_units(12000, width, height, 1.8, 2000)
        design = design_girder(geometry, load)
        assert design.design_possible
        assert design.xi < 0.518
        assert 100 <= design.stirrup_spacing <= 200
        assert design.stirrup_spacing % 25 == 0
        assert design.total_bars >= 2
        if design.rebar_rows == 2:
            assert design.rebar_count_row1 - design.rebar_count_row2 in (0, 1)
        else:
            assert design.rebar_count_row2 == 0
        if design.bent_rebars_used:
            assert design.bent_rebar_count == 2

    def test_heavy_vehicle_needs_bent_bars(self, geometry_400x800):
        """V ≈ 560 kN: stirrups alone would need s ≈ 74 mm."""
        design = design_girder(geometry_400x800, 400_000)
        assert design.design_possible
        assert design.bent_rebars_used is True
        assert design.bent_rebar_count == 2

    def test_light_vehicle_nominal_stirrups(self, geometry_400x800):
        design = design_girder(geometry_400x800, 0.0)
        assert design.stirrup_spacing == 200
        assert design.bent_rebars_used is False


class TestInfeasible:

    def test_no_diameter_fits(self, narrow_geometry):
        design = design_girder(narrow_geometry, 100_000)

        assert design.design_possible is False
        assert design.status == DesignStatus.INFEASIBLE
        assert design.error_message == INFEASIBLE_MESSAGE
        assert design.total_cost == 0
        assert design.max_moment == 0
        assert design.max_shear == 0
        assert design.total_bars == 0
        assert len(design.candidates) == 7
        assert not any(c.feasible for c in design.candidates)

    def test_summary_shows_message(self, narrow_geometry):
        design = design_girder(narrow_geometry, 100_000)
        assert design.reinforcement_summary == INFEASIBLE_MESSAGE


class TestEngine:

    def test_initial_state(self):
        engine = RebarDesignEngine()
        assert engine.state == SearchState.IDLE
        assert engine.outcome is None
        assert engine.geometry is None

    def test_successful_run(self):
        engine = RebarDesignEngine()
        assert engine.run(10000, 400, 800, 200_000, 1.8, 2000) is True
        assert engine.state == SearchState.IDLE
        assert engine.outcome == SearchState.FOUND
        assert engine.geometry.wheel_span == pytest.approx(1800)
        assert engine.get_design_results().design_possible

    def test_searching_only_during_run(self):
        engine = RebarDesignEngine()
        seen = []
        search = engine.optimizer.design

        def recording_design(geometry, load):
            seen.append(engine.state)
            return search(geometry, load)

        engine.optimizer.design = recording_design
        engine.run(10000, 400, 800, 200_000, 1.8, 2000)
        assert seen == [SearchState.SEARCHING]
        assert engine.state == SearchState.IDLE

    def test_run_overwrites_previous_result(self):
        engine = RebarDesignEngine()
        engine.run(10000, 400, 800, 200_000, 1.8, 2000)
        assert engine.run(10000, 60, 500, 200_000, 1.8, 2000) is False
        assert engine.state == SearchState.IDLE
        assert engine.outcome == SearchState.INFEASIBLE
        result = engine.get_design_results()
        assert result.status == DesignStatus.INFEASIBLE
        assert result.error_message == INFEASIBLE_MESSAGE
        assert result.total_cost == 0
        assert engine.geometry.width == 60

    def test_matches_pure_function(self):
        engine = RebarDesignEngine()
        engine.run(10000, 400, 800, 300_000, 1.8, 2000)
        geometry = BridgeGeometry.from_user_units(10000, 400, 800, 1.8, 2000)
        assert engine.get_design_results() == design_girder(geometry, 300_000)
