"""
Rebar design search.

Coordinates the workflow for one design request:
1. Design forces from dead + vehicle load (once)
2. For each standard diameter, smallest first:
   flexural layout -> shear design -> cost
3. Keep the cheapest feasible candidate (strictly cheaper replaces, so the
   first one found wins ties)
4. Return the winner, or an infeasible result with an explanatory message
"""

import math
from enum import Enum
from typing import List, Optional

from girder_rebar.codes import DesignCode, get_code
from girder_rebar.config import DEFAULT_SETTINGS, DesignSettings
from girder_rebar.core.cost import CostBreakdown, CostEstimator
from girder_rebar.core.flexure import FlexuralLayout, FlexuralLayoutPlanner, Rejected
from girder_rebar.core.loads import DesignForces, LoadAnalyzer
from girder_rebar.core.shear import ShearDesigner, ShearPlan
from girder_rebar.models.inputs import BridgeGeometry
from girder_rebar.models.outputs import CandidateSummary, DesignStatus, RebarDesign
from girder_rebar.utils.logger import get_logger

logger = get_logger(__name__)

INFEASIBLE_MESSAGE = (
    "Error: No valid reinforcement combination found.\n"
    "Increase beam dimensions."
)


class SearchState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    FOUND = "found"
    INFEASIBLE = "infeasible"


def build_design(
    layout: FlexuralLayout,
    shear: ShearPlan,
    cost: CostBreakdown,
    forces: DesignForces,
    candidates: tuple = (),
) -> RebarDesign:
    """Assemble the output model for a priced candidate."""
    return RebarDesign(
        status=DesignStatus.FOUND,
        design_possible=True,
        rebar_rows=layout.rows,
        rebar_count_row1=layout.count_row1,
        rebar_count_row2=layout.count_row2,
        flexure_rebar_diameter=layout.diameter,
        effective_depth=layout.effective_depth,
        xi=layout.xi,
        stirrup_legs=shear.stirrup_legs,
        stirrup_diameter=shear.stirrup_diameter,
        stirrup_spacing=shear.stirrup_spacing,
        bent_rebars_used=shear.bent_bars_used,
        bent_rebar_count=shear.bent_bar_count,
        concrete_cost=cost.concrete_cost,
        steel_cost=cost.steel_cost,
        labor_cost=cost.labor_cost,
        total_cost=cost.total_cost,
        max_moment=forces.max_moment,
        max_shear=forces.max_shear,
        candidates=candidates,
    )


class DesignOptimizer:
    """
    Diameter search over the standard bar set.
    """

    def __init__(self, code: DesignCode = None, settings: DesignSettings = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.code = code or get_code(self.settings.design_code)
        self.load_analyzer = LoadAnalyzer(self.code, self.settings)
        self.flexure_planner = FlexuralLayoutPlanner(self.code, self.settings)
        self.shear_designer = ShearDesigner(self.code, self.settings)
        self.cost_estimator = CostEstimator(self.code, self.settings)

    def search(self, geometry: BridgeGeometry, forces: DesignForces) -> RebarDesign:
        """
        Find the cheapest feasible layout for precomputed forces.

        Args:
            geometry: Girder geometry (mm)
            forces: Governing design forces

        Returns:
            RebarDesign (design_possible False when no diameter works)
        """
        best = None
        best_cost = math.inf
        summaries: List[CandidateSummary] = []

        for diameter in self.settings.candidate_diameters:
            result = self.flexure_planner.plan(diameter, geometry, forces)
            if isinstance(result, Rejected):
                logger.debug("d%s rejected: %s", diameter, result.reason)
                summaries.append(CandidateSummary(
                    diameter=diameter, feasible=False, rejection_reason=result.reason,
                ))
                continue

            shear = self.shear_designer.design(result, geometry, forces)
            cost = self.cost_estimator.price(result, shear, geometry)
            summaries.append(CandidateSummary(
                diameter=diameter, feasible=True, total_cost=cost.total_cost,
            ))
            logger.debug("d%s feasible: total cost %.2f", diameter, cost.total_cost)

            if cost.total_cost < best_cost:
                best_cost = cost.total_cost
                best = (result, shear, cost, len(summaries) - 1)

        if best is None:
            logger.info("No feasible reinforcement for %.0fx%.0f mm section",
                        geometry.width, geometry.height)
            return RebarDesign(
                status=DesignStatus.INFEASIBLE,
                design_possible=False,
                error_message=INFEASIBLE_MESSAGE,
                candidates=tuple(summaries),
            )

        layout, shear, cost, index = best
        summaries[index] = summaries[index].model_copy(update={"selected": True})
        logger.info("Selected d%s: %s bars, stirrups @ %.0f mm, total cost %.2f",
                    layout.diameter, layout.total_bars, shear.stirrup_spacing, cost.total_cost)
        return build_design(layout, shear, cost, forces, tuple(summaries))

    def design(self, geometry: BridgeGeometry, total_vehicle_load: float) -> RebarDesign:
        """Analyse forces, then search."""
        forces = self.load_analyzer.analyze(geometry, total_vehicle_load)
        return self.search(geometry, forces)


def design_girder(
    geometry: BridgeGeometry,
    total_vehicle_load: float,
    settings: Optional[DesignSettings] = None,
    code: Optional[DesignCode] = None,
) -> RebarDesign:
    """
    Design the girder reinforcement. Pure function of its inputs.

    Args:
        geometry: Validated girder geometry (mm)
        total_vehicle_load: Total vehicle load (N)
        settings: Optional design settings override
        code: Optional design code override

    Returns:
        Immutable RebarDesign
    """
    return DesignOptimizer(code, settings).design(geometry, total_vehicle_load)


class RebarDesignEngine:
    """
    Stateful front for callers that run a request and read the result back.

    Holds the last geometry and design; every ``run`` overwrites them. The
    engine is SEARCHING only while ``run`` executes and is IDLE again when it
    returns; ``outcome`` keeps FOUND or INFEASIBLE for the last request. Use
    one instance per concurrent request.
    """

    def __init__(self, settings: DesignSettings = None, code: DesignCode = None):
        self.optimizer = DesignOptimizer(code, settings)
        self.state = SearchState.IDLE
        self.outcome: Optional[SearchState] = None
        self.geometry: Optional[BridgeGeometry] = None
        self.design = RebarDesign()

    def run(
        self,
        span: float,
        width: float,
        height: float,
        total_vehicle_load: float,
        wheel_span: float,
        girder_spacing: float,
    ) -> bool:
        """
        Run a design request.

        Args:
            span, width, height, girder_spacing: mm
            total_vehicle_load: N
            wheel_span: m

        Returns:
            True when a feasible design was found
        """
        self.geometry = BridgeGeometry.from_user_units(
            span, width, height, wheel_span, girder_spacing
        )
        self.design = RebarDesign()
        self.outcome = None
        self.state = SearchState.SEARCHING
        try:
            self.design = self.optimizer.design(self.geometry, total_vehicle_load)
        finally:
            self.state = SearchState.IDLE

        self.outcome = SearchState.FOUND if self.design.design_possible else SearchState.INFEASIBLE
        return self.design.design_possible

    def get_design_results(self) -> RebarDesign:
        return self.design
