"""
Flexural layout planning for one candidate bar diameter.

For a given diameter:
1. Effective depth h0 assuming a single row
2. Required steel area from M / (fy × 0.9 × h0), floored at As,min
3. Bar count and row arrangement (one or two rows)
4. Ductility check on the relative compression zone depth xi

A candidate that cannot be detailed is returned as ``Rejected`` and skipped
by the optimizer; nothing here raises.
"""

import math
from dataclasses import dataclass
from typing import Union

from girder_rebar.codes import DesignCode, GB50010
from girder_rebar.config import DEFAULT_SETTINGS, DesignSettings
from girder_rebar.core.loads import DesignForces
from girder_rebar.models.inputs import BridgeGeometry


@dataclass(frozen=True)
class FlexuralLayout:
    """Longitudinal reinforcement arrangement for one diameter."""
    diameter: float       # mm
    rows: int             # 1 or 2
    count_row1: int
    count_row2: int
    effective_depth: float  # h0 (mm)
    xi: float             # x / h0
    required_area: float  # mm²
    provided_area: float  # mm²
    bars_per_row_max: int

    @property
    def total_bars(self) -> int:
        return self.count_row1 + self.count_row2


@dataclass(frozen=True)
class Rejected:
    """Candidate diameter that cannot be detailed."""
    diameter: float
    reason: str


FlexuralPlanResult = Union[FlexuralLayout, Rejected]


def bar_area(diameter: float) -> float:
    """Area of one bar (mm²)."""
    return math.pi * (diameter / 2.0) ** 2


class FlexuralLayoutPlanner:
    """
    Bottom reinforcement layout for a rectangular girder section.
    """

    def __init__(self, code: DesignCode = None, settings: DesignSettings = None):
        self.code = code or GB50010()
        self.settings = settings or DEFAULT_SETTINGS

    def first_layer_depth(self, diameter: float) -> float:
        """Distance from the tension face to the centre of the first layer."""
        return self.settings.cover + self.settings.stirrup_diameter + diameter / 2.0

    def max_bars_per_row(self, diameter: float, width: float) -> int:
        """Number of bars that fit in one layer across the clear width."""
        s = self.settings
        available_width = width - 2 * s.cover - 2 * s.stirrup_diameter
        if available_width < diameter:
            return 0
        min_spacing = max(s.min_bar_gap, diameter)
        return 1 + math.floor((available_width - diameter) / (diameter + min_spacing))

    def plan(
        self,
        diameter: float,
        geometry: BridgeGeometry,
        forces: DesignForces,
    ) -> FlexuralPlanResult:
        """
        Plan the flexural layout for one diameter.

        Args:
            diameter: Candidate bar diameter (mm)
            geometry: Girder geometry (mm)
            forces: Governing design forces

        Returns:
            FlexuralLayout, or Rejected with the reason
        """
        s = self.settings
        fy = self.code.fy
        b = geometry.width
        h = geometry.height
        area_per_bar = bar_area(diameter)

        y1 = self.first_layer_depth(diameter)
        h0 = h - y1
        if h0 <= 0:
            return Rejected(diameter, "effective depth is not positive")

        required_area = forces.max_moment / (fy * s.lever_arm_factor * h0)
        required_area = max(required_area, self.code.get_minimum_steel_area(b, h))

        total_bars = max(math.ceil(required_area / area_per_bar), s.min_bar_count)

        per_row = self.max_bars_per_row(diameter, b)
        if per_row == 0:
            return Rejected(diameter, "bar does not fit in the section width")

        if total_bars <= per_row:
            rows, row1, row2 = 1, total_bars, 0
        else:
            rows = 2
            row1 = math.ceil(total_bars / 2)
            row2 = total_bars - row1
            if row1 > per_row or row2 > per_row:
                return Rejected(
                    diameter,
                    f"{total_bars} bars do not fit in two rows of {per_row}",
                )
            # Centroid of two layers, pitch d + gap
            y2 = y1 + diameter + s.layer_gap
            as1 = row1 * area_per_bar
            as2 = row2 * area_per_bar
            h0 = h - (as1 * y1 + as2 * y2) / (as1 + as2)

        provided_area = total_bars * area_per_bar
        x = provided_area * fy / (self.code.alpha_1 * self.code.fc * b)
        xi = x / h0
        if xi >= self.code.xi_b:
            return Rejected(
                diameter,
                f"xi = {xi:.3f} ≥ {self.code.xi_b} (over-reinforced)",
            )

        return FlexuralLayout(
            diameter=diameter,
            rows=rows,
            count_row1=row1,
            count_row2=row2,
            effective_depth=h0,
            xi=xi,
            required_area=required_area,
            provided_area=provided_area,
            bars_per_row_max=per_row,
        )
