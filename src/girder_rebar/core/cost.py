"""
Cost estimate for a complete candidate (flexural + shear layout).

Calculates concrete volume and steel weight per girder, then scales by the
number of girders across the deck. Rebar unit cost rises linearly with
diameter above the base (smallest standard) size.
"""

from dataclasses import dataclass

from girder_rebar.codes import DesignCode, GB50010
from girder_rebar.config import DEFAULT_SETTINGS, DesignSettings
from girder_rebar.core.flexure import FlexuralLayout, bar_area
from girder_rebar.core.shear import ShearPlan
from girder_rebar.models.inputs import BridgeGeometry
from girder_rebar.utils.constants import MM3_PER_M3


@dataclass(frozen=True)
class CostBreakdown:
    """Itemised cost of one candidate, all girders included."""
    concrete_cost: float
    steel_cost: float
    labor_cost: float
    girder_count: float
    concrete_volume: float  # m³ per girder
    steel_weight: float     # tonne per girder
    stirrup_count: float    # per girder

    @property
    def total_cost(self) -> float:
        return self.concrete_cost + self.steel_cost + self.labor_cost


class CostEstimator:
    """
    Concrete, steel and labour pricing.
    """

    def __init__(self, code: DesignCode = None, settings: DesignSettings = None):
        self.code = code or GB50010()
        self.settings = settings or DEFAULT_SETTINGS

    def girder_count(self, girder_spacing: float) -> float:
        """Girders across the deck width (not rounded)."""
        if girder_spacing <= 0:
            return 1.0
        return max(self.settings.min_girder_count, self.settings.deck_width / girder_spacing)

    def rebar_rate(self, diameter: float) -> float:
        """Cost per tonne for a given bar diameter."""
        s = self.settings
        factor = 1.0 + (diameter - s.escalation_base_diameter) * s.diameter_escalation
        return s.rebar_rate * factor

    def price(
        self,
        layout: FlexuralLayout,
        shear: ShearPlan,
        geometry: BridgeGeometry,
    ) -> CostBreakdown:
        """
        Price a candidate.

        Args:
            layout: Flexural layout
            shear: Shear plan for the layout
            geometry: Girder geometry (mm)

        Returns:
            CostBreakdown for all girders
        """
        s = self.settings
        L = geometry.span
        n_girders = self.girder_count(geometry.girder_spacing)
        density = self.code.steel_density

        concrete_volume = L * geometry.width * geometry.height / MM3_PER_M3
        concrete_cost = concrete_volume * s.concrete_rate * n_girders

        # Longitudinal bars, plus the diagonal run of any bent bars
        n_bars = layout.total_bars
        extra_length = 0.0
        if shear.bent_bars_used:
            extra_length = shear.bent_bar_count * geometry.height * s.bent_bar_extra_length_factor
        flex_weight = bar_area(layout.diameter) * (n_bars * L + extra_length) * density
        flex_cost = flex_weight * self.rebar_rate(layout.diameter)

        # Stirrups along the span
        stirrup_count = L / shear.stirrup_spacing if shear.stirrup_spacing > 0 else 0.0
        stirrup_length = 2 * (geometry.width + geometry.height)
        stirrup_weight = (
            shear.stirrup_legs * bar_area(shear.stirrup_diameter)
            * stirrup_length * stirrup_count * density
        )
        stirrup_cost = stirrup_weight * self.rebar_rate(shear.stirrup_diameter)

        steel_cost = (flex_cost + stirrup_cost) * n_girders
        labor_cost = (n_bars + stirrup_count) * s.tie_rate * n_girders

        return CostBreakdown(
            concrete_cost=concrete_cost,
            steel_cost=steel_cost,
            labor_cost=labor_cost,
            girder_count=n_girders,
            concrete_volume=concrete_volume,
            steel_weight=flex_weight + stirrup_weight,
            stirrup_count=stirrup_count,
        )
