"""
Shear reinforcement design for a planned flexural layout.

Stirrups (2 legs, 8 mm) are sized for Vs = V - Vc. When stirrups alone
would need a spacing below the minimum, two bars of the first layer are bent
up at 45° to carry part of the shear. Spacing is rounded down to 25 mm and
kept within [100, 200] mm.
"""

import math
from dataclasses import dataclass

from girder_rebar.codes import DesignCode, GB50010
from girder_rebar.config import DEFAULT_SETTINGS, DesignSettings
from girder_rebar.core.flexure import FlexuralLayout, bar_area
from girder_rebar.core.loads import DesignForces
from girder_rebar.models.inputs import BridgeGeometry


@dataclass(frozen=True)
class ShearPlan:
    """Stirrup and bent-bar arrangement."""
    stirrup_diameter: float  # mm
    stirrup_legs: int
    stirrup_spacing: float   # mm
    bent_bars_used: bool
    bent_bar_count: int
    concrete_capacity: float  # Vc (N)
    steel_demand: float       # Vs carried by stirrups (N)
    unclamped_spacing: float  # stirrup-only spacing before bent bars (mm)


class ShearDesigner:
    """
    Stirrup spacing and bent-bar design.
    """

    def __init__(self, code: DesignCode = None, settings: DesignSettings = None):
        self.code = code or GB50010()
        self.settings = settings or DEFAULT_SETTINGS

    def stirrup_area(self) -> float:
        """Total area of all stirrup legs (mm²)."""
        return self.settings.stirrup_legs * bar_area(self.settings.stirrup_diameter)

    def round_spacing(self, spacing: float) -> float:
        """Floor to the spacing step and clamp to the allowed range."""
        s = self.settings
        spacing = math.floor(spacing / s.spacing_step) * s.spacing_step
        return min(max(spacing, s.min_stirrup_spacing), s.max_stirrup_spacing)

    def design(
        self,
        layout: FlexuralLayout,
        geometry: BridgeGeometry,
        forces: DesignForces,
    ) -> ShearPlan:
        """
        Design shear reinforcement for a feasible flexural layout.

        Args:
            layout: Flexural layout (provides h0 and first-row bars)
            geometry: Girder geometry (mm)
            forces: Governing design forces

        Returns:
            ShearPlan (always; falls back to the maximum spacing)
        """
        s = self.settings
        h0 = layout.effective_depth
        vc = self.code.get_concrete_shear_capacity(geometry.width, h0)
        vs = forces.max_shear - vc

        if vs <= 0:
            # Nominal stirrups only
            return ShearPlan(
                stirrup_diameter=s.stirrup_diameter,
                stirrup_legs=s.stirrup_legs,
                stirrup_spacing=s.max_stirrup_spacing,
                bent_bars_used=False,
                bent_bar_count=0,
                concrete_capacity=vc,
                steel_demand=0.0,
                unclamped_spacing=math.inf,
            )

        capacity_per_mm = self.stirrup_area() * self.code.fy * h0
        stirrup_only_spacing = capacity_per_mm / vs

        bent_used = False
        bent_count = 0
        if stirrup_only_spacing < s.min_stirrup_spacing and layout.count_row1 >= 2:
            bent_used = True
            bent_count = s.bent_bar_count
            vsb = self.code.get_bent_bar_shear_capacity(
                bent_count * bar_area(layout.diameter), s.bent_bar_angle
            )
            vs -= vsb

        if vs > 0:
            spacing = self.round_spacing(capacity_per_mm / vs)
        else:
            spacing = s.max_stirrup_spacing

        return ShearPlan(
            stirrup_diameter=s.stirrup_diameter,
            stirrup_legs=s.stirrup_legs,
            stirrup_spacing=spacing,
            bent_bars_used=bent_used,
            bent_bar_count=bent_count,
            concrete_capacity=vc,
            steel_demand=max(vs, 0.0),
            unclamped_spacing=stirrup_only_spacing,
        )
