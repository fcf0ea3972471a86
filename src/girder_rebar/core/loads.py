"""
Design force analysis for a simply supported girder.

Dead load:
- Self weight q = b × h × γc as a uniform line load
- M = qL²/8, V = qL/2

Live load (two-axle vehicle):
- Vehicle load distributed to one girder line by girder spacing (m) / 1.7
  for moment and / 1.4 for shear
- Moment at L/2 - s/4 from the support A reaction
- Shear with both axles placed next to the support
"""

from dataclasses import dataclass

from girder_rebar.codes import DesignCode, GB50010
from girder_rebar.config import DEFAULT_SETTINGS, DesignSettings
from girder_rebar.models.inputs import BridgeGeometry
from girder_rebar.utils.constants import MM_PER_M


@dataclass(frozen=True)
class DesignForces:
    """Governing forces shared by every candidate in a search."""
    max_moment: float  # N·mm
    max_shear: float   # N
    dead_moment: float = 0.0
    dead_shear: float = 0.0
    live_moment: float = 0.0
    live_shear: float = 0.0


def distribution_factor(girder_spacing: float, divisor: float) -> float:
    """Fraction of the vehicle load carried by one girder line.

    Args:
        girder_spacing: Girder spacing in mm
        divisor: 1.7 for moment, 1.4 for shear

    Returns:
        S(m) / divisor, or 1.0 when the spacing is not positive
    """
    spacing_m = girder_spacing / MM_PER_M
    if spacing_m <= 0:
        return 1.0
    return spacing_m / divisor


def two_axle_moment(span: float, axle_load: float, wheel_span: float) -> float:
    """Live moment at x = L/2 - s/4 for two equal axle loads (N·mm)."""
    x_crit = span / 2.0 - wheel_span / 4.0
    reaction_a = (axle_load * (span - x_crit) + axle_load * (span - x_crit - wheel_span)) / span
    return reaction_a * x_crit


def two_axle_shear(span: float, axle_load: float, wheel_span: float) -> float:
    """Live shear at the support with both axles on the span (N)."""
    return (axle_load * span + axle_load * (span - wheel_span)) / span


class LoadAnalyzer:
    """
    Dead + live load analysis for one girder line.
    """

    def __init__(self, code: DesignCode = None, settings: DesignSettings = None):
        self.code = code or GB50010()
        self.settings = settings or DEFAULT_SETTINGS

    def analyze(self, geometry: BridgeGeometry, total_vehicle_load: float) -> DesignForces:
        """
        Compute governing moment and shear.

        Args:
            geometry: Girder geometry in mm (validated by the caller)
            total_vehicle_load: Total vehicle load in N

        Returns:
            DesignForces with dead + live effects
        """
        L = geometry.span
        q = geometry.width * geometry.height * self.code.concrete_unit_weight  # N/mm

        dead_moment = q * L ** 2 / 8.0
        dead_shear = q * L / 2.0

        load_moment = total_vehicle_load * distribution_factor(
            geometry.girder_spacing, self.settings.moment_distribution_divisor
        )
        load_shear = total_vehicle_load * distribution_factor(
            geometry.girder_spacing, self.settings.shear_distribution_divisor
        )

        live_moment = two_axle_moment(L, load_moment / 2.0, geometry.wheel_span)
        live_shear = two_axle_shear(L, load_shear / 2.0, geometry.wheel_span)

        return DesignForces(
            max_moment=dead_moment + live_moment,
            max_shear=dead_shear + live_shear,
            dead_moment=dead_moment,
            dead_shear=dead_shear,
            live_moment=live_moment,
            live_shear=live_shear,
        )
