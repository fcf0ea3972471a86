"""
Output data models for girder rebar design results.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class DesignStatus(str, Enum):
    """Terminal state of a design search."""
    FOUND = "found"
    INFEASIBLE = "infeasible"


class CandidateSummary(BaseModel):
    """Outcome for one bar diameter tried during the search."""

    model_config = ConfigDict(frozen=True)

    diameter: float  # mm
    feasible: bool
    rejection_reason: Optional[str] = None
    total_cost: Optional[float] = None
    selected: bool = False


class RebarDesign(BaseModel):
    """Final reinforcement design (the cheapest feasible candidate)."""

    model_config = ConfigDict(frozen=True)

    status: DesignStatus = DesignStatus.FOUND
    design_possible: bool = True
    error_message: str = ""

    # Flexural reinforcement
    rebar_rows: int = 0
    rebar_count_row1: int = 0
    rebar_count_row2: int = 0
    flexure_rebar_diameter: float = 0  # mm
    effective_depth: float = 0  # h0 in mm
    xi: float = 0  # x / h0

    # Shear reinforcement
    stirrup_legs: int = 0
    stirrup_diameter: float = 0  # mm
    stirrup_spacing: float = 0  # mm
    bent_rebars_used: bool = False
    bent_rebar_count: int = 0

    # Costs
    concrete_cost: float = 0
    steel_cost: float = 0
    labor_cost: float = 0
    total_cost: float = 0

    # Design forces
    max_moment: float = 0  # N·mm
    max_shear: float = 0  # N

    candidates: tuple[CandidateSummary, ...] = ()

    @property
    def total_bars(self) -> int:
        return self.rebar_count_row1 + self.rebar_count_row2

    @property
    def reinforcement_summary(self) -> str:
        """Quick summary of reinforcement."""
        if not self.design_possible:
            return self.error_message
        d = int(self.flexure_rebar_diameter)
        summary = f"Bottom: {self.total_bars}-{d}φ"
        if self.rebar_rows > 1:
            summary += f" (2L: {self.rebar_count_row1}+{self.rebar_count_row2})"
        summary += (
            f" | Stirrups: {self.stirrup_legs}L-{int(self.stirrup_diameter)}φ"
            f" @ {self.stirrup_spacing:.0f}mm"
        )
        if self.bent_rebars_used:
            summary += f" | Bent: {self.bent_rebar_count}-{d}φ"
        return summary
