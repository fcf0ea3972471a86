"""
Input data models for girder rebar design.

``GirderDesignInput`` validates user-facing values with Pydantic (span,
section and girder spacing in mm, vehicle load in kN, wheel span in m).
``BridgeGeometry`` is the immutable, engine-facing geometry in mm; the engine
assumes it has already been validated.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from girder_rebar.exceptions import InputValidationError
from girder_rebar.utils.constants import MM_PER_M, N_PER_KN


@dataclass(frozen=True)
class BridgeGeometry:
    """Girder geometry, all lengths in mm."""
    span: float           # L
    width: float          # b
    height: float         # h
    wheel_span: float     # axle spacing
    girder_spacing: float

    @classmethod
    def from_user_units(
        cls,
        span: float,
        width: float,
        height: float,
        wheel_span_m: float,
        girder_spacing: float,
    ) -> "BridgeGeometry":
        """Build geometry with the wheel span given in metres."""
        return cls(
            span=float(span),
            width=float(width),
            height=float(height),
            wheel_span=float(wheel_span_m) * MM_PER_M,
            girder_spacing=float(girder_spacing),
        )


class GirderDesignInput(BaseModel):
    """Validated design request as entered by a user."""

    model_config = ConfigDict(frozen=True)

    span: float = Field(..., gt=0, description="Girder span in mm")
    width: float = Field(..., gt=0, description="Girder width in mm")
    height: float = Field(..., gt=0, description="Girder height in mm")
    vehicle_load: float = Field(..., gt=0, description="Total vehicle load in kN")
    wheel_span: float = Field(..., gt=0, description="Axle spacing in m")
    girder_spacing: float = Field(..., gt=0, description="Girder spacing in mm")

    @property
    def vehicle_load_n(self) -> float:
        """Vehicle load in N."""
        return self.vehicle_load * N_PER_KN

    def to_geometry(self) -> BridgeGeometry:
        return BridgeGeometry.from_user_units(
            span=self.span,
            width=self.width,
            height=self.height,
            wheel_span_m=self.wheel_span,
            girder_spacing=self.girder_spacing,
        )


def parse_design_input(data: dict) -> GirderDesignInput:
    """Validate a raw mapping of inputs.

    Raises:
        InputValidationError: if any field is missing, non-numeric or not
            strictly positive.
    """
    try:
        return GirderDesignInput(**data)
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in exc.errors()
        )
        raise InputValidationError(
            f"Invalid design input ({fields}). All values must be greater than zero.",
            errors=exc.errors(),
        ) from exc
