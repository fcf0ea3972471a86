"""
Design settings for the rebar search.

Every constant the engine depends on lives here so that a project can
override unit rates, detailing rules or the candidate bar set from a YAML
file without touching the calculation modules. Defaults reproduce the
standard C50 / HRB400 girder setup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from girder_rebar.exceptions import SettingsError
from girder_rebar.utils.constants import CONCRETE_COVER, STANDARD_BAR_SIZES, STIRRUP_BAR_SIZE


class DesignSettings(BaseModel):
    """Detailing rules, unit rates and load-model constants."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    design_code: str = Field(default="gb50010", description="Design code registry name")

    # Detailing
    cover: float = Field(default=CONCRETE_COVER, gt=0, description="Clear cover in mm")
    stirrup_diameter: float = Field(default=STIRRUP_BAR_SIZE, gt=0, description="Stirrup bar size in mm")
    stirrup_legs: int = Field(default=2, ge=1)
    min_bar_gap: float = Field(default=25.0, gt=0, description="Minimum clear gap between bars in mm")
    layer_gap: float = Field(default=25.0, gt=0, description="Vertical clear gap between bar layers in mm")
    min_bar_count: int = Field(default=2, ge=1)
    lever_arm_factor: float = Field(default=0.9, gt=0, le=1)
    candidate_diameters: Tuple[int, ...] = Field(default=STANDARD_BAR_SIZES)

    # Stirrup spacing
    min_stirrup_spacing: float = Field(default=100.0, gt=0)
    max_stirrup_spacing: float = Field(default=200.0, gt=0)
    spacing_step: float = Field(default=25.0, gt=0)

    # Bent bars
    bent_bar_count: int = Field(default=2, ge=1)
    bent_bar_angle: float = Field(default=45.0, gt=0, lt=90, description="Bend angle in degrees")
    bent_bar_extra_length_factor: float = Field(default=0.5, ge=0, description="Extra bar length per bend as a fraction of height")

    # Load distribution (girder spacing in m divided by these)
    moment_distribution_divisor: float = Field(default=1.7, gt=0)
    shear_distribution_divisor: float = Field(default=1.4, gt=0)

    # Costing
    deck_width: float = Field(default=10000.0, gt=0, description="Total deck width in mm used for girder count")
    min_girder_count: float = Field(default=2.0, gt=0)
    concrete_rate: float = Field(default=600.0, ge=0, description="Cost per m³ of concrete")
    rebar_rate: float = Field(default=3500.0, ge=0, description="Base cost per tonne of rebar")
    tie_rate: float = Field(default=300.0, ge=0, description="Labour cost per bar or stirrup placed")
    diameter_escalation: float = Field(default=0.025, ge=0, description="Rebar rate increase per mm above the base diameter")
    escalation_base_diameter: float = Field(default=14.0, gt=0)
    currency: str = "Yuan"

    @field_validator("candidate_diameters")
    @classmethod
    def _diameters_sorted(cls, value: Tuple[int, ...]) -> Tuple[int, ...]:
        if not value:
            raise ValueError("at least one candidate diameter is required")
        if any(d <= 0 for d in value):
            raise ValueError("candidate diameters must be positive")
        # Search order is smallest first; ties go to the first one found
        return tuple(sorted(set(value)))

    @field_validator("max_stirrup_spacing")
    @classmethod
    def _spacing_range(cls, value: float, info) -> float:
        lower = info.data.get("min_stirrup_spacing")
        if lower is not None and value < lower:
            raise ValueError("max_stirrup_spacing must not be below min_stirrup_spacing")
        return value


DEFAULT_SETTINGS = DesignSettings()


def load_settings(path: Optional[str | Path] = None) -> DesignSettings:
    """Load design settings from a YAML file.

    Parameters
    ----------
    path:
        YAML file with a flat mapping of setting names to values. ``None``
        returns the defaults.

    Raises
    ------
    SettingsError
        If the file is missing, is not valid YAML, or contains unknown keys
        or out-of-range values.
    """
    if path is None:
        return DEFAULT_SETTINGS

    path = Path(path)
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except FileNotFoundError as exc:
        raise SettingsError(f"Settings file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")

    # Allow the settings to sit under a top-level ``settings:`` key
    if "settings" in data:
        data = data["settings"] or {}
        if not isinstance(data, dict):
            raise SettingsError(f"'settings' in {path} must be a mapping")

    try:
        return DesignSettings(**data)
    except ValidationError as exc:
        raise SettingsError(f"Invalid design settings in {path}:\n{exc}") from exc
