"""Minimum-cost reinforcement design for RC bridge girders."""

from girder_rebar.config import DesignSettings, load_settings
from girder_rebar.core import RebarDesignEngine, design_girder, suggest_section
from girder_rebar.models import BridgeGeometry, GirderDesignInput, RebarDesign

__version__ = "0.1.0"
