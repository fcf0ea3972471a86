# Data models for girder rebar design
from .inputs import BridgeGeometry, GirderDesignInput, parse_design_input
from .outputs import CandidateSummary, DesignStatus, RebarDesign
