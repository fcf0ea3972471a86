"""
Engineering constants for RC girder rebar design.
"""

from types import MappingProxyType

# Standard longitudinal bar sizes in mm, in search order
STANDARD_BAR_SIZES = (14, 16, 18, 20, 22, 25, 28)

# Stirrup bar size in mm
STIRRUP_BAR_SIZE = 8

# Clear cover to stirrups (mm)
CONCRETE_COVER = 30.0

# Unit conversions
MM3_PER_M3 = 1e9
MM_PER_M = 1000.0
N_PER_KN = 1000.0

# Bar colours for diagrams (matplotlib hex)
REBAR_COLORS = MappingProxyType({
    14: "#0000ff",
    16: "#008000",
    18: "#ffff00",
    20: "#ffa500",
    22: "#ff00ff",
    25: "#800080",
    28: "#a52a2a",
})

BENT_BAR_COLOR = "#ff0000"
CONCRETE_COLOR = "#d3d3d3"
STIRRUP_COLOR = "#000000"

DESIGN_FAILED_BANNER = "DESIGN FAILED"
