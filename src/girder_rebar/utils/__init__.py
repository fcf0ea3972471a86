# Shared constants and helpers
from .constants import REBAR_COLORS, STANDARD_BAR_SIZES
from .logger import get_logger
