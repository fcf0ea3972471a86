"""Preliminary section sizing from span."""

import math
from typing import Tuple


def _round_to(value: float, step: float) -> float:
    """Round half away from zero to a multiple of step."""
    return math.floor(value / step + 0.5) * step


def suggest_section(span: float) -> Tuple[float, float]:
    """
    Suggest a starting width and height for a girder.

    Height = L/15 and width = h/2, both rounded to 50 mm, with minimums of
    400 mm and 200 mm.

    Args:
        span: Girder span in mm

    Returns:
        (width, height) in mm
    """
    if span <= 0:
        raise ValueError("Span must be greater than zero for section sizing")
    height = _round_to(span / 15, 50)
    width = _round_to(height / 2, 50)
    return float(max(width, 200)), float(max(height, 400))
