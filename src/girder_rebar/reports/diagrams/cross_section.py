"""
Cross-section and longitudinal diagrams of the designed girder using Matplotlib.

Colour conventions:
    - Concrete: light gray fill, black outline
    - Main bars: fixed colour per diameter (``REBAR_COLORS``)
    - Bent bars: red
    - Stirrups: black
"""

import io

import matplotlib
matplotlib.use("Agg")          # non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle
import numpy as np

from girder_rebar.models.inputs import BridgeGeometry
from girder_rebar.models.outputs import RebarDesign
from girder_rebar.utils.constants import (
    BENT_BAR_COLOR, CONCRETE_COLOR, CONCRETE_COVER, DESIGN_FAILED_BANNER,
    REBAR_COLORS, STIRRUP_COLOR,
)

_DEFAULT_BAR_COLOR = "#e74c3c"
_LAYER_GAP = 25.0


def rebar_color(diameter: float) -> str:
    """Palette colour for a bar diameter."""
    return REBAR_COLORS.get(int(round(diameter)), _DEFAULT_BAR_COLOR)


def _finish(fig, return_figure: bool):
    plt.tight_layout()
    if return_figure:
        return fig
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    buf.seek(0)
    return buf.getvalue()


def _failure_figure(design: RebarDesign, figsize, return_figure: bool):
    """Banner plus the stored error message instead of geometry."""
    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.text(0.05, 0.55, DESIGN_FAILED_BANNER, color="red", fontsize=20,
            fontweight="bold", transform=ax.transAxes)
    ax.text(0.05, 0.40, design.error_message, color="black", fontsize=10,
            va="top", transform=ax.transAxes)
    ax.axis("off")
    return _finish(fig, return_figure)


def _display_run(ax, rise: float) -> float:
    """Horizontal data length that spans the same screen distance as ``rise``."""
    bbox = ax.get_window_extent()
    x0, x1 = ax.get_xlim()
    y0, y1 = ax.get_ylim()
    x_px = bbox.width / (x1 - x0)
    y_px = bbox.height / (y1 - y0)
    return rise * y_px / x_px


def _row_positions(count: int, x_start: float, x_end: float) -> np.ndarray:
    if count == 1:
        return np.array([(x_start + x_end) / 2])
    return np.linspace(x_start, x_end, count)


def generate_cross_section(
    geometry: BridgeGeometry,
    design: RebarDesign,
    cover: float = CONCRETE_COVER,
    return_figure: bool = True,
):
    """
    Generate the cross-section diagram.

    Args:
        geometry: Girder geometry in mm
        design: Design result to draw
        cover: Clear cover in mm
        return_figure: If True, return figure; if False, return PNG bytes

    Returns:
        Matplotlib figure or PNG bytes
    """
    figsize = (6, 6)
    if not design.design_possible:
        return _failure_figure(design, figsize, return_figure)

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    b = geometry.width
    h = geometry.height
    stirrup = design.stirrup_diameter
    d = design.flexure_rebar_diameter
    r = d / 2
    color = rebar_color(d)

    ax.add_patch(Rectangle((0, 0), b, h, facecolor=CONCRETE_COLOR, edgecolor="black", linewidth=1.5))
    ax.add_patch(Rectangle(
        (cover, cover), b - 2 * cover, h - 2 * cover,
        facecolor="none", edgecolor=STIRRUP_COLOR, linewidth=2,
    ))

    x_start = cover + stirrup + r
    x_end = b - cover - stirrup - r

    bent = design.bent_rebar_count if design.bent_rebars_used else 0
    straight_row1 = design.rebar_count_row1 - bent
    row2 = design.rebar_count_row2 if design.rebar_rows > 1 else 0
    bottom_count = max(straight_row1, row2)
    second_count = min(straight_row1, row2)

    y_bottom = cover + stirrup + r
    y_second = y_bottom + 2 * r + _LAYER_GAP
    y_top = h - cover - stirrup - r

    label_x = b + 10
    for count, y, bar_color, label in (
        (bottom_count, y_bottom, color, f"{bottom_count} x d{d:.0f}"),
        (second_count, y_second, color, f"{second_count} x d{d:.0f}"),
        (bent, y_top, BENT_BAR_COLOR, f"{bent} x d{d:.0f} (Bent)"),
    ):
        if count <= 0:
            continue
        for x in _row_positions(count, x_start, x_end):
            ax.add_patch(Circle((x, y), r, facecolor=bar_color, edgecolor="black", linewidth=0.5))
        ax.text(label_x, y, label, va="center", fontsize=8)

    ax.text(b / 2, h + 15, f"{b:.0f} mm", ha="center", va="bottom", fontsize=10, fontweight="bold")
    ax.text(-15, h / 2, f"{h:.0f} mm", ha="right", va="center", fontsize=10,
            fontweight="bold", rotation=90)

    margin = max(b, h) * 0.15
    ax.set_xlim(-margin, b + margin * 2.5)
    ax.set_ylim(-margin, h + margin)
    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title("Cross Section", fontsize=12, fontweight="bold")

    return _finish(fig, return_figure)


def generate_longitudinal_section(
    geometry: BridgeGeometry,
    design: RebarDesign,
    cover: float = CONCRETE_COVER,
    return_figure: bool = True,
):
    """
    Generate the longitudinal section with stirrups and bent bars.

    The vertical scale is exaggerated so the reinforcement stays readable on
    long spans.

    Args:
        geometry: Girder geometry in mm
        design: Design result to draw
        cover: Clear cover in mm
        return_figure: If True, return figure; if False, return PNG bytes

    Returns:
        Matplotlib figure or PNG bytes
    """
    figsize = (12, 4)
    if not design.design_possible:
        return _failure_figure(design, figsize, return_figure)

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    L = geometry.span
    h = geometry.height
    stirrup = design.stirrup_diameter
    d = design.flexure_rebar_diameter
    color = rebar_color(d)

    ax.add_patch(Rectangle((0, 0), L, h, facecolor=CONCRETE_COLOR, edgecolor="black", linewidth=1))

    if design.stirrup_spacing > 0:
        xs = np.arange(design.stirrup_spacing, L, design.stirrup_spacing)
        ax.vlines(xs, 0, h, colors="#808080", linewidth=0.6)

    y_row1 = cover + stirrup + d / 2
    y_row2 = y_row1 + d + _LAYER_GAP
    y_top = h - cover - stirrup

    if design.rebar_count_row2 > 0:
        ax.plot([0, L], [y_row2, y_row2], color=color, linewidth=2)

    bent = design.bent_rebar_count if design.bent_rebars_used else 0
    if design.rebar_count_row1 - bent > 0:
        ax.plot([0, L], [y_row1, y_row1], color=color, linewidth=2)

    ax.text(L / 2, -h * 0.15, f"Span = {L / 1000:.1f} m", ha="center", va="top",
            fontsize=10, fontweight="bold")
    ax.text(L / 2, h * 1.05,
            f"{design.stirrup_legs}L-d{stirrup:.0f} @ {design.stirrup_spacing:.0f} c/c",
            ha="center", va="bottom", fontsize=8)

    ax.set_xlim(-L * 0.05, L * 1.05)
    ax.set_ylim(-h * 0.4, h * 1.3)
    ax.axis("off")
    ax.set_title("Longitudinal Section", fontsize=12, fontweight="bold")

    if bent > 0:
        # Bends rise from the quarter points towards the supports, 45° on screen
        fig.tight_layout()
        rise = y_row1 - y_top
        run = _display_run(ax, rise)
        x_left = L / 4
        x_right = 3 * L / 4
        xs = [0, x_left + run, x_left, x_right, x_right - run, L]
        ys = [y_top, y_top, y_row1, y_row1, y_top, y_top]
        ax.plot(xs, ys, color=BENT_BAR_COLOR, linewidth=3)

    return _finish(fig, return_figure)
