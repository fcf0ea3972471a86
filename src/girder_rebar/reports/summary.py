"""Plain-text summary of a design result."""

from girder_rebar.models.inputs import BridgeGeometry
from girder_rebar.models.outputs import RebarDesign
from girder_rebar.utils.constants import DESIGN_FAILED_BANNER


def summarise_design(geometry: BridgeGeometry, design: RebarDesign, currency: str = "Yuan") -> str:
    """Return a formatted text summary of the design."""
    w = 72
    lines = [
        "=" * w,
        "GIRDER REINFORCEMENT DESIGN",
        "=" * w,
        f"Span            : {geometry.span:,.0f} mm",
        f"Section (b x h) : {geometry.width:.0f} x {geometry.height:.0f} mm",
        f"Wheel span      : {geometry.wheel_span:,.0f} mm",
        f"Girder spacing  : {geometry.girder_spacing:,.0f} mm",
        "-" * w,
    ]

    if not design.design_possible:
        lines.append(DESIGN_FAILED_BANNER)
        lines.extend(design.error_message.splitlines())
        lines.append("=" * w)
        return "\n".join(lines)

    lines.extend([
        f"Max moment      : {design.max_moment / 1e6:,.1f} kNm",
        f"Max shear       : {design.max_shear / 1e3:,.1f} kN",
        "-" * w,
        f"Main bars       : {design.total_bars} x d{design.flexure_rebar_diameter:.0f}"
        f" in {design.rebar_rows} row(s) ({design.rebar_count_row1} + {design.rebar_count_row2})",
        f"Effective depth : {design.effective_depth:.1f} mm (xi = {design.xi:.3f})",
        f"Stirrups        : {design.stirrup_legs}L-d{design.stirrup_diameter:.0f}"
        f" @ {design.stirrup_spacing:.0f} mm",
        f"Bent bars       : {design.bent_rebar_count if design.bent_rebars_used else 'none'}",
        "-" * w,
        f"{'Diameter':>10} {'Feasible':>10} {'Total Cost':>16}  Note",
    ])
    for c in design.candidates:
        cost = f"{c.total_cost:>16,.2f}" if c.total_cost is not None else f"{'-':>16}"
        note = "selected" if c.selected else (c.rejection_reason or "")
        lines.append(f"{c.diameter:>10.0f} {'yes' if c.feasible else 'no':>10} {cost}  {note}")
    lines.extend([
        "-" * w,
        f"Concrete cost   : {design.concrete_cost:>14,.2f} {currency}",
        f"Steel cost      : {design.steel_cost:>14,.2f} {currency}",
        f"Labour cost     : {design.labor_cost:>14,.2f} {currency}",
        f"Total cost      : {design.total_cost:>14,.2f} {currency}",
        "=" * w,
    ])
    return "\n".join(lines)
