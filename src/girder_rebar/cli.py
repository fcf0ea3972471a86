"""Command-line interface for the girder rebar designer.

Usage::

    girder-rebar design --span 10000 --width 300 --height 600 \\
        --vehicle-load 200 --wheel-span 1.8 --girder-spacing 2000
    girder-rebar design --input config/sample_input.yaml --pdf report.pdf
    girder-rebar suggest 12000
    girder-rebar template
"""

from __future__ import annotations

import json
from pathlib import Path

import click
import yaml

from girder_rebar.config import load_settings
from girder_rebar.core import design_girder, suggest_section
from girder_rebar.exceptions import GirderRebarError
from girder_rebar.models.inputs import parse_design_input
from girder_rebar.reports.summary import summarise_design
from girder_rebar.utils.logger import set_level

_INPUT_FIELDS = ("span", "width", "height", "vehicle_load", "wheel_span", "girder_spacing")

TEMPLATE = """\
# Girder design input
span: 10000          # mm
width: 300           # mm
height: 600          # mm
vehicle_load: 200    # kN, total vehicle load
wheel_span: 1.8      # m, axle spacing
girder_spacing: 2000 # mm
"""


# ---------------------------------------------------------------------------
# Top-level group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(package_name="girder-rebar")
@click.option("-v", "--verbose", is_flag=True, help="Log every candidate diameter.")
def main(verbose: bool):
    """Minimum-cost RC girder reinforcement design."""
    if verbose:
        set_level("DEBUG")


# ---------------------------------------------------------------------------
# design
# ---------------------------------------------------------------------------

@main.command()
@click.option("-i", "--input", "input_file", type=click.Path(exists=True),
              help="YAML file with the design inputs.")
@click.option("--span", type=float, help="Span in mm.")
@click.option("--width", type=float, help="Girder width in mm.")
@click.option("--height", type=float, help="Girder height in mm.")
@click.option("--vehicle-load", type=float, help="Total vehicle load in kN.")
@click.option("--wheel-span", type=float, help="Axle spacing in m.")
@click.option("--girder-spacing", type=float, help="Girder spacing in mm.")
@click.option("-c", "--config", "config_file", type=click.Path(exists=True),
              help="YAML file overriding design settings.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.option("--png", type=click.Path(), help="Write the cross-section diagram to this file.")
@click.option("--pdf", type=click.Path(), help="Write a PDF report to this file.")
def design(input_file, config_file, as_json, png, pdf, **values) -> None:
    """Design the reinforcement for one girder."""
    data = {}
    if input_file:
        with open(input_file, encoding="utf-8") as fh:
            try:
                data = yaml.safe_load(fh) or {}
            except yaml.YAMLError as exc:
                click.secho(f"Error parsing input: {exc}", fg="red", err=True)
                raise SystemExit(1) from exc
        if not isinstance(data, dict):
            click.secho("Error: input YAML root must be a mapping", fg="red", err=True)
            raise SystemExit(1)
    data.update({k: v for k, v in values.items() if v is not None})
    missing = [f for f in _INPUT_FIELDS if f not in data]
    if missing:
        click.secho(f"Missing inputs: {', '.join(missing)}", fg="red", err=True)
        raise SystemExit(1)

    try:
        request = parse_design_input({f: data[f] for f in _INPUT_FIELDS})
        settings = load_settings(config_file)
    except GirderRebarError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        raise SystemExit(1) from exc

    geometry = request.to_geometry()
    result = design_girder(geometry, request.vehicle_load_n, settings)

    if as_json:
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        click.echo(summarise_design(geometry, result, settings.currency))

    if png:
        from girder_rebar.reports.diagrams.cross_section import generate_cross_section
        Path(png).write_bytes(generate_cross_section(geometry, result, settings.cover, return_figure=False))
        click.echo(f"Cross-section written to {png}")

    if pdf:
        from girder_rebar.reports.pdf_generator import PDFReportGenerator
        Path(pdf).write_bytes(PDFReportGenerator(settings.currency).generate_report(geometry, result))
        click.echo(f"Report written to {pdf}")

    if not result.design_possible:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# suggest / template
# ---------------------------------------------------------------------------

@main.command()
@click.argument("span", type=float)
def suggest(span: float) -> None:
    """Suggest a starting width and height for SPAN (mm)."""
    try:
        width, height = suggest_section(span)
    except ValueError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        raise SystemExit(1) from exc
    click.echo(f"width: {width:.0f} mm")
    click.echo(f"height: {height:.0f} mm")


@main.command()
def template() -> None:
    """Print a sample input YAML."""
    click.echo(TEMPLATE, nl=False)


if __name__ == "__main__":
    main()
