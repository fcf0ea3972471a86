"""
RC Girder Rebar Designer

Streamlit front-end: collects girder geometry and vehicle load, runs the
minimum-cost reinforcement search and shows the diagrams and costs.
"""

import streamlit as st

from girder_rebar.config import DEFAULT_SETTINGS
from girder_rebar.core import design_girder, suggest_section
from girder_rebar.exceptions import InputValidationError
from girder_rebar.models.inputs import parse_design_input
from girder_rebar.reports.diagrams.cross_section import (
    generate_cross_section, generate_longitudinal_section,
)
from girder_rebar.reports.pdf_generator import PDFReportGenerator

st.set_page_config(
    page_title="RC Girder Rebar Designer",
    page_icon="🌉",
    layout="wide",
)


def init_state():
    """Initialize session state with defaults."""
    defaults = {
        'span': 10000.0,
        'width': 300.0,
        'height': 600.0,
        'vehicle_load': 200.0,
        'wheel_span': 1.8,
        'girder_spacing': 2000.0,
        'result': None,
        'geometry': None,
        'error': None,
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val


def auto_generate():
    """Fill width and height from the span."""
    try:
        width, height = suggest_section(st.session_state.span)
    except ValueError as e:
        st.session_state.error = str(e)
        return
    st.session_state.width = width
    st.session_state.height = height


def run_design():
    """Validate the form and run the rebar search."""
    st.session_state.error = None
    try:
        request = parse_design_input({
            'span': st.session_state.span,
            'width': st.session_state.width,
            'height': st.session_state.height,
            'vehicle_load': st.session_state.vehicle_load,
            'wheel_span': st.session_state.wheel_span,
            'girder_spacing': st.session_state.girder_spacing,
        })
    except InputValidationError as e:
        st.session_state.result = None
        st.session_state.error = str(e)
        return

    geometry = request.to_geometry()
    st.session_state.geometry = geometry
    st.session_state.result = design_girder(geometry, request.vehicle_load_n)


def render_inputs():
    st.markdown("## Bridge Parameters")
    col1, col2, col3 = st.columns(3)
    with col1:
        st.number_input("Span (mm)", min_value=0.0, step=500.0, key='span')
        st.button("Auto-generate section", on_click=auto_generate)
    with col2:
        st.number_input("Width (mm)", min_value=0.0, step=50.0, key='width')
        st.number_input("Height (mm)", min_value=0.0, step=50.0, key='height')
    with col3:
        st.number_input("Vehicle load (kN)", min_value=0.0, step=10.0, key='vehicle_load')
        st.number_input("Wheel span (m)", min_value=0.0, step=0.1, key='wheel_span')
        st.number_input("Girder spacing (mm)", min_value=0.0, step=100.0, key='girder_spacing')

    if st.button("Run Design", type="primary", use_container_width=True):
        run_design()


def render_results():
    if st.session_state.error:
        st.error(st.session_state.error)
        return

    result = st.session_state.result
    geometry = st.session_state.geometry
    if result is None:
        st.info("Enter the bridge parameters and run the design.")
        return

    if not result.design_possible:
        st.error(result.error_message)
    else:
        st.success(result.reinforcement_summary)

        currency = DEFAULT_SETTINGS.currency
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Total cost", f"{result.total_cost:,.2f} {currency}")
        col2.metric("Concrete", f"{result.concrete_cost:,.2f} {currency}")
        col3.metric("Steel", f"{result.steel_cost:,.2f} {currency}")
        col4.metric("Labour", f"{result.labor_cost:,.2f} {currency}")

        col1, col2 = st.columns(2)
        col1.metric("Max moment", f"{result.max_moment / 1e6:,.1f} kNm")
        col2.metric("Max shear", f"{result.max_shear / 1e3:,.1f} kN")

    tab1, tab2 = st.tabs(["Cross Section", "Longitudinal Section"])
    with tab1:
        st.pyplot(generate_cross_section(geometry, result))
    with tab2:
        st.pyplot(generate_longitudinal_section(geometry, result))

    if result.design_possible:
        st.download_button(
            "Download PDF report",
            data=PDFReportGenerator().generate_report(geometry, result),
            file_name="girder_design.pdf",
            mime="application/pdf",
        )


init_state()
st.title("RC Girder Rebar Designer")
render_inputs()
st.markdown("---")
render_results()
