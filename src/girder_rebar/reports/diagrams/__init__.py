from .cross_section import generate_cross_section, generate_longitudinal_section, rebar_color
