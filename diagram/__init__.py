"""Radial diagram configuration, layout composition, and SVG generation."""

from .config import (
    Facet, Segment, CenterConfig, ScaleConfig, StyleConfig, DiagramConfig,
    DEFAULT_STYLE, DEFAULT_SCALE, DEFAULT_CENTER,
    ConfigIssue, ValidationResult, InvalidConfigError,
    create_config, validate_config, outer_radius_for,
)
from .layout import LayoutPlan, LAYER_ORDER, compose_layout
from .gen_diagram import render_diagram_svg, render_diagram, load_config
