"""Radial diagram geometry: types, polar/arc geometry, label orientation, SVG helpers."""

from .types import (
    Point, MoveTo, LineTo, ArcTo, ClosePath, PathCmd, FacetSpan, LabelOrientation,
)
from .geometry import (
    DomainError,
    polar_to_cartesian, segment_angle, facet_angles,
    describe_arc, segment_path, facet_score_path, path_vertices,
    score_to_radius, ring_radii,
)
from .labels import (
    normalize_angle, label_orientation, radial_orientation, arc_text_clockwise,
    segment_label_thickness, fit_arc_font_size, fit_hub_font_size, split_label,
)
from .svg import fmt, path_d, escape_text
