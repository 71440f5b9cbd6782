"""Layout composition: a validated DiagramConfig becomes an ordered plan of shapes and labels.

The plan is back-to-front: later elements are drawn over earlier ones.
"""
import math
from typing import Literal, NamedTuple

from radial.types import Point, PathCmd, LabelOrientation
from radial.geometry import (
    polar_to_cartesian, segment_angle, facet_angles,
    describe_arc, segment_path, facet_score_path,
    score_to_radius, ring_radii,
)
from radial.labels import (
    label_orientation, radial_orientation, arc_text_clockwise,
    segment_label_thickness, fit_arc_font_size, fit_hub_font_size, split_label,
)
from diagram.config import (
    DiagramConfig, StyleConfig, DEFAULT_STYLE, InvalidConfigError,
    validate_config, outer_radius_for,
)
from diagram.constants import (
    LABEL_PADDING, SEGMENT_BG_OPACITY, FACET_DIVIDER_WIDTH, FACET_DIVIDER_OPACITY,
    FACET_LABEL_INSET, FACET_POINT_R_CIRCLE, FACET_POINT_R_DOT,
    SEGMENT_LABEL_ARC_INSET, DEFAULT_DIVIDER_WIDTH,
    HUB_LINE_HEIGHT, HUB_SUBTITLE_SCALE, DEFAULT_HUB_BORDER_COLOR,
    SCORE_LABEL_STROKE_WIDTH, UPRIGHT_ANGLE, RING_DASH, DEFAULT_FACET_FONT_COLOR,
)

LAYER_ORDER = (
    "background", "segment-backgrounds", "score-fills", "segment-dividers",
    "facet-dividers", "center-hub", "facet-labels", "segment-labels",
    "rings", "score-labels",
)

# ============================================================
# Plan Elements
# ============================================================
class PathShape(NamedTuple):
    layer: str
    kind: Literal["wedge", "annulus"]
    cmds: list[PathCmd]
    fill: str
    opacity: float = 1.0


class LineShape(NamedTuple):
    layer: str
    start: Point
    end: Point
    stroke: str
    width: float
    opacity: float = 1.0
    kind: str = "line"


class CircleShape(NamedTuple):
    """Full circle (hub, ring, divider ring) or a small facet 'point' marker."""
    layer: str
    kind: Literal["circle", "point"]
    center: Point
    radius: float
    fill: str | None = None
    stroke: str | None = None
    width: float = 0
    dash: str | None = None


class RectShape(NamedTuple):
    layer: str
    x: float; y: float; width: float; height: float
    fill: str
    kind: str = "rect"


class TextLabel(NamedTuple):
    layer: str
    text: str
    pos: Point
    orientation: LabelOrientation
    css_class: str
    font_size: float | None = None
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float = 0


class ArcLabel(NamedTuple):
    """Text laid along an arc path (segment names on the outer band)."""
    layer: str
    text: str
    path_id: str
    cmds: list[PathCmd]
    clockwise: bool
    font_size: float
    css_class: str = "segment-label"


Element = PathShape | LineShape | CircleShape | RectShape | TextLabel | ArcLabel


class LayoutPlan(NamedTuple):
    size: float
    padding: float
    cx: float
    cy: float
    outer_radius: float
    ring_radii: list[float]
    style: StyleConfig
    segment_font_size: float
    hub_font_size: int | None
    hub_font_color: str
    facet_font_color: str
    elements: tuple[Element, ...]

    def layer(self, name: str) -> list[Element]:
        return [e for e in self.elements if e.layer == name]

# ============================================================
# Per-layer helpers (append to out)
# ============================================================
def _segment_windows(config: DiagramConfig) -> list[tuple[float, float]]:
    """(start, end) angle of each segment, starting at config.start_angle."""
    span = segment_angle(len(config.segments))
    return [(config.start_angle + i*span, config.start_angle + i*span + span)
            for i in range(len(config.segments))]


def _background(out, config):
    if config.style.background_color:
        view = config.size + 2*LABEL_PADDING
        out.append(RectShape("background", -LABEL_PADDING, -LABEL_PADDING, view, view,
                             config.style.background_color))


def _segment_backgrounds(out, config, windows, cx, cy, outer):
    for seg, (s, e) in zip(config.segments, windows):
        out.append(PathShape("segment-backgrounds", "annulus",
                             segment_path(cx, cy, config.center.radius, outer, s, e),
                             seg.color, SEGMENT_BG_OPACITY))


def _score_fills(out, config, windows, cx, cy, outer):
    scale, hub_r = config.scale, config.center.radius
    for seg, (s, e) in zip(config.segments, windows):
        spans = facet_angles(s, e, len(seg.facets))
        for facet, span in zip(seg.facets, spans):
            if facet.score is None:
                continue
            r = score_to_radius(facet.score, scale.min, scale.max, hub_r, outer)
            out.append(PathShape("score-fills", "annulus",
                                 facet_score_path(cx, cy, hub_r, r, span.start_angle, span.end_angle),
                                 seg.color, config.style.facet_opacity))


def _segment_dividers(out, config, windows, cx, cy, outer):
    style = config.style
    if not style.show_segment_dividers:
        return
    for s, _ in windows:
        out.append(LineShape("segment-dividers",
                             polar_to_cartesian(cx, cy, config.center.radius, s),
                             polar_to_cartesian(cx, cy, outer, s),
                             style.segment_divider_color, style.segment_divider_width))


def _facet_dividers(out, config, windows, cx, cy, outer):
    """Dividers between facets (the first facet edge is the segment divider) and facet points."""
    style = config.style
    show_points = style.show_facet_points and style.facet_point_style != "none"
    point_r = FACET_POINT_R_CIRCLE if style.facet_point_style == "circle" else FACET_POINT_R_DOT
    for seg, (s, e) in zip(config.segments, windows):
        spans = facet_angles(s, e, len(seg.facets))
        for span in spans[1:]:
            out.append(LineShape("facet-dividers",
                                 polar_to_cartesian(cx, cy, config.center.radius, span.start_angle),
                                 polar_to_cartesian(cx, cy, outer, span.start_angle),
                                 style.segment_divider_color, FACET_DIVIDER_WIDTH,
                                 FACET_DIVIDER_OPACITY))
        if show_points:
            for span in spans:
                out.append(CircleShape("facet-dividers", "point",
                                       polar_to_cartesian(cx, cy, outer - FACET_LABEL_INSET,
                                                          span.mid_angle),
                                       point_r, fill="white",
                                       stroke=style.segment_divider_color, width=1))


def _center_hub(out, config, cx, cy, font_size, font_color):
    center = config.center
    if center.visible is False:
        return
    if center.border_width and center.border_width > 0:
        out.append(CircleShape("center-hub", "circle", (cx, cy), center.radius, fill=center.color,
                               stroke=center.border_color or DEFAULT_HUB_BORDER_COLOR,
                               width=center.border_width))
    else:
        out.append(CircleShape("center-hub", "circle", (cx, cy), center.radius, fill=center.color))

    if font_size is None:
        return
    upright = label_orientation(UPRIGHT_ANGLE)
    lines = split_label(center.label)
    line_h = font_size * HUB_LINE_HEIGHT
    if len(lines) == 1:
        texts = [(center.label, cy)]
    else:
        top = cy - (len(lines) - 1) * line_h / 2
        texts = [(f"& {l}" if i == 1 else l, top + i*line_h) for i, l in enumerate(lines)]
    for text, y in texts:
        out.append(TextLabel("center-hub", text, (cx, y), upright, "center-label",
                             font_size, font_color))
    if center.subtitle:
        y = cy + (len(lines) - 1) * line_h / 2 + line_h
        out.append(TextLabel("center-hub", center.subtitle, (cx, y), upright, "center-subtitle",
                             max(1, math.floor(font_size * HUB_SUBTITLE_SCALE)), font_color))


def _facet_labels(out, config, windows, cx, cy, outer, font_color):
    label_r = outer - FACET_LABEL_INSET
    for seg, (s, e) in zip(config.segments, windows):
        seg_mid = (s + e) / 2
        for facet, span in zip(seg.facets, facet_angles(s, e, len(seg.facets))):
            out.append(TextLabel("facet-labels", facet.name,
                                 polar_to_cartesian(cx, cy, label_r, span.mid_angle),
                                 radial_orientation(span.mid_angle, seg_mid), "facet-label",
                                 config.style.facet_font_size, font_color))


def _segment_label_font(config, base, span, text_r) -> float:
    """Segment-label font, shrunk from *base* so the longest segment name fits its arc."""
    arc_length = text_r * math.radians(span - 2*SEGMENT_LABEL_ARC_INSET)
    longest = max(len(seg.name) for seg in config.segments)
    return fit_arc_font_size(base, longest, arc_length)


def _segment_labels(out, config, windows, cx, cy, outer):
    """Outer label band: divider ring, coloured band per segment, band dividers, arc text."""
    style = config.style
    base = style.segment_font_size or DEFAULT_STYLE.segment_font_size
    thickness = segment_label_thickness(base)
    divider_w = style.segment_divider_width or DEFAULT_DIVIDER_WIDTH
    band_inner = outer + divider_w / 2
    band_outer = band_inner + thickness
    text_r = band_inner + thickness / 2
    span = segment_angle(len(config.segments))
    font = _segment_label_font(config, base, span, text_r)

    if style.show_segment_dividers:
        out.append(CircleShape("segment-labels", "circle", (cx, cy), outer,
                               stroke=style.segment_divider_color, width=divider_w))
    for seg, (s, e) in zip(config.segments, windows):
        out.append(PathShape("segment-labels", "annulus",
                             segment_path(cx, cy, band_inner, band_outer, s, e), seg.color))
    if style.show_segment_dividers:
        for s, _ in windows:
            out.append(LineShape("segment-labels",
                                 polar_to_cartesian(cx, cy, band_inner, s),
                                 polar_to_cartesian(cx, cy, band_outer, s),
                                 style.segment_divider_color, style.segment_divider_width))
    for i, (seg, (s, e)) in enumerate(zip(config.segments, windows)):
        cw = arc_text_clockwise((s + e) / 2)
        a, b = s + SEGMENT_LABEL_ARC_INSET, e - SEGMENT_LABEL_ARC_INSET
        cmds = describe_arc(cx, cy, text_r, a, b) if cw else describe_arc(cx, cy, text_r, b, a)
        out.append(ArcLabel("segment-labels", seg.name, f"segment-path-{i}", cmds, cw, font))
    return font


def _rings(out, config, radii, cx, cy):
    style = config.style
    if style.show_rings is False:
        return
    dash = RING_DASH if style.ring_style == "dashed" else None
    for r in radii[1:]:   # radii[0] is the hub edge
        out.append(CircleShape("rings", "circle", (cx, cy), r, stroke=style.ring_color,
                               width=style.ring_width, dash=dash))


def _score_labels(out, config, cx, cy, outer):
    style, scale, hub_r = config.style, config.scale, config.center.radius
    if not style.show_score_labels:
        return
    step = (outer - hub_r) / scale.rings
    orient = label_orientation(UPRIGHT_ANGLE)
    for i in range(scale.rings):
        if scale.ring_labels and i < len(scale.ring_labels):
            text = scale.ring_labels[i]
        else:
            text = f"{scale.min + i:g}"
        pos = polar_to_cartesian(cx, cy, hub_r + (i + 0.5)*step, UPRIGHT_ANGLE)
        out.append(TextLabel("score-labels", text, pos, orient, "score-label",
                             style.score_label_font_size, style.score_label_color,
                             style.score_label_stroke_color, SCORE_LABEL_STROKE_WIDTH))

# ============================================================
# Main entry point
# ============================================================
def compose_layout(config: DiagramConfig) -> LayoutPlan:
    """Validate *config* and compute the full back-to-front layout plan.

    Raises InvalidConfigError with every validation issue if the config is invalid.
    """
    result = validate_config(config)
    if not result.valid:
        raise InvalidConfigError(result.errors)

    cx = cy = config.size / 2
    outer = outer_radius_for(config.size)
    style = config.style
    windows = _segment_windows(config)
    radii = ring_radii(config.scale.rings, config.center.radius, outer)

    hub_font = fit_hub_font_size(split_label(config.center.label), config.center.radius)
    hub_color = config.center.font_color or style.hub_font_color or "#ffffff"
    facet_color = style.facet_font_color or DEFAULT_FACET_FONT_COLOR

    out: list[Element] = []
    _background(out, config)
    _segment_backgrounds(out, config, windows, cx, cy, outer)
    _score_fills(out, config, windows, cx, cy, outer)
    _segment_dividers(out, config, windows, cx, cy, outer)
    _facet_dividers(out, config, windows, cx, cy, outer)
    _center_hub(out, config, cx, cy, hub_font, hub_color)
    _facet_labels(out, config, windows, cx, cy, outer, facet_color)
    seg_font = _segment_labels(out, config, windows, cx, cy, outer)
    _rings(out, config, radii, cx, cy)
    _score_labels(out, config, cx, cy, outer)

    return LayoutPlan(
        size=config.size, padding=LABEL_PADDING, cx=cx, cy=cy, outer_radius=outer,
        ring_radii=radii, style=style, segment_font_size=seg_font,
        hub_font_size=hub_font, hub_font_color=hub_color, facet_font_color=facet_color,
        elements=tuple(out),
    )
