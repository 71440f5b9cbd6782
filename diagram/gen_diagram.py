"""Generate a radial diagram SVG from a layout plan or a JSON configuration.

Usage: python -m diagram.gen_diagram CONFIG.json [OUT.svg]
"""
import os, sys, json

from radial.svg import SVG_NS, fmt, path_d, escape_text
from diagram.config import DiagramConfig, InvalidConfigError, create_config
from diagram.layout import (
    LayoutPlan, PathShape, LineShape, CircleShape, RectShape, TextLabel, ArcLabel,
    compose_layout,
)

# ============================================================
# SVG Helpers
# ============================================================

def _opacity(opacity):
    return "" if opacity == 1 else f' opacity="{fmt(opacity)}"'

def path_el(out, shape):
    """Filled wedge / annulus."""
    out.append(f'<path d="{path_d(shape.cmds)}" fill="{shape.fill}"{_opacity(shape.opacity)} />')

def line_el(out, line):
    (x1, y1), (x2, y2) = line.start, line.end
    out.append(f'<line x1="{fmt(x1)}" y1="{fmt(y1)}" x2="{fmt(x2)}" y2="{fmt(y2)}"'
               f' stroke="{line.stroke}" stroke-width="{fmt(line.width)}"{_opacity(line.opacity)} />')

def circle_el(out, c):
    attrs = f' fill="{c.fill or "none"}"'
    if c.stroke and c.width:
        attrs += f' stroke="{c.stroke}" stroke-width="{fmt(c.width)}"'
    if c.dash:
        attrs += f' stroke-dasharray="{c.dash}"'
    out.append(f'<circle cx="{fmt(c.center[0])}" cy="{fmt(c.center[1])}" r="{fmt(c.radius)}"{attrs} />')

def rect_el(out, r):
    out.append(f'<rect x="{fmt(r.x)}" y="{fmt(r.y)}" width="{fmt(r.width)}"'
               f' height="{fmt(r.height)}" fill="{r.fill}" />')

def text_el(out, label, font_family):
    """Positioned text; rotated only when the orientation is not upright."""
    x, y = fmt(label.pos[0]), fmt(label.pos[1])
    o = label.orientation
    attrs = (f' class="{label.css_class}" text-anchor="{o.anchor}"'
             f' dominant-baseline="{o.baseline}"')
    if label.font_size is not None:
        attrs += f' style="font-size: {fmt(label.font_size)}px"'
    if label.fill:
        attrs += f' fill="{label.fill}"'
    if label.stroke:
        attrs += (f' font-family="{font_family}" font-weight="bold" stroke="{label.stroke}"'
                  f' stroke-width="{fmt(label.stroke_width)}" paint-order="stroke"')
    if o.rotation % 360:
        attrs += f' transform="rotate({fmt(o.rotation)}, {x}, {y})"'
    out.append(f'<text x="{x}" y="{y}"{attrs}>{escape_text(label.text)}</text>')

def arc_text_els(defs, out, label):
    """Text on a path: the arc goes into <defs>, the text references it."""
    defs.append(f'<path id="{label.path_id}" d="{path_d(label.cmds)}" fill="none" />')
    out.append(f'<text class="{label.css_class}" style="font-size: {fmt(label.font_size)}px">'
               f'<textPath href="#{label.path_id}" startOffset="50%" text-anchor="middle">'
               f'{escape_text(label.text)}</textPath></text>')

def _style_block(plan: LayoutPlan) -> str:
    s = plan.style
    family = escape_text(s.font_family)
    hub_size = plan.hub_font_size or s.hub_font_size
    return (
        "<style>\n"
        f"  .segment-label {{ font-family: {family}; font-weight: bold; font-size: {fmt(plan.segment_font_size)}px; fill: white; dominant-baseline: middle; }}\n"
        f"  .facet-label {{ font-family: {family}; font-size: {fmt(s.facet_font_size)}px; font-style: italic; fill: {plan.facet_font_color}; }}\n"
        f"  .center-label {{ font-family: {family}; font-weight: bold; font-size: {fmt(hub_size)}px; fill: {plan.hub_font_color}; }}\n"
        f"  .center-subtitle {{ font-family: {family}; font-size: {fmt(hub_size)}px; fill: {plan.hub_font_color}; }}\n"
        f"  .score-label {{ font-family: {family}; }}\n"
        "</style>"
    )

# ============================================================
# SVG rendering
# ============================================================

def render_diagram_svg(plan: LayoutPlan) -> str:
    """Serialize a layout plan into a complete SVG document. Returns SVG string."""
    pad = plan.padding
    view = plan.size + 2*pad
    family = escape_text(plan.style.font_family)

    groups: dict[str, list[str]] = {}
    defs: list[str] = []
    for el in plan.elements:
        out = groups.setdefault(el.layer, [])
        if isinstance(el, PathShape):
            path_el(out, el)
        elif isinstance(el, LineShape):
            line_el(out, el)
        elif isinstance(el, CircleShape):
            circle_el(out, el)
        elif isinstance(el, RectShape):
            rect_el(out, el)
        elif isinstance(el, TextLabel):
            text_el(out, el, family)
        elif isinstance(el, ArcLabel):
            arc_text_els(defs, out, el)
        else:
            raise TypeError(f"Unknown plan element: {el!r}")

    lines = [f'<svg xmlns="{SVG_NS}" viewBox="{fmt(-pad)} {fmt(-pad)} {fmt(view)} {fmt(view)}"'
             f' width="{fmt(plan.size)}" height="{fmt(plan.size)}">',
             _style_block(plan)]
    if defs:
        lines.append("<defs>")
        lines.extend(defs)
        lines.append("</defs>")
    for layer, items in groups.items():
        if layer == "background":
            lines.extend(items)
            continue
        lines.append(f'<g class="{layer}">')
        lines.extend(items)
        lines.append("</g>")
    lines.append("</svg>")
    return "\n".join(lines)


def render_diagram(config: DiagramConfig) -> str:
    """Validate, lay out and serialize *config*. Raises InvalidConfigError if invalid."""
    return render_diagram_svg(compose_layout(config))


def load_config(path):
    """Read a JSON diagram configuration and fill in defaults."""
    with open(path) as f:
        return create_config(json.load(f))

# ============================================================
# Main entry point
# ============================================================

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("usage: python -m diagram.gen_diagram CONFIG.json [OUT.svg]")
        return 2
    try:
        config = load_config(argv[0])
    except ValueError as e:
        print(f"Cannot read {argv[0]}: {e}")
        return 1
    svg_path = argv[1] if len(argv) > 1 else os.path.splitext(argv[0])[0] + ".svg"
    try:
        plan = compose_layout(config)
    except InvalidConfigError as e:
        print(e)
        return 1

    with open(svg_path, "w") as f:
        f.write(render_diagram_svg(plan))

    print(f"Diagram written to {svg_path}")
    print(f"Size:          {fmt(plan.size)} px, outer radius {fmt(plan.outer_radius)} px")
    print(f"Segment font:  {fmt(plan.segment_font_size)} px")
    print()
    for seg in config.segments:
        scored = [f.score for f in seg.facets if f.score is not None]
        print(f"  {seg.name:<24s} {len(seg.facets):2d} facets, {len(scored):2d} scored")
    return 0


if __name__ == "__main__":
    sys.exit(main())
