"""SVG serialization helpers: number formatting, path data, text escaping."""
from .types import MoveTo, LineTo, ArcTo, ClosePath, PathCmd

SVG_NS = "http://www.w3.org/2000/svg"


def fmt(v: float, decimals: int = 2) -> str:
    """Deterministic short number text; trailing zeros dropped, no '-0'."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return "0" if s == "-0" else s

def path_d(cmds: list[PathCmd]) -> str:
    """Path command list to an SVG path 'd' attribute."""
    parts = []
    for c in cmds:
        if isinstance(c, MoveTo):
            parts.append(f"M {fmt(c.pt[0])} {fmt(c.pt[1])}")
        elif isinstance(c, LineTo):
            parts.append(f"L {fmt(c.pt[0])} {fmt(c.pt[1])}")
        elif isinstance(c, ArcTo):
            r = fmt(c.radius)
            parts.append(f"A {r} {r} 0 {c.large_arc} {c.sweep} {fmt(c.pt[0])} {fmt(c.pt[1])}")
        elif isinstance(c, ClosePath):
            parts.append("Z")
        else:
            raise TypeError(f"Unknown path command: {c!r}")
    return " ".join(parts)

def escape_text(text: str) -> str:
    """Escape text content and attribute values for XML."""
    return (str(text).replace("&", "&amp;").replace("<", "&lt;")
            .replace(">", "&gt;").replace('"', "&quot;"))
