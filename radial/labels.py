"""Label orientation, text direction along arcs, and font-size fitting."""
import math

from .types import LabelOrientation

PHI = 1.618
CHAR_WIDTH = 0.6          # estimated glyph width as a fraction of font size
HUB_TEXT_WIDTH = 1.6      # hub text may span 80% of the hub diameter


def normalize_angle(angle: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    n = angle % 360.0
    # tiny negatives round up to exactly 360.0
    return 0.0 if n == 360.0 else n

# ============================================================
# Orientation
# ============================================================
def label_orientation(angle: float) -> LabelOrientation:
    """Anchor and rotation for text tangent to the circle at *angle*.

    Text in the lower half (90, 270) is turned a further 180 degrees so it
    never reads upside down. Near 0 the anchor is 'start', near 180 'end'.
    """
    n = normalize_angle(angle)
    rotation = n + 90
    if 90 < n < 270:
        rotation += 180
    if n >= 350 or n <= 10:
        anchor = "start"
    elif 170 <= n <= 190:
        anchor = "end"
    else:
        anchor = "middle"
    return LabelOrientation(anchor, rotation, "middle")

def radial_orientation(angle: float, reference_angle: float | None = None) -> LabelOrientation:
    """Orientation for text reading along the radius at *angle*.

    *reference_angle* (typically the segment mid-angle) decides the flip so
    all labels of one segment share it. Unflipped text ends at its anchor
    point ('end'); flipped text starts there.
    """
    ref = normalize_angle(angle if reference_angle is None else reference_angle)
    flip = 90 < ref <= 270
    return LabelOrientation("start" if flip else "end",
                            angle + 180 if flip else angle, "middle")

def arc_text_clockwise(mid_angle: float) -> bool:
    """Whether text along an arc centred on *mid_angle* should run clockwise.

    Arcs centred in (15, 165), the lower part of the wheel, run
    counter-clockwise so their text stays upright.
    """
    n = normalize_angle(mid_angle)
    return not 15 < n < 165

# ============================================================
# Text Fitting
# ============================================================
def segment_label_thickness(font_size: float) -> float:
    """Radial thickness of the segment-label band: font_size * phi + font_size."""
    return font_size*PHI + font_size

def fit_arc_font_size(base_size: float, longest_len: int, arc_length: float) -> float:
    """Shrink *base_size* so *longest_len* characters (plus one of padding) fit *arc_length*."""
    est_width = (longest_len + 1) * base_size * CHAR_WIDTH
    if est_width <= arc_length:
        return base_size
    return max(1, math.floor(base_size * (arc_length / est_width)))

def split_label(text: str) -> list[str]:
    """Split a label on '&' into trimmed lines."""
    return [part.strip() for part in text.split("&")]

def fit_hub_font_size(lines: list[str], hub_radius: float) -> int | None:
    """Font size that fits the longest of *lines* across 1.6 * hub_radius.

    The second line of a multi-line label is drawn with a '& ' prefix and
    counts two extra characters. Returns None when there is no text.
    """
    lengths = [len(l) + (2 if len(lines) > 1 and i == 1 else 0) for i, l in enumerate(lines)]
    longest = max(lengths, default=0)
    if longest == 0:
        return None
    return math.floor(hub_radius*HUB_TEXT_WIDTH / (longest*CHAR_WIDTH))
