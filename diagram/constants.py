"""Named layout constants and configuration defaults for the radial diagram.

Lengths are in SVG user units (px) unless noted; angles in degrees.
"""

# Canvas
DEFAULT_SIZE = 800.0              # width = height
DEFAULT_START_ANGLE = -90.0       # first segment starts at 12 o'clock
OUTER_RADIUS_FACTOR = 0.9         # outer radius = size/2 * 0.9, rest is label margin
LABEL_PADDING = 70.0              # viewBox padding around the wheel for segment labels

# Segment backgrounds / fills
SEGMENT_BG_OPACITY = 0.3
FACET_DIVIDER_WIDTH = 1.0
FACET_DIVIDER_OPACITY = 0.5

# Facet labels and points sit just inside the outer edge
FACET_LABEL_INSET = 20.0
FACET_POINT_R_CIRCLE = 6.0
FACET_POINT_R_DOT = 3.0

# Segment label band
SEGMENT_LABEL_ARC_INSET = 3.0     # degrees trimmed from each end of the text arc
DEFAULT_DIVIDER_WIDTH = 4.0       # used when segment_divider_width is 0/unset

# Hub
HUB_LINE_HEIGHT = 1.2             # line spacing as a multiple of font size
HUB_SUBTITLE_SCALE = 0.6          # subtitle font relative to the hub label font
DEFAULT_HUB_BORDER_COLOR = "#ffffff"

# Score / ring labels
SCORE_LABEL_STROKE_WIDTH = 3
UPRIGHT_ANGLE = -90.0             # 12 o'clock: tangent text here is horizontal
RING_DASH = "4,4"

DEFAULT_FACET_FONT_COLOR = "#000000"
