"""Diagram configuration: types, defaults layering, and accumulating validation."""
import re
from collections.abc import Mapping
from numbers import Integral
from typing import Any, Literal, NamedTuple

from diagram.constants import DEFAULT_SIZE, DEFAULT_START_ANGLE, OUTER_RADIUS_FACTOR

# ============================================================
# Configuration Types
# ============================================================
class Facet(NamedTuple):
    name: str
    score: float | None = None        # None = unscored, no fill
    description: str | None = None


class Segment(NamedTuple):
    name: str
    color: str
    facets: tuple[Facet, ...] = ()


class CenterConfig(NamedTuple):
    """Central hub. visible=None means visible."""
    label: str
    radius: float
    color: str
    subtitle: str | None = None
    border_width: float | None = None
    border_color: str | None = None
    visible: bool | None = None
    font_size: float | None = None
    font_color: str | None = None


class ScaleConfig(NamedTuple):
    min: float
    max: float
    rings: int
    ring_labels: tuple[str, ...] | None = None


class StyleConfig(NamedTuple):
    show_rings: bool = True
    ring_color: str = "#cccccc"
    ring_width: float = 1
    ring_style: Literal["solid", "dashed"] = "dashed"
    show_score_labels: bool = False
    score_label_font_size: float = 14
    score_label_color: str = "#ffffff"
    score_label_stroke_color: str = "#333333"
    show_facet_points: bool = True
    facet_point_style: Literal["circle", "dot", "none"] = "circle"
    facet_opacity: float = 1
    segment_divider_width: float = 2
    font_family: str = "Arial, sans-serif"
    background_color: str | None = None
    segment_divider_color: str = "#ffffff"
    show_segment_dividers: bool = True
    hub_font_size: float = 14
    hub_font_color: str = "#ffffff"
    segment_font_size: float = 28
    facet_font_size: float = 11
    facet_font_color: str | None = None


class DiagramConfig(NamedTuple):
    center: CenterConfig
    scale: ScaleConfig
    segments: tuple[Segment, ...]
    style: StyleConfig
    size: float = DEFAULT_SIZE
    start_angle: float = DEFAULT_START_ANGLE


DEFAULT_STYLE = StyleConfig()
DEFAULT_SCALE = ScaleConfig(min=1, max=5, rings=5)
DEFAULT_CENTER = CenterConfig(label="Core", radius=60, color="#8B3A62")


def outer_radius_for(size: float) -> float:
    """Outer wheel radius for a diagram of *size*: 90% of half the size."""
    return (size / 2) * OUTER_RADIUS_FACTOR

# ============================================================
# Defaults Layering
# ============================================================
_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")

def _snake(key: str) -> str:
    """camelCase JSON key to snake_case field name ('ringLabels' -> 'ring_labels')."""
    return _CAMEL.sub("_", key).lower()

def _fields(partial: Mapping[str, Any] | None) -> dict[str, Any]:
    """Snake-cased copy of *partial* without None values (None = not given)."""
    return {_snake(k): v for k, v in (partial or {}).items() if v is not None}

def _layer(defaults, partial):
    """Return *defaults* with every field given in *partial* replaced.

    *partial* may be a mapping or an instance of the same type (taken as is).
    Unknown keys raise ValueError from NamedTuple._replace.
    """
    if isinstance(partial, type(defaults)):
        return partial
    return defaults._replace(**_fields(partial))

def _checked_fields(cls, partial) -> dict[str, Any]:
    """_fields(partial) for building *cls*; unknown or missing keys raise ValueError."""
    kw = _fields(partial)
    unknown = sorted(set(kw) - set(cls._fields))
    if unknown:
        raise ValueError(f"{cls.__name__} got unexpected field names: {unknown}")
    missing = [f for f in cls._fields if f not in kw and f not in cls._field_defaults]
    if missing:
        raise ValueError(f"{cls.__name__} is missing required fields: {missing}")
    return kw

def _facet(f) -> Facet:
    if isinstance(f, Facet):
        return f
    return Facet(**_checked_fields(Facet, f))

def _segment(s) -> Segment:
    if isinstance(s, Segment):
        return s
    kw = _checked_fields(Segment, s)
    kw["facets"] = tuple(_facet(f) for f in kw.get("facets", ()))
    return Segment(**kw)

def create_config(partial: Mapping[str, Any] | None = None) -> DiagramConfig:
    """Build a complete DiagramConfig from a sparse mapping (e.g. parsed JSON).

    Keys may be snake_case or the camelCase used by JSON configs. Missing
    center/scale/style fields come from DEFAULT_CENTER/DEFAULT_SCALE/DEFAULT_STYLE.
    Integral float ring counts (5.0 from JSON) become ints. Unknown keys raise
    ValueError. The result is not validated.
    """
    top = _fields(partial)
    scale = _layer(DEFAULT_SCALE, top.get("scale"))
    if isinstance(scale.rings, float) and scale.rings.is_integer():
        scale = scale._replace(rings=int(scale.rings))
    if scale.ring_labels is not None:
        scale = scale._replace(ring_labels=tuple(str(l) for l in scale.ring_labels))
    return DiagramConfig(
        center=_layer(DEFAULT_CENTER, top.get("center")),
        scale=scale,
        segments=tuple(_segment(s) for s in top.get("segments", ())),
        style=_layer(DEFAULT_STYLE, top.get("style")),
        size=top.get("size", DEFAULT_SIZE),
        start_angle=top.get("start_angle", DEFAULT_START_ANGLE),
    )

# ============================================================
# Validation
# ============================================================
class ConfigIssue(NamedTuple):
    field: str
    message: str

    def __str__(self) -> str:
        return self.message


class ValidationResult(NamedTuple):
    valid: bool
    errors: list[ConfigIssue]

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]


class InvalidConfigError(ValueError):
    """Raised when a diagram is requested for a configuration that failed validation."""

    def __init__(self, issues: list[ConfigIssue]):
        self.issues = list(issues)
        super().__init__("Invalid diagram configuration:\n- "
                         + "\n- ".join(i.message for i in self.issues))


def validate_config(config: DiagramConfig) -> ValidationResult:
    """Check every structural and numeric precondition of the geometry.

    All problems are collected and returned; nothing is raised.
    """
    errors: list[ConfigIssue] = []
    def err(field, message):
        errors.append(ConfigIssue(field, message))

    size = config.size
    if not size or size <= 0:
        err("size", "size must be greater than 0")

    center = config.center
    if center is None:
        err("center", "center configuration is required")
    elif not center.radius or center.radius <= 0:
        err("center.radius", "center.radius must be greater than 0")
    elif size:
        outer = outer_radius_for(size)
        if center.radius >= outer:
            err("center.radius",
                f"center.radius ({center.radius}) must be less than outer radius ({outer:.1f})")

    scale = config.scale
    if scale is None:
        err("scale", "scale configuration is required")
    else:
        if scale.min > scale.max:
            err("scale.min", "scale.min must be less than or equal to scale.max")
        if not scale.rings or scale.rings <= 0:
            err("scale.rings", "scale.rings must be greater than 0")
        elif not isinstance(scale.rings, Integral):
            err("scale.rings", "scale.rings must be a positive integer")

    segments = config.segments or ()
    if not segments:
        err("segments", "segments array must contain at least one segment")
    for si, seg in enumerate(segments):
        if not seg.facets:
            err(f"segment[{si}].facets", f"segment[{si}] must contain at least one facet")

    if scale is not None:
        for si, seg in enumerate(segments):
            for fi, facet in enumerate(seg.facets or ()):
                if facet.score is not None and not scale.min <= facet.score <= scale.max:
                    err(f"segment[{si}].facet[{fi}].score",
                        f"segment[{si}].facet[{fi}].score ({facet.score}) must be between "
                        f"{scale.min} and {scale.max}")

    return ValidationResult(valid=not errors, errors=errors)
