"""Shared type definitions for the radial diagram geometry."""
from typing import Literal, NamedTuple

Point = tuple[float, float]

class MoveTo(NamedTuple):
    pt: Point

class LineTo(NamedTuple):
    pt: Point

class ArcTo(NamedTuple):
    radius: float; large_arc: int; sweep: int
    pt: Point

class ClosePath(NamedTuple):
    pass

PathCmd = MoveTo | LineTo | ArcTo | ClosePath

class FacetSpan(NamedTuple):
    start_angle: float; end_angle: float; mid_angle: float

Anchor = Literal["start", "middle", "end"]

class LabelOrientation(NamedTuple):
    anchor: Anchor
    rotation: float
    baseline: str = "middle"
