"""Pure geometry functions: angle partitioning, polar mapping, ring-segment paths, score radii.

Angle convention (SVG): 0 degrees = right (+x), 90 degrees = down (+y).
Angles are never normalized here; only label orientation wraps into [0, 360).
"""
import math
from numbers import Integral

import numpy as np

from .types import Point, MoveTo, LineTo, ArcTo, ClosePath, PathCmd, FacetSpan

# ============================================================
# Error Type
# ============================================================
class DomainError(ValueError):
    """Raised when a geometry function is called with mathematically invalid parameters."""

# ============================================================
# Polar Mapping
# ============================================================
def polar_to_cartesian(cx: float, cy: float, radius: float, angle_deg: float) -> Point:
    """Point at *radius* from (cx, cy) along *angle_deg* (0 = right, 90 = down)."""
    a = math.radians(angle_deg)
    return (cx + radius*math.cos(a), cy + radius*math.sin(a))

# ============================================================
# Angle Partitioning
# ============================================================
def segment_angle(segment_count: int) -> float:
    """Angular span in degrees of each of *segment_count* equal segments."""
    if segment_count <= 0:
        raise DomainError(f"segmentCount must be greater than 0, got {segment_count}")
    return 360 / segment_count

def facet_angles(seg_start: float, seg_end: float, facet_count: int) -> list[FacetSpan]:
    """Split [seg_start, seg_end] into *facet_count* equal spans, in order.

    Boundaries come from a single linspace so adjacent spans share the exact
    same float and the outer edges equal seg_start / seg_end.
    """
    if facet_count <= 0:
        raise DomainError(f"facetCount must be greater than 0, got {facet_count}")
    edges = np.linspace(seg_start, seg_end, facet_count + 1).tolist()
    edges[0], edges[-1] = seg_start, seg_end
    return [FacetSpan(s, e, (s + e) / 2) for s, e in zip(edges[:-1], edges[1:])]

# ============================================================
# Arc / Ring-Segment Paths
# ============================================================
def _arc_flags(start_angle: float, end_angle: float) -> tuple[int, int]:
    """(large_arc, sweep) flags for an arc from start_angle to end_angle."""
    diff = end_angle - start_angle
    return (1 if abs(diff) > 180 else 0), (1 if diff > 0 else 0)

def describe_arc(cx: float, cy: float, radius: float,
                 start_angle: float, end_angle: float) -> list[PathCmd]:
    """Open arc at constant *radius* from start_angle to end_angle."""
    large, sweep = _arc_flags(start_angle, end_angle)
    return [MoveTo(polar_to_cartesian(cx, cy, radius, start_angle)),
            ArcTo(radius, large, sweep, polar_to_cartesian(cx, cy, radius, end_angle))]

def segment_path(cx: float, cy: float, inner_radius: float, outer_radius: float,
                 start_angle: float, end_angle: float) -> list[PathCmd]:
    """Closed pie wedge (inner_radius == 0) or annular slice between two radii.

    The annulus runs the outer arc start -> end, steps inward, then returns
    along the inner arc end -> start with the opposite sweep.
    """
    if inner_radius < 0:
        raise DomainError(f"innerRadius must not be negative, got {inner_radius}")
    if outer_radius <= inner_radius:
        raise DomainError(
            f"outerRadius ({outer_radius}) must be greater than innerRadius ({inner_radius})")
    large, sweep = _arc_flags(start_angle, end_angle)
    outer_start = polar_to_cartesian(cx, cy, outer_radius, start_angle)
    outer_end = polar_to_cartesian(cx, cy, outer_radius, end_angle)

    if inner_radius == 0:
        return [MoveTo((cx, cy)),
                LineTo(outer_start),
                ArcTo(outer_radius, large, sweep, outer_end),
                ClosePath()]

    inner_start = polar_to_cartesian(cx, cy, inner_radius, start_angle)
    inner_end = polar_to_cartesian(cx, cy, inner_radius, end_angle)
    return [MoveTo(outer_start),
            ArcTo(outer_radius, large, sweep, outer_end),
            LineTo(inner_end),
            ArcTo(inner_radius, large, 1 - sweep, inner_start),
            ClosePath()]

def facet_score_path(cx: float, cy: float, inner_radius: float, score_radius: float,
                     start_angle: float, end_angle: float) -> list[PathCmd]:
    """Score fill for a facet: ring segment from the hub edge out to *score_radius*."""
    return segment_path(cx, cy, inner_radius, score_radius, start_angle, end_angle)

def path_vertices(cmds: list[PathCmd]) -> list[Point]:
    """Explicit vertices of a path; a closed path repeats its first vertex at the end."""
    pts: list[Point] = []
    for cmd in cmds:
        if isinstance(cmd, ClosePath):
            if pts:
                pts.append(pts[0])
        else:
            pts.append(cmd.pt)
    return pts

# ============================================================
# Score and Ring Radii
# ============================================================
def score_to_radius(score: float, min_score: float, max_score: float,
                    inner_radius: float, outer_radius: float) -> float:
    """Radius for *score* using discrete levels.

    On a 1-5 scale score 1 reaches 1/5 of the band and score 5 the full
    outer radius; the minimum score never collapses onto the hub edge.
    Out-of-range scores are clamped.
    """
    if min_score > max_score:
        raise DomainError(
            f"minScore ({min_score}) must be less than or equal to maxScore ({max_score})")
    if inner_radius >= outer_radius:
        raise DomainError(
            f"innerRadius ({inner_radius}) must be less than outerRadius ({outer_radius})")
    if min_score == max_score:
        return outer_radius
    clamped = max(min_score, min(max_score, score))
    levels = max_score - min_score + 1
    normalized = (clamped - min_score + 1) / levels
    return inner_radius + normalized*(outer_radius - inner_radius)

def ring_radii(ring_count: int, inner_radius: float, outer_radius: float) -> list[float]:
    """ring_count+1 evenly spaced radii from inner_radius to outer_radius inclusive."""
    if not isinstance(ring_count, Integral):
        raise DomainError(f"ringCount must be an integer, got {ring_count!r}")
    if ring_count <= 0:
        raise DomainError(f"ringCount must be greater than 0, got {ring_count}")
    if inner_radius >= outer_radius:
        raise DomainError(
            f"innerRadius ({inner_radius}) must be less than outerRadius ({outer_radius})")
    radii = np.linspace(inner_radius, outer_radius, ring_count + 1).tolist()
    radii[0], radii[-1] = inner_radius, outer_radius
    return radii
