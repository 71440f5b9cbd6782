"""Tests for radial/geometry.py pure functions."""
import math
import pytest
from radial.geometry import (
    DomainError,
    polar_to_cartesian, segment_angle, facet_angles,
    describe_arc, segment_path, facet_score_path, path_vertices,
    score_to_radius, ring_radii,
)
from radial.types import MoveTo, LineTo, ArcTo, ClosePath


def _close(p, q, tol=1e-9):
    return abs(p[0] - q[0]) < tol and abs(p[1] - q[1]) < tol


# --- polar_to_cartesian ---

@pytest.mark.parametrize("angle, expected", [
    (0, (110, 50)),
    (90, (100, 60)),
    (180, (90, 50)),
    (-90, (100, 40)),
    (270, (100, 40)),
])
def test_polar_cardinal_directions(angle, expected):
    assert _close(polar_to_cartesian(100, 50, 10, angle), expected)


def test_polar_zero_radius_is_center():
    assert _close(polar_to_cartesian(3, 4, 0, 123.4), (3, 4))


def test_polar_45_degrees():
    x, y = polar_to_cartesian(0, 0, math.sqrt(2), 45)
    assert abs(x - 1) < 1e-12
    assert abs(y - 1) < 1e-12


# --- segment_angle ---

@pytest.mark.parametrize("n", [1, 3, 7, 12])
def test_segment_angles_sum_to_360(n):
    assert abs(segment_angle(n) * n - 360) < 1e-9


def test_segment_angle_values():
    assert segment_angle(4) == 90
    assert segment_angle(1) == 360


@pytest.mark.parametrize("n", [0, -1])
def test_segment_angle_non_positive_raises(n):
    with pytest.raises(DomainError, match="segmentCount"):
        segment_angle(n)


# --- facet_angles ---

def test_facet_angles_tile_segment():
    spans = facet_angles(-90, 30, 7)
    assert len(spans) == 7
    assert spans[0].start_angle == -90
    assert spans[-1].end_angle == 30
    for a, b in zip(spans, spans[1:]):
        assert a.end_angle == b.start_angle


def test_facet_angles_mid():
    spans = facet_angles(0, 90, 3)
    assert [s.mid_angle for s in spans] == pytest.approx([15, 45, 75])
    for s in spans:
        assert s.mid_angle == pytest.approx((s.start_angle + s.end_angle) / 2)


def test_facet_angles_single_facet_is_whole_segment():
    (span,) = facet_angles(10, 50, 1)
    assert span == (10, 50, 30)


def test_facet_angles_not_normalized():
    spans = facet_angles(300, 420, 2)
    assert spans[1].end_angle == 420
    assert spans[1].start_angle == pytest.approx(360)


def test_facet_angles_zero_raises():
    with pytest.raises(DomainError, match="facetCount"):
        facet_angles(0, 90, 0)


# --- describe_arc ---

def test_describe_arc_small_clockwise():
    cmds = describe_arc(0, 0, 10, 0, 90)
    assert isinstance(cmds[0], MoveTo)
    assert _close(cmds[0].pt, (10, 0))
    arc = cmds[1]
    assert isinstance(arc, ArcTo)
    assert (arc.large_arc, arc.sweep) == (0, 1)
    assert _close(arc.pt, (0, 10))


def test_describe_arc_large_flag():
    assert describe_arc(0, 0, 10, 0, 270)[1].large_arc == 1
    assert describe_arc(0, 0, 10, 0, 180)[1].large_arc == 0


def test_describe_arc_reverse_sweep():
    arc = describe_arc(0, 0, 10, 90, 0)[1]
    assert arc.sweep == 0
    assert arc.large_arc == 0


# --- segment_path ---

def test_segment_path_wedge():
    cmds = segment_path(50, 50, 0, 10, 0, 90)
    assert [type(c) for c in cmds] == [MoveTo, LineTo, ArcTo, ClosePath]
    assert cmds[0].pt == (50, 50)
    assert _close(cmds[1].pt, (60, 50))
    assert _close(cmds[2].pt, (50, 60))


def test_segment_path_annulus():
    cmds = segment_path(0, 0, 5, 10, 0, 90)
    assert [type(c) for c in cmds] == [MoveTo, ArcTo, LineTo, ArcTo, ClosePath]
    outer_arc, inner_arc = cmds[1], cmds[3]
    assert outer_arc.radius == 10 and inner_arc.radius == 5
    assert outer_arc.sweep == 1
    assert inner_arc.sweep == 0
    assert _close(cmds[2].pt, (0, 5))      # inner end
    assert _close(inner_arc.pt, (5, 0))    # back to inner start


def test_segment_path_annulus_large_span_flags():
    cmds = segment_path(0, 0, 5, 10, -90, 150)
    assert cmds[1].large_arc == 1
    assert cmds[3].large_arc == 1


@pytest.mark.parametrize("inner", [0, 4])
def test_segment_path_closed(inner):
    cmds = segment_path(0, 0, inner, 10, 15, 80)
    pts = path_vertices(cmds)
    assert isinstance(cmds[-1], ClosePath)
    assert pts[-1] == pts[0]
    n_arcs = sum(isinstance(c, ArcTo) for c in cmds)
    assert n_arcs == (1 if inner == 0 else 2)


def test_segment_path_bad_radii_raise():
    with pytest.raises(DomainError):
        segment_path(0, 0, 10, 10, 0, 90)
    with pytest.raises(DomainError):
        segment_path(0, 0, -1, 10, 0, 90)


def test_facet_score_path_matches_segment_path():
    assert facet_score_path(0, 0, 60, 240, 0, 45) == segment_path(0, 0, 60, 240, 0, 45)


# --- score_to_radius ---

def test_score_min_is_first_level():
    r = score_to_radius(1, 1, 5, 60, 360)
    assert r == pytest.approx(60 + (1 / 5) * 300)


def test_score_max_is_outer():
    assert score_to_radius(5, 1, 5, 60, 360) == pytest.approx(360)


def test_score_mid():
    assert score_to_radius(3, 1, 5, 60, 360) == pytest.approx(240)


def test_score_clamped():
    assert score_to_radius(-10, 1, 5, 60, 360) == score_to_radius(1, 1, 5, 60, 360)
    assert score_to_radius(99, 1, 5, 60, 360) == score_to_radius(5, 1, 5, 60, 360)


def test_score_flat_scale_is_outer():
    for s in (0, 3, 7):
        assert score_to_radius(s, 3, 3, 10, 20) == 20


def test_score_min_gt_max_raises():
    with pytest.raises(DomainError, match="minScore"):
        score_to_radius(3, 5, 1, 60, 360)


def test_score_inner_ge_outer_raises():
    with pytest.raises(DomainError, match="innerRadius"):
        score_to_radius(3, 1, 5, 360, 360)


# --- ring_radii ---

def test_ring_radii_bounds():
    radii = ring_radii(7, 60, 360)
    assert len(radii) == 8
    assert radii[0] == 60
    assert radii[-1] == 360
    assert all(a < b for a, b in zip(radii, radii[1:]))


def test_ring_radii_even_step():
    assert ring_radii(5, 60, 360) == pytest.approx([60, 120, 180, 240, 300, 360])


def test_ring_radii_invalid_raise():
    with pytest.raises(DomainError, match="ringCount"):
        ring_radii(0, 60, 360)
    with pytest.raises(DomainError, match="innerRadius"):
        ring_radii(5, 360, 60)


@pytest.mark.parametrize("n", [2.5, 5.0])
def test_ring_radii_non_integer_count_raises(n):
    with pytest.raises(DomainError, match="ringCount must be an integer"):
        ring_radii(n, 60, 360)
