"""
Tests for the intersector, per-line deduplication and the segment sorter.
"""

import pytest

from quadhatch import HatchingParameters, generate_hatching_for_contour
from quadhatch.contour import build_contour
from quadhatch.fileio import format_segments
from quadhatch.geometry import Line, Point, Segment, Vector, calculate_direction
from quadhatch.utils import (
    collect_intersections,
    find_intersection,
    get_bounding_box,
    solve_intersection,
    sort_segments,
)

SQUARE = [Point(0, 0), Point(10, 0), Point(0, 10), Point(10, 10)]
DIAMOND = [Point(5, 0), Point(10, 5), Point(5, 10), Point(0, 5)]


def test_parallel_line_has_no_intersection():
    segment = Segment(Point(0, 0), Point(10, 0))

    assert solve_intersection(Line(Point(0, 3), Vector(1, 0)), segment) is None
    assert find_intersection(Line(Point(0, 3), Vector(1, 0)), segment) is None


def test_coincident_line_has_no_intersection():
    segment = Segment(Point(0, 0), Point(10, 0))

    assert find_intersection(Line(Point(5, 0), Vector(-2, 0)), segment) is None


def test_nearly_parallel_line_below_determinant_tolerance():
    segment = Segment(Point(0, 0), Point(1, 0))

    assert find_intersection(Line(Point(0, -1), Vector(1, 1e-11)), segment) is None


def test_crossing_strictly_inside_segment():
    line = Line(Point(5, -5), Vector(0, 1))
    segment = Segment(Point(0, 0), Point(10, 0))

    t, u = solve_intersection(line, segment)
    assert 0 < u < 1
    assert u == pytest.approx(0.5)
    assert t == pytest.approx(5.0)

    point = find_intersection(line, segment)
    assert point.x == pytest.approx(5.0)
    assert point.y == pytest.approx(0.0)


def test_oblique_crossing_lies_on_both():
    line = Line(Point(1, 1), calculate_direction(30))
    segment = Segment(Point(4, -3), Point(6, 9))

    t, u = solve_intersection(line, segment)
    point = find_intersection(line, segment)

    on_line = line.point_at(t)
    on_segment = Point(4 + 2 * u, -3 + 12 * u)
    assert 0 < u < 1
    assert point.x == pytest.approx(on_line.x)
    assert point.y == pytest.approx(on_line.y)
    assert point.x == pytest.approx(on_segment.x)
    assert point.y == pytest.approx(on_segment.y)


def test_segment_endpoints_are_inclusive_and_line_is_unbounded():
    segment = Segment(Point(0, 0), Point(0, 10))

    assert find_intersection(Line(Point(5, 0), Vector(1, 0)), segment) == Point(0, 0)
    assert find_intersection(Line(Point(5, 10), Vector(1, 0)), segment) == Point(0, 10)
    assert find_intersection(Line(Point(5, 10.5), Vector(1, 0)), segment) is None
    # Negative line parameter is accepted
    assert find_intersection(Line(Point(-100, 4), Vector(-1, 0)), segment) == Point(0, 4)


def test_shared_vertex_collapses_to_one_point():
    edges = build_contour(SQUARE)
    line = Line(Point(0, 0), calculate_direction(-45))

    assert collect_intersections(line, edges) == [Point(0, 0)]


def test_nearby_points_collapse_within_tolerance():
    edges = [
        Segment(Point(0, 0), Point(0, 10)),
        Segment(Point(1e-11, -5), Point(1e-11, 5)),
        Segment(Point(10, 0), Point(10, 10)),
    ]
    line = Line(Point(5, 0), Vector(1, 0))

    points = collect_intersections(line, edges)

    assert points == [Point(0, 0), Point(10, 0)]


def test_sorter_keeps_duplicates():
    a = Segment(Point(1, 0), Point(2, 0))
    b = Segment(Point(0, 3), Point(4, 3))

    assert sort_segments([a, b, a]) == [b, a, a]
    assert sort_segments([]) == []


def test_bounding_box():
    assert get_bounding_box(DIAMOND) == (0, 0, 10, 10)
    assert get_bounding_box([]) == (0.0, 0.0, 0.0, 0.0)


def test_square_round_trip_produces_eleven_horizontal_segments():
    segments = generate_hatching_for_contour(SQUARE, HatchingParameters(hatch_angle=0, hatch_spacing=1))

    assert format_segments(segments) == [
        f"Line {y + 1}: (0,{y}) -> (10,{y})" for y in range(11)
    ]


def test_vertex_grazing_lines_are_dropped():
    # Lines y=0 and y=10 only touch the diamond's corners
    segments = generate_hatching_for_contour(DIAMOND, HatchingParameters(hatch_angle=0, hatch_spacing=5))

    assert segments == [Segment(Point(0, 5), Point(10, 5))]


def test_huge_step_still_produces_a_reasonable_set():
    segments = generate_hatching_for_contour(SQUARE, HatchingParameters(hatch_angle=0, hatch_spacing=1000))

    assert segments == [Segment(Point(0, 5), Point(10, 5))]


def test_contour_missed_by_every_line_yields_nothing():
    collapsed = [Point(3, 3)] * 4

    assert generate_hatching_for_contour(collapsed, HatchingParameters(hatch_angle=10)) == []


def test_pipeline_is_idempotent():
    params = HatchingParameters(hatch_angle=37.5, hatch_spacing=0.7)
    quad = [Point(1.5, -2), Point(11, 0.5), Point(-0.5, 8), Point(9, 9.25)]

    first = format_segments(generate_hatching_for_contour(quad, params))
    second = format_segments(generate_hatching_for_contour(list(quad), params))

    assert first == second
    assert len(first) > 0


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_corner_produces_no_hatching(bad):
    points = [Point(0, 0), Point(10, 0), Point(0, 10), Point(10, bad)]

    assert generate_hatching_for_contour(points, HatchingParameters(hatch_angle=0)) == []
