"""
Utility functions for hatching operations.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from .constants import DETERMINANT_TOLERANCE, POINT_TOLERANCE
from .geometry import Line, Point, Segment


def solve_intersection(line: Line, segment: Segment) -> Optional[Tuple[float, float]]:
    """
    Solve origin + t * d = start + u * (end - start) with Cramer's rule.

    Args:
        line: Infinite line
        segment: Bounded segment

    Returns:
        Parameters (t, u), or None if the line and the segment are parallel
        or coincident
    """
    o = line.origin
    d = line.direction
    p1 = segment.start
    seg_x = segment.end.x - p1.x
    seg_y = segment.end.y - p1.y

    det = d.x * (-seg_y) - d.y * (-seg_x)

    if abs(det) < DETERMINANT_TOLERANCE:
        return None  # Parallel or coincident

    right_x = p1.x - o.x
    right_y = p1.y - o.y

    t = (right_x * (-seg_y) - right_y * (-seg_x)) / det
    u = (d.x * right_y - d.y * right_x) / det

    return (t, u)


def find_intersection(line: Line, segment: Segment) -> Optional[Point]:
    """
    Find where an infinite line crosses a bounded segment.

    The line parameter is unconstrained, the segment parameter must lie in
    [0, 1] with both endpoints included.

    Args:
        line: Hatch line
        segment: Contour edge

    Returns:
        Intersection point, or None if there is no intersection
    """
    params = solve_intersection(line, segment)
    if params is None:
        return None

    t, u = params
    if 0 <= u <= 1:
        return line.point_at(t)

    return None


def collect_intersections(
    line: Line,
    edges: Iterable[Segment],
    tolerance: float = POINT_TOLERANCE
) -> List[Point]:
    """
    Intersect a line with every edge and keep the unique points.

    Points are compared against the ones already kept for this line, in
    edge order, so the first of two coincident points wins.

    Args:
        line: Hatch line
        edges: Contour edges
        tolerance: Absolute deduplication tolerance

    Returns:
        Unique intersection points in the order they were found
    """
    intersections: List[Point] = []

    for edge in edges:
        point = find_intersection(line, edge)
        if point is None:
            continue
        if any(point.coincides(existing, tolerance) for existing in intersections):
            continue
        intersections.append(point)

    return intersections


def sort_segments(segments: Iterable[Segment]) -> List[Segment]:
    """
    Sort segments into their deterministic output order.

    Duplicates are kept.
    """
    return sorted(segments, key=Segment.sort_key)


def get_bounding_box(points: Sequence[Point]) -> Tuple[float, float, float, float]:
    """
    Calculate the bounding box of a set of points.

    Args:
        points: Points to enclose

    Returns:
        Tuple of (min_x, min_y, max_x, max_y)
    """
    if not points:
        return (0.0, 0.0, 0.0, 0.0)

    xs = [p.x for p in points]
    ys = [p.y for p in points]

    return (min(xs), min(ys), max(xs), max(ys))
