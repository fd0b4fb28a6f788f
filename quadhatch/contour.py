"""
Contour construction: four unordered corner points to four boundary edges.
"""

import logging
from enum import Enum
from typing import List, Sequence, Tuple
import numpy as np
from shapely.geometry import Polygon

from .constants import CONTOUR_POINT_COUNT
from .exceptions import InputCountError
from .geometry import Point, Segment

logger = logging.getLogger(__name__)


class ContourOrdering(Enum):
    """How the four corner points are paired into edges."""
    SORTED = "sorted"
    ANGULAR = "angular"


class DiagonalSource(Enum):
    """Which pair of points spans the diagonal used to size the line family."""
    INPUT_ORDER = "input"
    SORTED = "sorted"


def _check_count(points: Sequence[Point]) -> None:
    if len(points) != CONTOUR_POINT_COUNT:
        raise InputCountError(len(points), CONTOUR_POINT_COUNT)


def build_contour(
    points: Sequence[Point],
    ordering: ContourOrdering = ContourOrdering.SORTED
) -> List[Segment]:
    """
    Build the four boundary edges of a quadrilateral contour.

    With SORTED ordering the points are sorted (y, then x) into p0..p3 and
    paired as bottom p0-p1, top p2-p3, left p0-p2, right p1-p3. This pairing
    is only guaranteed for axis-aligned (or nearly axis-aligned) rectangles.

    With ANGULAR ordering the points are walked by polar angle around their
    mean and consecutive points are joined, which works for any convex
    quadrilateral.

    Args:
        points: Exactly four corner points, in any order
        ordering: Edge pairing policy

    Returns:
        List of four edges

    Raises:
        InputCountError: If the number of points is not four
    """
    _check_count(points)

    if ordering == ContourOrdering.ANGULAR:
        ring = _angular_order(points)
        edges = [Segment(ring[i], ring[(i + 1) % len(ring)]) for i in range(len(ring))]
    else:
        p0, p1, p2, p3 = sorted(points)
        edges = [
            Segment(p0, p1),  # bottom
            Segment(p2, p3),  # top
            Segment(p0, p2),  # left
            Segment(p1, p3),  # right
        ]

    if not edges_form_simple_polygon(edges):
        logger.warning(
            "Edges built with %s ordering do not form a simple quadrilateral; "
            "hatching may be incomplete", ordering.value
        )

    return edges


def _angular_order(points: Sequence[Point]) -> List[Point]:
    center = find_center(points)
    angles = [np.arctan2(p.y - center.y, p.x - center.x) for p in points]
    order = np.argsort(angles, kind="stable")
    return [points[i] for i in order]


def find_center(points: Sequence[Point]) -> Point:
    """
    Calculate the arithmetic mean of the points.

    This is not the area centroid of the quadrilateral.
    """
    xs = np.array([p.x for p in points], dtype=float)
    ys = np.array([p.y for p in points], dtype=float)
    return Point(float(xs.mean()), float(ys.mean()))


def contour_diagonal(
    points: Sequence[Point],
    source: DiagonalSource = DiagonalSource.INPUT_ORDER
) -> float:
    """
    Calculate the diagonal length used to size the hatch line family.

    Args:
        points: Contour points in the order they were given
        source: INPUT_ORDER measures first to last input point,
                SORTED measures first to last point of the sorted order

    Returns:
        Distance between the two chosen points
    """
    _check_count(points)
    ordered = sorted(points) if source == DiagonalSource.SORTED else list(points)
    return ordered[0].distance_to(ordered[-1])


def _edges_to_ring(edges: Sequence[Segment]) -> List[Tuple[float, float]]:
    """Walk edges end to start into a closed ring of coordinates."""
    remaining = list(edges[1:])
    ring = [edges[0].start, edges[0].end]

    while remaining:
        tail = ring[-1]
        for i, edge in enumerate(remaining):
            if edge.start == tail:
                ring.append(edge.end)
                break
            if edge.end == tail:
                ring.append(edge.start)
                break
        else:
            return []
        remaining.pop(i)

    return [p.as_tuple() for p in ring[:-1]]


def edges_form_simple_polygon(edges: Sequence[Segment]) -> bool:
    """
    Check that the edges close into a valid, non-self-intersecting polygon.

    Args:
        edges: Boundary edges sharing their endpoints

    Returns:
        True if shapely accepts the ring as a valid polygon with area
    """
    ring = _edges_to_ring(edges)
    if len(ring) < 3 or not np.all(np.isfinite(ring)):
        return False

    polygon = Polygon(ring)
    return polygon.is_valid and polygon.area > 0
