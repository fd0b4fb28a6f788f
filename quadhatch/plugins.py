"""
Built-in hatching plugins.
"""

import logging
from dataclasses import replace
from typing import List, Sequence
import numpy as np

from .base import HatchingPlugin, HatchingParameters
from .contour import build_contour, contour_diagonal, find_center
from .geometry import Line, Point, Segment, Vector, calculate_direction
from .utils import collect_intersections

logger = logging.getLogger(__name__)


class LineHatchingPlugin(HatchingPlugin):
    """
    Parallel line hatching plugin.

    Sweeps a family of parallel infinite lines across the contour and keeps
    every line that crosses the boundary at exactly two distinct points.
    """

    def __init__(self):
        super().__init__()
        self._name = "Line Hatching"
        self._version = "1.0.0"

    def generate_hatching(
        self,
        points: Sequence[Point],
        parameters: HatchingParameters
    ) -> List[Segment]:
        """
        Generate parallel line hatching for a quadrilateral.

        Args:
            points: Exactly four contour corners, in any order
            parameters: Hatching parameters

        Returns:
            Sorted list of hatch segments, possibly empty

        Raises:
            InputCountError: If the number of points is not four
        """
        edges = build_contour(points, parameters.contour_ordering)

        if not self.validate_parameters(parameters):
            logger.warning("Invalid hatching parameters %s, no hatching generated", parameters)
            return []

        segments = self._generate_parallel_lines(points, edges, parameters)
        return self.sort_segments(segments)

    def _generate_parallel_lines(
        self,
        points: Sequence[Point],
        edges: List[Segment],
        parameters: HatchingParameters
    ) -> List[Segment]:
        """
        Generate the unsorted hatch segments.

        Args:
            points: Contour corners in input order
            edges: Contour edges
            parameters: Hatching parameters

        Returns:
            One segment per line with exactly two unique intersections
        """
        direction = calculate_direction(parameters.hatch_angle)
        step_vector = self._step_vector(direction, parameters.hatch_spacing)
        center = find_center(points)

        diagonal = contour_diagonal(points, parameters.diagonal_source)
        if not np.all(np.isfinite([diagonal, center.x, center.y])):
            logger.warning("Contour has non-finite coordinates, no hatching generated")
            return []

        lines_per_side = int(np.floor(diagonal / parameters.hatch_spacing)) + parameters.line_margin

        logger.debug(
            "Generating %d hatch lines at %.3f deg (diagonal %.6g, spacing %.6g)",
            2 * lines_per_side + 1, parameters.hatch_angle, diagonal, parameters.hatch_spacing
        )

        segments = []
        for i in range(-lines_per_side, lines_per_side + 1):
            hatch_line = Line(center.offset(step_vector, i), direction)
            intersections = collect_intersections(hatch_line, edges)

            # A line through a single corner or along an edge contributes nothing
            if len(intersections) == 2:
                segments.append(Segment(intersections[0], intersections[1]))

        logger.debug("Kept %d of %d hatch lines", len(segments), 2 * lines_per_side + 1)
        return segments

    @staticmethod
    def _step_vector(direction: Vector, spacing: float) -> Vector:
        """Offset between neighbouring lines, perpendicular to the hatch direction."""
        return direction.perpendicular().normalized().scaled(spacing)


class CrossHatchingPlugin(HatchingPlugin):
    """
    Cross hatching plugin.

    Runs line hatching twice, at the hatch angle and perpendicular to it.
    """

    def __init__(self):
        super().__init__()
        self._name = "Cross Hatching"
        self._version = "1.0.0"

    def generate_hatching(
        self,
        points: Sequence[Point],
        parameters: HatchingParameters
    ) -> List[Segment]:
        """
        Generate cross hatching for a quadrilateral.

        Args:
            points: Exactly four contour corners, in any order
            parameters: Hatching parameters

        Returns:
            Sorted union of both line families
        """
        edges = build_contour(points, parameters.contour_ordering)

        if not self.validate_parameters(parameters):
            logger.warning("Invalid hatching parameters %s, no hatching generated", parameters)
            return []

        # Both passes share one set of edges
        line_plugin = LineHatchingPlugin()
        crossed = replace(parameters, hatch_angle=parameters.hatch_angle + 90)

        first = line_plugin._generate_parallel_lines(points, edges, parameters)
        second = line_plugin._generate_parallel_lines(points, edges, crossed)

        return self.sort_segments(first + second)
