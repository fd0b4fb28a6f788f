"""
Pipeline entry point connecting contour points to a hatching plugin.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .base import HatchingParameters, HatchingStrategy
from .constants import CONTOUR_POINT_COUNT
from .exceptions import InputCountError
from .geometry import Point, Segment
from .utils import get_bounding_box

logger = logging.getLogger(__name__)


def generate_hatching_for_contour(
    points: Sequence[Point],
    parameters: Optional[HatchingParameters] = None,
    strategy: HatchingStrategy = HatchingStrategy.LINES
) -> List[Segment]:
    """
    Generate sorted hatch segments for a four-point contour.

    Args:
        points: Contour corners, in any order
        parameters: Hatching parameters (defaults when omitted)
        strategy: Hatching strategy to use

    Returns:
        List of segments in output order

    Raises:
        InputCountError: If the number of points is not four
        KeyError: If no plugin is registered for the strategy
    """
    from .registry import registry

    if len(points) != CONTOUR_POINT_COUNT:
        raise InputCountError(len(points), CONTOUR_POINT_COUNT)

    if parameters is None:
        parameters = HatchingParameters()

    plugin = registry.get_plugin(strategy)
    if plugin is None:
        raise KeyError(f"No hatching plugin registered for {strategy.value!r}")

    segments = plugin.generate_hatching(points, parameters)
    logger.info("%s produced %d segments", plugin.name, len(segments))
    return segments


def get_hatching_statistics(segments: Sequence[Segment]) -> Dict[str, Any]:
    """
    Calculate statistics about generated hatching.

    Args:
        segments: Hatch segments

    Returns:
        Dictionary with statistics
    """
    lengths = [segment.length() for segment in segments]
    endpoints = [p for segment in segments for p in (segment.start, segment.end)]

    stats = {
        'total_lines': len(segments),
        'total_scan_length': sum(lengths),
        'min_line_length': min(lengths) if lengths else 0.0,
        'max_line_length': max(lengths) if lengths else 0.0,
        'avg_line_length': sum(lengths) / len(lengths) if lengths else 0.0,
        'bounds': get_bounding_box(endpoints),
    }

    return stats
