"""
Base classes and interfaces for the hatching plugin system.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence
import numpy as np

from .constants import DEFAULT_HATCH_ANGLE, DEFAULT_HATCH_SPACING, LINE_MARGIN
from .contour import ContourOrdering, DiagonalSource
from .geometry import Point, Segment
from .utils import sort_segments

logger = logging.getLogger(__name__)


class HatchingStrategy(Enum):
    """Enumeration of available hatching strategies."""
    LINES = "lines"
    CROSS = "cross"


@dataclass(frozen=True)
class HatchingParameters:
    """
    Parameters for hatching generation.

    Attributes:
        hatch_angle: Hatch angle in degrees, not range checked
        hatch_spacing: Distance between neighbouring hatch lines, must be > 0
        contour_ordering: How the four corners are paired into edges
        diagonal_source: Which two points size the line family
        line_margin: Extra lines generated beyond the diagonal on each side
    """
    hatch_angle: float = DEFAULT_HATCH_ANGLE  # degrees
    hatch_spacing: float = DEFAULT_HATCH_SPACING
    contour_ordering: ContourOrdering = ContourOrdering.SORTED
    diagonal_source: DiagonalSource = DiagonalSource.INPUT_ORDER
    line_margin: int = LINE_MARGIN


class HatchingPlugin(ABC):
    """
    Abstract base class for hatching plugins.

    All hatching strategies must inherit from this class and implement
    the generate_hatching method.
    """

    def __init__(self):
        """Initialize the hatching plugin."""
        self._name = self.__class__.__name__
        self._version = "1.0.0"

    @property
    def name(self) -> str:
        """Get the plugin name."""
        return self._name

    @property
    def version(self) -> str:
        """Get the plugin version."""
        return self._version

    @abstractmethod
    def generate_hatching(
        self,
        points: Sequence[Point],
        parameters: HatchingParameters
    ) -> List[Segment]:
        """
        Generate hatch segments for a quadrilateral contour.

        Args:
            points: Exactly four contour corners, in any order
            parameters: Hatching parameters

        Returns:
            Segments in their deterministic sorted order

        Raises:
            InputCountError: If the number of points is not four
        """
        pass

    def validate_parameters(self, parameters: HatchingParameters) -> bool:
        """
        Validate parameters for this hatching strategy.

        Args:
            parameters: Parameters to validate

        Returns:
            True if parameters are valid, False otherwise
        """
        if not np.isfinite(parameters.hatch_spacing) or parameters.hatch_spacing <= 0:
            return False
        if not np.isfinite(parameters.hatch_angle):
            return False
        if parameters.line_margin < 0:
            return False
        return True

    def sort_segments(self, segments: List[Segment]) -> List[Segment]:
        """
        Put segments into output order.

        Subclasses can override this for a different scan order.
        """
        return sort_segments(segments)
