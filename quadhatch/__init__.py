"""
Quadrilateral hatch generation for raster fill path planning.

A family of parallel scan lines at a given angle and spacing is clipped to a
four-point contour, and the resulting segments are returned in a
deterministic order.

Usage:
    from quadhatch import HatchingParameters, Point, generate_hatching_for_contour

    square = [Point(0, 0), Point(10, 0), Point(0, 10), Point(10, 10)]
    params = HatchingParameters(hatch_angle=0, hatch_spacing=1)
    segments = generate_hatching_for_contour(square, params)
"""

from .base import HatchingPlugin, HatchingParameters, HatchingStrategy
from .contour import ContourOrdering, DiagonalSource, build_contour
from .exceptions import HatchingError, InputCountError, InputFileError, OutputFileError
from .geometry import Line, Point, Segment, Vector, calculate_direction
from .registry import HatchingRegistry, registry
from .plugins import CrossHatchingPlugin, LineHatchingPlugin
from .integration import generate_hatching_for_contour, get_hatching_statistics

# Auto-register built-in plugins
registry.register(HatchingStrategy.LINES, LineHatchingPlugin)
registry.register(HatchingStrategy.CROSS, CrossHatchingPlugin)

__all__ = [
    'HatchingPlugin',
    'HatchingParameters',
    'HatchingStrategy',
    'HatchingRegistry',
    'registry',
    'LineHatchingPlugin',
    'CrossHatchingPlugin',
    'ContourOrdering',
    'DiagonalSource',
    'build_contour',
    'HatchingError',
    'InputCountError',
    'InputFileError',
    'OutputFileError',
    'Point',
    'Vector',
    'Line',
    'Segment',
    'calculate_direction',
    'generate_hatching_for_contour',
    'get_hatching_statistics',
]
