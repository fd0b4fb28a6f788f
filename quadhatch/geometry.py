"""
Geometry primitives for the hatching pipeline.

Points, vectors, lines and segments are immutable value types. Their ordering
operators only exist to give a deterministic output order; they say nothing
about where things are in the plane.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple
import numpy as np

from .constants import POINT_TOLERANCE


@total_ordering
@dataclass(frozen=True)
class Point:
    """
    A location in the plane.

    Points sort by y first, then by x, both ascending.
    """
    x: float
    y: float

    def __lt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def coincides(self, other: "Point", tolerance: float = POINT_TOLERANCE) -> bool:
        """
        Check whether two points are the same point for deduplication.

        Both coordinate differences must be below an absolute tolerance.

        Args:
            other: Point to compare against
            tolerance: Absolute tolerance on each axis

        Returns:
            True if the points are considered identical
        """
        return abs(self.x - other.x) < tolerance and abs(self.y - other.y) < tolerance

    def distance_to(self, other: "Point") -> float:
        """Calculate the Euclidean distance to another point."""
        return float(np.hypot(other.x - self.x, other.y - self.y))

    def offset(self, vector: "Vector", factor: float = 1.0) -> "Point":
        """Return this point moved by factor * vector."""
        return Point(self.x + vector.x * factor, self.y + vector.y * factor)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Vector:
    """A free direction or displacement in the plane."""
    x: float
    y: float

    def length(self) -> float:
        return float(np.hypot(self.x, self.y))

    def perpendicular(self) -> "Vector":
        """Rotate by 90 degrees counter-clockwise."""
        return Vector(-self.y, self.x)

    def normalized(self) -> "Vector":
        length = self.length()
        return Vector(self.x / length, self.y / length)

    def scaled(self, factor: float) -> "Vector":
        return Vector(self.x * factor, self.y * factor)


@dataclass(frozen=True)
class Line:
    """
    An infinite line through origin along direction.

    The direction does not have to be unit length, except when the line
    belongs to a hatch family where the spacing depends on it.
    """
    origin: Point
    direction: Vector

    def point_at(self, t: float) -> Point:
        return self.origin.offset(self.direction, t)


@total_ordering
@dataclass(frozen=True)
class Segment:
    """
    A bounded piece of a line between start and end.

    Segments sort lexicographically on (start.x, start.y, end.x, end.y).
    Endpoints keep the order in which they were produced.
    """
    start: Point
    end: Point

    def sort_key(self) -> Tuple[float, float, float, float]:
        return (self.start.x, self.start.y, self.end.x, self.end.y)

    def __lt__(self, other: "Segment") -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def length(self) -> float:
        """Calculate the length of this segment."""
        return self.start.distance_to(self.end)

    def angle(self) -> float:
        """Calculate the angle of this segment in degrees."""
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        return float(np.degrees(np.arctan2(dy, dx)))


def calculate_direction(angle_deg: float) -> Vector:
    """
    Calculate the unit direction vector for a hatch angle.

    The angle is not range checked; any real value works.

    Args:
        angle_deg: Hatch angle in degrees

    Returns:
        Unit vector (cos, sin) of the angle
    """
    angle_rad = np.radians(angle_deg)
    return Vector(float(np.cos(angle_rad)), float(np.sin(angle_rad)))
