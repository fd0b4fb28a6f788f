"""
Exceptions raised by the hatching pipeline.

Geometric degeneracies (parallel edges, grazed corners, zero-length edges)
are never errors; they only remove a hatch line from the output.
"""


class HatchingError(Exception):
    """Base class for all quadhatch errors."""


class InputCountError(HatchingError):
    """The contour did not receive exactly four points."""

    def __init__(self, count: int, expected: int = 4):
        super().__init__(f"Expected {expected} points, got {count}")
        self.count = count
        self.expected = expected


class InputFileError(HatchingError):
    """The input point file could not be read."""

    def __init__(self, path: str):
        super().__init__(f"Cannot open input file {path}")
        self.path = path


class OutputFileError(HatchingError):
    """The result file could not be written."""

    def __init__(self, path: str):
        super().__init__(f"Cannot write output file {path}")
        self.path = path
