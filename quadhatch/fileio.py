"""
Reading contour points and writing hatch segments as text.
"""

import logging
from typing import Iterable, List, Optional, TextIO
import numpy as np

from .constants import CONSOLE_OUTPUT, SIGNIFICANT_DIGITS
from .exceptions import InputFileError, OutputFileError
from .geometry import Point, Segment

logger = logging.getLogger(__name__)


def parse_points(text: str) -> List[Point]:
    """
    Parse whitespace separated "x y" pairs.

    Reading stops at the first token that is not a finite number written
    without digit separators; an unpaired trailing number is ignored.
    """
    points = []
    pending: Optional[float] = None

    for token in text.split():
        try:
            value = float(token)
        except ValueError:
            value = None

        if value is None or "_" in token or not np.isfinite(value):
            logger.debug("Stopped reading points at token %r", token)
            break

        if pending is None:
            pending = value
        else:
            points.append(Point(pending, value))
            pending = None

    return points


def read_points(path: str) -> List[Point]:
    """
    Read contour points from a file.

    Args:
        path: File with one "x y" pair per line

    Returns:
        Points in file order

    Raises:
        InputFileError: If the file cannot be opened
    """
    try:
        # Undecodable bytes become a non-numeric token and end the point list
        with open(path, encoding="utf-8", errors="replace") as fin:
            text = fin.read()
    except OSError as e:
        raise InputFileError(path) from e

    points = parse_points(text)
    logger.info("Read %d points from %s", len(points), path)
    return points


def format_number(value: float) -> str:
    return f"{value:.{SIGNIFICANT_DIGITS}g}"


def format_segment(index: int, segment: Segment) -> str:
    """
    Render one segment as "Line N: (x,y) -> (x,y)".

    Args:
        index: 1-based position in the output
        segment: Segment to render
    """
    return (
        f"Line {index}: "
        f"({format_number(segment.start.x)},{format_number(segment.start.y)}) -> "
        f"({format_number(segment.end.x)},{format_number(segment.end.y)})"
    )


def format_segments(segments: Iterable[Segment]) -> List[str]:
    return [format_segment(i, segment) for i, segment in enumerate(segments, start=1)]


def _write_lines(lines: List[str], stream: TextIO) -> None:
    for line in lines:
        stream.write(line + "\n")


def write_segments(segments: Iterable[Segment], output: str = CONSOLE_OUTPUT) -> None:
    """
    Write segments to the console or to a file.

    Args:
        segments: Segments in output order
        output: "console" for stdout, otherwise a file path

    Raises:
        OutputFileError: If the output file cannot be written
    """
    lines = format_segments(segments)

    if output == CONSOLE_OUTPUT:
        for line in lines:
            print(line)
        return

    try:
        with open(output, "w", encoding="utf-8") as fout:
            _write_lines(lines, fout)
    except OSError as e:
        raise OutputFileError(output) from e
    print(f"Results written to {output}")
