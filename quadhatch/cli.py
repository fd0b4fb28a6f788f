"""
Command-line interface for the hatch generator.

Usage:
    python -m quadhatch --angle 45 --step 1
    python -m quadhatch --angle 30 --step 0.5 --input points.txt --output result.txt
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .base import HatchingParameters, HatchingStrategy
from .constants import CONSOLE_OUTPUT, DEFAULT_HATCH_ANGLE, DEFAULT_HATCH_SPACING, DEFAULT_INPUT_FILE
from .contour import ContourOrdering, DiagonalSource, build_contour
from .exceptions import HatchingError
from .fileio import read_points, write_segments
from .integration import generate_hatching_for_contour, get_hatching_statistics

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not number > 0 or number == float("inf"):
        raise argparse.ArgumentTypeError(f"step must be a positive number, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quadhatch",
        description="Generate hatch lines clipped to a four-point contour",
    )
    parser.add_argument(
        "--angle",
        type=float,
        default=DEFAULT_HATCH_ANGLE,
        help="Hatch angle in degrees (default: 45)",
    )
    parser.add_argument(
        "--step",
        type=_positive_float,
        default=DEFAULT_HATCH_SPACING,
        help="Distance between hatch lines (default: 1)",
    )
    parser.add_argument(
        "--input",
        default=DEFAULT_INPUT_FILE,
        help="File with one 'x y' pair per line (default: input.txt)",
    )
    parser.add_argument(
        "--output",
        default=CONSOLE_OUTPUT,
        help="Output file, or 'console' to print (default: console)",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in HatchingStrategy],
        default=HatchingStrategy.LINES.value,
        help="Hatching strategy (default: lines)",
    )
    parser.add_argument(
        "--ordering",
        choices=[o.value for o in ContourOrdering],
        default=ContourOrdering.SORTED.value,
        help="How corners are paired into edges (default: sorted)",
    )
    parser.add_argument(
        "--diagonal",
        choices=[d.value for d in DiagonalSource],
        default=DiagonalSource.INPUT_ORDER.value,
        help="Points used to size the line family (default: input)",
    )
    parser.add_argument(
        "--plot",
        help="Save a preview image of the contour and hatching to this path",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print statistics about the generated hatching to stderr",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    _configure_logging(args.log_level)

    parameters = HatchingParameters(
        hatch_angle=args.angle,
        hatch_spacing=args.step,
        contour_ordering=ContourOrdering(args.ordering),
        diagonal_source=DiagonalSource(args.diagonal),
    )

    try:
        points = read_points(args.input)
        segments = generate_hatching_for_contour(
            points, parameters, HatchingStrategy(args.strategy)
        )
        write_segments(segments, args.output)
    except HatchingError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.stats:
        stats = get_hatching_statistics(segments)
        for key, value in stats.items():
            print(f"{key}: {value}", file=sys.stderr)

    if args.plot:
        from .visualization import visualize_hatching

        edges = build_contour(points, parameters.contour_ordering)
        visualize_hatching(edges, segments, args.plot, title=f"Hatching at {args.angle:g} deg")
        logger.info("Preview saved to %s", args.plot)

    return 0
