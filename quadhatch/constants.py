"""
Default values and numeric tolerances for hatch generation.
"""

# Command-line defaults
DEFAULT_HATCH_ANGLE = 45.0  # degrees
DEFAULT_HATCH_SPACING = 1.0  # same units as the input points
DEFAULT_INPUT_FILE = "input.txt"
CONSOLE_OUTPUT = "console"  # --output value meaning "print to stdout"

# Contour constants
CONTOUR_POINT_COUNT = 4  # only quadrilaterals are supported

# Numeric tolerances (absolute, not scale-aware)
POINT_TOLERANCE = 1e-10  # two points closer than this on both axes are the same point
DETERMINANT_TOLERANCE = 1e-10  # below this a line and an edge are treated as parallel

# Line family constants
LINE_MARGIN = 3  # extra lines generated on each side of the contour

# Output formatting
SIGNIFICANT_DIGITS = 6  # matches the default precision of a C++ ostream
