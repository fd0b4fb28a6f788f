"""
Matplotlib preview of a contour and its hatch segments.
"""

from typing import Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from .geometry import Segment


def visualize_hatching(
    edges: Sequence[Segment],
    hatch_segments: Sequence[Segment],
    output_path: str,
    title: str = "Hatching Pattern"
) -> None:
    """
    Save a picture of the contour edges and hatch segments.

    Args:
        edges: Contour edges
        hatch_segments: Hatch segments to draw
        output_path: Image file to write (format taken from the extension)
        title: Plot title
    """
    fig, ax = plt.subplots(figsize=(10, 10))

    if hatch_segments:
        infill = [[seg.start.as_tuple(), seg.end.as_tuple()] for seg in hatch_segments]
        ax.add_collection(LineCollection(infill, colors='blue', linewidths=0.5, label='Hatch'))

    if edges:
        contour = [[seg.start.as_tuple(), seg.end.as_tuple()] for seg in edges]
        ax.add_collection(LineCollection(contour, colors='red', linewidths=1.5, label='Contour'))

    ax.autoscale()
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    ax.legend()

    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)
