"""ellipse_geometry.core.geometry.expander

Completes the ellipse from its positive half.

Every row of the positive half is mirrored across the rotated north axis
through the center. Rows are appended widest first (the reverse of the
sampling order) with their in-row order kept, which is the ordering the
triangulator expects.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .frame import LocalFrame
from .rows import RowLayout, build_row_layout
from .sampler import QuadrantSamples
from .vectors import reflect


def expand_symmetric(
    samples: QuadrantSamples,
    frame: LocalFrame,
    center: np.ndarray,
) -> Tuple[np.ndarray, RowLayout]:
    """Append the mirrored negative half to the sampled positive half.

    Args:
        samples: Rows of the positive half
        frame: Local frame holding the rotated north axis
        center: Ellipse center

    Returns:
        Tuple (points, layout) with 2n(n+1) points and their row layout
    """
    layout = build_row_layout(samples.num_rows)
    half = samples.points

    mirrored_rows = [
        reflect(half[row.start:row.stop], center, frame.rotated_north)
        for row in reversed(layout.positive)
    ]
    points = np.concatenate([half] + mirrored_rows, axis=0)
    return points, layout
