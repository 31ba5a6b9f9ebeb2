"""ellipse_geometry.core.geometry.rows

Row descriptors for the ellipse point stream.

The sample points are stored as one flat sequence. It is organized in rows:

  positive half:  row i (i = 0..n-1) holds 2i+2 points and starts at i(i+1)
  negative half:  the mirror of each positive row, widest first, so the
                  row lengths run 2n, 2n-2, ..., 2 and the half starts at n(n+1)

For n = 3 the row lengths are 2, 4, 6 | 6, 4, 2 and the stream holds 24 points.

Both the expander and the triangulator walk this layout instead of
re-deriving the offsets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Row:
    """A contiguous run of points in the flat point stream."""

    start: int
    length: int

    @property
    def stop(self) -> int:
        return self.start + self.length

    @property
    def last(self) -> int:
        return self.start + self.length - 1


def positive_row_length(i: int) -> int:
    """Number of points in row ``i`` of the positive half."""
    return 2 * i + 2


@dataclass(frozen=True)
class RowLayout:
    """Row descriptors of both halves of the ellipse.

    Attributes:
        positive: Rows of the positive half, narrowest first
        mirrored: Rows of the negative half, widest first; ``mirrored[k]``
                  is the reflection of ``positive[-1 - k]``
    """

    positive: Tuple[Row, ...]
    mirrored: Tuple[Row, ...]

    @property
    def num_rows(self) -> int:
        return len(self.positive)

    @property
    def half_point_count(self) -> int:
        return self.positive[-1].stop if self.positive else 0

    @property
    def point_count(self) -> int:
        return 2 * self.half_point_count


def build_row_layout(num_rows: int) -> RowLayout:
    """Compute row descriptors for ``num_rows`` realized quadrant steps.

    Args:
        num_rows: Realized number of sampling steps (n >= 1)

    Returns:
        RowLayout covering 2n(n+1) points
    """
    if num_rows < 1:
        raise ValueError(f"num_rows must be at least 1, got {num_rows}")

    positive = []
    start = 0
    for i in range(num_rows):
        length = positive_row_length(i)
        positive.append(Row(start, length))
        start += length

    mirrored = []
    for row in reversed(positive):
        mirrored.append(Row(start, row.length))
        start += row.length

    return RowLayout(positive=tuple(positive), mirrored=tuple(mirrored))
