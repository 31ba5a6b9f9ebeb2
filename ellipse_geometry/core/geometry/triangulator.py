"""ellipse_geometry.core.geometry.triangulator

Triangle indices over the ellipse row layout.

Three zones are stitched, all with the same winding:

1) growing fan: each positive row to the narrower row before it
   (4i triangles for row i)
2) central column: the widest positive row to its mirror
   (2(2n-1) triangles)
3) shrinking fan: each mirrored row to the narrower row after it
   (4i triangles for the pair with 2i+2 and 2i points)

In total 4n^2 - 2 triangles for n realized rows.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .rows import Row, RowLayout


def expected_triangle_count(num_rows: int) -> int:
    """Number of triangles produced for ``num_rows`` realized rows."""
    return 4 * num_rows * num_rows - 2


def _grow(narrow: Row, wide: Row, out: List[int]) -> None:
    """Stitch ``wide`` (2i+2 points) to the preceding ``narrow`` row (2i points)."""
    p = wide.start
    q = narrow.start

    out.extend((p, p + 1, q))
    p += 1

    for _ in range(narrow.length - 1):
        out.extend((q, p, q + 1))
        q += 1
        out.extend((p, p + 1, q))
        p += 1

    out.extend((p, p + 1, q))


def _strip(first: Row, second: Row, out: List[int]) -> None:
    """Stitch two rows of equal length with a strip of triangle pairs."""
    q = first.start
    p = second.start

    for _ in range(first.length - 1):
        out.extend((q, p, q + 1))
        q += 1
        out.extend((p, p + 1, q))
        p += 1


def _shrink(wide: Row, narrow: Row, out: List[int]) -> None:
    """Stitch ``wide`` (2i+2 points) to the following ``narrow`` row (2i points)."""
    q = wide.start
    p = narrow.start

    out.extend((q, p, q + 1))
    q += 1

    for _ in range(narrow.length - 1):
        out.extend((q, p, q + 1))
        q += 1
        out.extend((p, p + 1, q))
        p += 1

    out.extend((q, p, q + 1))


def triangulate(layout: RowLayout) -> np.ndarray:
    """
    Build the triangle index list for a row layout.

    Args:
        layout: Row descriptors of the full point stream

    Returns:
        Flat int64 array, three indices per triangle
    """
    indices: List[int] = []
    positive = layout.positive
    mirrored = layout.mirrored

    for narrow, wide in zip(positive[:-1], positive[1:]):
        _grow(narrow, wide, indices)

    _strip(positive[-1], mirrored[0], indices)

    for wide, narrow in zip(mirrored[:-1], mirrored[1:]):
        _shrink(wide, narrow, indices)

    return np.array(indices, dtype=np.int64)
