"""ellipse_geometry.core.geometry.sampler

Quadrant sampling of the ellipse.

One half of the ellipse is generated as a sequence of rows. Each step walks
the anomaly theta from pi/2 towards zero, places a boundary point at the
ellipse radius for that angle, reflects it across the rotated east axis and
fills the row between the two with evenly spaced interior points.

Conventions:
- Angles in radians
- radius(pi/2) = semi-major axis, radius(0) = semi-minor axis
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from .frame import LocalFrame
from .rows import positive_row_length
from .vectors import lerp, normalize, reflect, rotation_about_axis

logger = logging.getLogger(__name__)


# Upper bound of the anomaly sweep. Slightly larger than pi/2; combined with
# the theta > 0 guard it decides how many rows are realized.
MAX_ANOMALY_LIMIT = 2.31


@dataclass(frozen=True)
class QuadrantSamples:
    """Points of the positive half, row by row.

    Attributes:
        points: (n(n+1), 3) array of points in row order
        num_rows: Realized number of rows (n)
        boundary: (n, 3) array with the boundary point of each row
    """

    points: np.ndarray
    num_rows: int
    boundary: np.ndarray


def quadrant_point_count(granularity: float) -> int:
    """Planned number of sampling steps for one quadrant."""
    return 1 + int(math.ceil(math.pi / 2.0 / granularity))


def ellipse_radius(theta: float, semi_major_axis: float, semi_minor_axis: float) -> float:
    """Distance from the center to the ellipse boundary at anomaly ``theta``.

    r = ab / sqrt(a^2 cos^2(theta) + b^2 sin^2(theta))

    so that theta = pi/2 lies on the semi-major axis.
    """
    a = semi_major_axis
    b = semi_minor_axis
    cos_theta = math.cos(theta)
    sin_theta = math.sin(theta)
    return (a * b) / math.sqrt(a * a * cos_theta * cos_theta + b * b * sin_theta * sin_theta)


def boundary_point(frame: LocalFrame, theta: float, bearing: float, radius: float) -> np.ndarray:
    """Rotate the center direction by ``radius / |center|`` towards ``theta``.

    The rotation axis is cos(theta + bearing) * east + sin(theta + bearing) * north
    in the unrotated frame.
    """
    azimuth = theta + bearing
    axis = frame.east * math.cos(azimuth) + frame.north * math.sin(azimuth)
    angle = radius / frame.magnitude

    position = rotation_about_axis(axis, angle) @ frame.unit_position
    return normalize(position) * frame.magnitude


def sample_row(boundary: np.ndarray, center: np.ndarray, frame: LocalFrame, i: int) -> np.ndarray:
    """Row ``i``: the boundary point, interior fill and its mirror image.

    The mirror is taken across the rotated east axis; interior points
    divide the segment between the two evenly.
    """
    length = positive_row_length(i)
    mirrored = reflect(boundary, center, frame.rotated_east)
    t = np.arange(length) / (length - 1)
    row = lerp(boundary, mirrored, t)
    # Endpoints exactly as computed, not re-derived through the lerp
    row[0] = boundary
    row[-1] = mirrored
    return row


def sample_quadrant(
    center: np.ndarray,
    frame: LocalFrame,
    semi_major_axis: float,
    semi_minor_axis: float,
    bearing: float,
    granularity: float,
) -> QuadrantSamples:
    """Generate the rows of the positive half of the ellipse.

    Steps i = 0, 1, ... while i < numPts and theta > 0, with theta starting
    at pi/2 and decreasing by MAX_ANOMALY_LIMIT / (numPts - 1). The loop
    usually ends on the theta guard before numPts steps; the realized count
    is returned as ``num_rows``.

    Args:
        center: Ellipse center
        frame: Local frame at the center
        semi_major_axis: Semi-major axis (metres), >= semi_minor_axis
        semi_minor_axis: Semi-minor axis (metres)
        bearing: Ellipse rotation (radians)
        granularity: Angular step (radians), > 0

    Returns:
        QuadrantSamples with n(n+1) points
    """
    num_pts = quadrant_point_count(granularity)
    # An infinite granularity plans a single step; the sweep stops after one row
    delta_theta = MAX_ANOMALY_LIMIT / (num_pts - 1) if num_pts > 1 else math.inf

    rows = []
    boundaries = []
    i = 0
    theta = math.pi / 2.0
    while i < num_pts and theta > 0.0:
        radius = ellipse_radius(theta, semi_major_axis, semi_minor_axis)
        position = boundary_point(frame, theta, bearing, radius)
        boundaries.append(position)
        rows.append(sample_row(position, center, frame, i))

        i += 1
        theta -= delta_theta

    logger.debug("Quadrant sampling: planned %d steps, realized %d rows", num_pts, i)

    return QuadrantSamples(
        points=np.concatenate(rows, axis=0),
        num_rows=i,
        boundary=np.array(boundaries),
    )
