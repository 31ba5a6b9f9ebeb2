"""ellipse_geometry.core.geometry.frame

Local east/north tangent frame at the ellipse center.

The unrotated east/north vectors parameterize the sampling angles; the
bearing-rotated pair defines the two mirror axes of the ellipse.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..exceptions import InvalidArgumentError
from .vectors import UNIT_Z, normalize, rotation_about_axis


@dataclass(frozen=True)
class LocalFrame:
    """Tangent frame at the ellipse center."""

    unit_position: np.ndarray
    east: np.ndarray
    north: np.ndarray
    rotated_east: np.ndarray
    rotated_north: np.ndarray
    magnitude: float              # |center|, used as the local sphere radius


def build_local_frame(center: np.ndarray, bearing: float = 0.0) -> LocalFrame:
    """Build the east/north frame at ``center`` and rotate it by ``bearing``.

    east  = normalize(Z x center)
    north = unit_position x east

    The rotated pair is east/north turned about ``unit_position`` by
    ``bearing`` radians.

    Raises:
        InvalidArgumentError: If the center lies on the polar axis, where
            east is undefined.
    """
    center = np.asarray(center, dtype=float)
    magnitude = float(np.linalg.norm(center))

    east = np.cross(UNIT_Z, center)
    if magnitude == 0.0 or np.linalg.norm(east) <= 1e-12 * magnitude:
        raise InvalidArgumentError("center must not lie on the ellipsoid's polar axis.")

    unit_position = center / magnitude
    east = normalize(east)
    north = np.cross(unit_position, east)

    rotation = rotation_about_axis(unit_position, bearing)
    rotated_north = normalize(rotation @ north)
    rotated_east = normalize(rotation @ east)

    return LocalFrame(
        unit_position=unit_position,
        east=east,
        north=north,
        rotated_east=rotated_east,
        rotated_north=rotated_north,
        magnitude=magnitude,
    )
