"""Projection of sample points onto the ellipsoid surface."""

from __future__ import annotations

import numpy as np

from ..exceptions import InvalidArgumentError
from ..models.ellipsoid import Ellipsoid


def project_to_surface(points: np.ndarray, ellipsoid: Ellipsoid, height: float = 0.0) -> np.ndarray:
    """
    Snap points to the geodetic surface and lift them by ``height``.

    Each point is scaled onto the surface along the geodetic normal, then
    moved ``height`` metres along the surface normal at the new location.
    Point count and order are preserved.

    Args:
        points: (N, 3) array of points
        ellipsoid: Reference surface
        height: Offset along the normal (metres, may be negative)

    Returns:
        New (N, 3) array of projected points

    Raises:
        InvalidArgumentError: If a point sits at the ellipsoid center
    """
    surface = ellipsoid.scale_to_geodetic_surface(np.asarray(points, dtype=float).reshape(-1, 3))
    if not np.all(np.isfinite(surface)):
        raise InvalidArgumentError("Cannot project a point at the ellipsoid center onto its surface.")

    if height == 0.0:
        return surface
    return surface + height * ellipsoid.geodetic_surface_normal(surface)
