"""ellipse_geometry.core.validation.parameters

Eager precondition checks for ellipse construction.

All checks run before any geometry is computed, so a failure never leaves
partial output behind.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

import numpy as np

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def validate_center(center: Any) -> np.ndarray:
    """Check that ``center`` is present and a finite 3-vector."""
    if center is None:
        raise InvalidArgumentError("center is required.")
    try:
        vector = np.asarray(center, dtype=float).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"center must be a 3D point, got {center!r}") from exc
    if vector.shape != (3,) or not np.all(np.isfinite(vector)):
        raise InvalidArgumentError(f"center must be a finite 3D point, got {center!r}")
    return vector


def validate_ellipse_parameters(
    center: Any,
    semi_major_axis: Optional[float],
    semi_minor_axis: Optional[float],
    granularity: float,
) -> Tuple[np.ndarray, float, float]:
    """
    Validate ellipse parameters and order the semi-axes.

    Args:
        center: Ellipse center in the fixed frame
        semi_major_axis: Semi-major axis length (metres)
        semi_minor_axis: Semi-minor axis length (metres)
        granularity: Angular distance between boundary samples (radians)

    Returns:
        Tuple (center, major, minor) with ``major >= minor``. Axes given in
        the wrong order are swapped silently.

    Raises:
        InvalidArgumentError: If a required value is missing, an axis is not
            positive, or the granularity is not positive.
    """
    center = validate_center(center)

    if semi_major_axis is None:
        raise InvalidArgumentError("semiMajorAxis is required.")
    if semi_minor_axis is None:
        raise InvalidArgumentError("semiMinorAxis is required.")

    semi_major_axis = float(semi_major_axis)
    semi_minor_axis = float(semi_minor_axis)

    # "not > 0" also rejects NaN
    if not (semi_major_axis > 0.0 and semi_minor_axis > 0.0):
        raise InvalidArgumentError("Semi-major and semi-minor axes must be greater than zero.")

    if granularity is None or not float(granularity) > 0.0:
        raise InvalidArgumentError("granularity must be greater than zero.")

    if semi_major_axis < semi_minor_axis:
        logger.debug(
            "Swapping semi-axes: major %.3f < minor %.3f", semi_major_axis, semi_minor_axis
        )
        semi_major_axis, semi_minor_axis = semi_minor_axis, semi_major_axis

    return center, semi_major_axis, semi_minor_axis
