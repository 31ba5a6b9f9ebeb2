"""ellipse_geometry.core.geometry.vectors

Small vector / rotation helpers on numpy arrays.

Quaternions are stored as (x, y, z, w). Rotations are right-handed:
a positive angle turns counter-clockwise when looking down the axis
towards the origin.
"""

from __future__ import annotations

import math

import numpy as np


UNIT_Z = np.array([0.0, 0.0, 1.0])


def normalize(vector: np.ndarray) -> np.ndarray:
    """Return ``vector`` scaled to unit length."""
    vector = np.asarray(vector, dtype=float)
    return vector / np.linalg.norm(vector)


def quaternion_from_axis_angle(axis: np.ndarray, angle: float) -> np.ndarray:
    """Quaternion rotating by ``angle`` radians about the unit vector ``axis``."""
    half = 0.5 * angle
    s = math.sin(half)
    return np.array([axis[0] * s, axis[1] * s, axis[2] * s, math.cos(half)], dtype=float)


def matrix_from_quaternion(quaternion: np.ndarray) -> np.ndarray:
    """3x3 rotation matrix of a unit quaternion (x, y, z, w)."""
    x, y, z, w = quaternion

    x2 = x * x
    y2 = y * y
    z2 = z * z
    w2 = w * w

    xy = x * y
    xz = x * z
    xw = x * w
    yz = y * z
    yw = y * w
    zw = z * w

    return np.array([
        [x2 - y2 - z2 + w2, 2.0 * (xy - zw), 2.0 * (xz + yw)],
        [2.0 * (xy + zw), -x2 + y2 - z2 + w2, 2.0 * (yz - xw)],
        [2.0 * (xz - yw), 2.0 * (yz + xw), -x2 - y2 + z2 + w2],
    ])


def rotation_about_axis(axis: np.ndarray, angle: float) -> np.ndarray:
    """3x3 matrix rotating by ``angle`` about ``axis`` (via its quaternion)."""
    return matrix_from_quaternion(quaternion_from_axis_angle(axis, angle))


def reflect(point: np.ndarray, center: np.ndarray, axis: np.ndarray) -> np.ndarray:
    """
    Mirror ``point`` across the line through ``center`` along ``axis``.

    The component of ``point - center`` along the unit vector ``axis`` is
    kept, the perpendicular remainder is negated.

    Works on a single point or on an (N, 3) array of points.
    """
    offset = np.asarray(point, dtype=float) - center
    along = np.multiply.outer(offset @ axis, axis)
    perpendicular = offset - along
    return center + along - perpendicular


def lerp(start: np.ndarray, end: np.ndarray, t) -> np.ndarray:
    """
    Linear interpolation between two points.

    ``t`` may be a scalar or a 1-D array, in which case an (len(t), 3)
    array is returned.
    """
    t = np.asarray(t, dtype=float)
    if t.ndim == 0:
        return start + t * (end - start)
    return start + t[:, np.newaxis] * (end - start)
