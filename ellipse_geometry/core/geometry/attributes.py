"""Per-vertex surface attributes computed from finished positions.

These run after surface projection and never alter the positions:
- normal: geodetic surface normal
- tangent: normalize(Z x normal), the local east direction
- binormal: normal x tangent, the local north direction
"""

from __future__ import annotations

from typing import Dict

import numpy as np

from ..models.ellipsoid import Ellipsoid
from ..models.vertex_format import VertexFormat
from .vectors import UNIT_Z


def compute_normals(positions: np.ndarray, ellipsoid: Ellipsoid) -> np.ndarray:
    return ellipsoid.geodetic_surface_normal(positions)


def compute_tangents(normals: np.ndarray) -> np.ndarray:
    # Undefined at the poles, where the normal is parallel to Z
    tangents = np.cross(UNIT_Z, normals)
    return tangents / np.linalg.norm(tangents, axis=1, keepdims=True)


def compute_binormals(normals: np.ndarray, tangents: np.ndarray) -> np.ndarray:
    return np.cross(normals, tangents)


def compute_surface_attributes(
    positions: np.ndarray,
    ellipsoid: Ellipsoid,
    vertex_format: VertexFormat,
) -> Dict[str, np.ndarray]:
    """
    Compute the surface attributes requested by ``vertex_format``.

    Args:
        positions: (N, 3) array of projected positions
        ellipsoid: Reference surface
        vertex_format: Requested attributes; ``position`` is ignored here

    Returns:
        Dict mapping attribute name to an (N, 3) array
    """
    if not (vertex_format.normal or vertex_format.tangent or vertex_format.binormal):
        return {}

    result: Dict[str, np.ndarray] = {}
    normals = compute_normals(positions, ellipsoid)
    if vertex_format.normal:
        result["normal"] = normals

    if vertex_format.tangent or vertex_format.binormal:
        tangents = compute_tangents(normals)
        if vertex_format.tangent:
            result["tangent"] = tangents
        if vertex_format.binormal:
            result["binormal"] = compute_binormals(normals, tangents)

    return result
