"""
Construction options for ellipse geometry.

This module defines the input of an ellipse tessellation: center, semi-axes,
reference ellipsoid, height, bearing, granularity and the requested vertex
attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import numpy as np

from ..exceptions import InvalidArgumentError
from ..validation.parameters import validate_ellipse_parameters
from .ellipsoid import Ellipsoid, WGS84
from .vertex_format import VertexFormat


DEFAULT_GRANULARITY = 0.02  # radians


def _identity() -> np.ndarray:
    return np.identity(4)


@dataclass
class EllipseOptions:
    """
    Options for computing an ellipse on the ellipsoid.

    Attributes:
        center: The ellipse's center point in the fixed frame (metres)
        semi_major_axis: Length of the semi-major axis (metres)
        semi_minor_axis: Length of the semi-minor axis (metres)
        ellipsoid: The ellipsoid the ellipse lies on (default: WGS84)
        height: Height above the ellipsoid (metres, default: 0.0)
        bearing: Rotation of the ellipse in radians (default: 0.0)
        granularity: Angular distance between boundary points in radians
                     (default: 0.02)
        vertex_format: Vertex attributes to compute (default: position only)
        model_matrix: 4x4 model-to-world transform (default: identity)
        pick_data: Opaque value passed through to the mesh

    The semi-axes are swapped on construction when the major axis is
    shorter than the minor one.
    """

    center: Optional[Any] = None
    semi_major_axis: Optional[float] = None
    semi_minor_axis: Optional[float] = None
    ellipsoid: Ellipsoid = WGS84
    height: float = 0.0
    bearing: float = 0.0
    granularity: float = DEFAULT_GRANULARITY
    vertex_format: VertexFormat = VertexFormat.DEFAULT
    model_matrix: np.ndarray = field(default_factory=_identity)
    pick_data: Any = None

    def __post_init__(self):
        """Validate and normalize options after initialization."""
        if self.granularity is None:
            self.granularity = DEFAULT_GRANULARITY
        self.center, self.semi_major_axis, self.semi_minor_axis = validate_ellipse_parameters(
            self.center, self.semi_major_axis, self.semi_minor_axis, self.granularity
        )
        self.granularity = float(self.granularity)

        # None falls back to the defaults, as an omitted argument would
        if self.ellipsoid is None:
            self.ellipsoid = WGS84
        if self.vertex_format is None:
            self.vertex_format = VertexFormat.DEFAULT
        self.height = 0.0 if self.height is None else float(self.height)
        self.bearing = 0.0 if self.bearing is None else float(self.bearing)

        if self.model_matrix is None:
            self.model_matrix = _identity()
        self.model_matrix = np.asarray(self.model_matrix, dtype=float)
        if self.model_matrix.shape != (4, 4):
            raise InvalidArgumentError(
                f"model_matrix must be 4x4, got shape {self.model_matrix.shape}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        ``pick_data`` is opaque and is not serialized.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "center": [float(c) for c in self.center],
            "semi_major_axis": self.semi_major_axis,
            "semi_minor_axis": self.semi_minor_axis,
            "ellipsoid": self.ellipsoid.to_dict(),
            "height": self.height,
            "bearing": self.bearing,
            "granularity": self.granularity,
            "vertex_format": self.vertex_format.to_dict(),
            "model_matrix": self.model_matrix.tolist(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EllipseOptions':
        """
        Create EllipseOptions from a dictionary.

        Accepts both snake_case keys and the camelCase names
        (``semiMajorAxis``, ``semiMinorAxis``, ``vertexFormat``,
        ``modelMatrix``, ``pickData``).

        Args:
            data: Dictionary with option values

        Returns:
            New EllipseOptions instance

        Raises:
            InvalidArgumentError: If required values are missing or invalid
        """
        ellipsoid = data.get("ellipsoid")
        if isinstance(ellipsoid, dict):
            ellipsoid = Ellipsoid.from_dict(ellipsoid)

        vertex_format = data.get("vertex_format", data.get("vertexFormat"))
        if isinstance(vertex_format, dict):
            vertex_format = VertexFormat.from_dict(vertex_format)

        return cls(
            center=data.get("center"),
            semi_major_axis=data.get("semi_major_axis", data.get("semiMajorAxis")),
            semi_minor_axis=data.get("semi_minor_axis", data.get("semiMinorAxis")),
            ellipsoid=ellipsoid,
            height=data.get("height", 0.0),
            bearing=data.get("bearing", 0.0),
            granularity=data.get("granularity", DEFAULT_GRANULARITY),
            vertex_format=vertex_format,
            model_matrix=data.get("model_matrix", data.get("modelMatrix")),
            pick_data=data.get("pick_data", data.get("pickData")),
        )

    def __repr__(self) -> str:
        return (
            f"EllipseOptions("
            f"a={self.semi_major_axis}, "
            f"b={self.semi_minor_axis}, "
            f"bearing={self.bearing}, "
            f"granularity={self.granularity})"
        )
