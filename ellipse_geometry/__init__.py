"""
Ellipse Geometry

Triangulated meshes of ellipses lying on the surface of a reference
ellipsoid, for rendering pipelines that consume flat vertex/index buffers.

Conventions:
- Coordinates: Earth-centered, Earth-fixed Cartesian, metres
- Angles: Radians internally (bearing, granularity, latitude/longitude)
- Semi-axes: Metres, normalized so that semi_major_axis >= semi_minor_axis
- Output positions: Flat buffer, 3 components per vertex
- Output indices: Flat buffer, 3 indices per triangle
"""

import logging

__version__ = "1.0.0"
__author__ = "Ellipse Geometry"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core import (
    EllipseGeometryError,
    InvalidArgumentError,
    Ellipsoid,
    WGS84,
    VertexFormat,
    EllipseOptions,
    EllipseMesh,
    PrimitiveType,
    compute_ellipse_geometry,
    ellipse_geometry,
)
from .logging_config import setup_logging

__all__ = [
    # Version
    "__version__",

    # Errors
    "EllipseGeometryError",
    "InvalidArgumentError",

    # Models
    "Ellipsoid",
    "WGS84",
    "VertexFormat",
    "EllipseOptions",

    # Results
    "EllipseMesh",
    "PrimitiveType",

    # Pipeline
    "compute_ellipse_geometry",
    "ellipse_geometry",

    # Logging
    "setup_logging",
]
