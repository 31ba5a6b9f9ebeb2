"""
Core module for ellipse geometry.

This module contains the numpy-only tessellation pipeline with no rendering
dependencies. It can be used standalone or fed into any renderer that
accepts flat vertex and index buffers.
"""

from .exceptions import EllipseGeometryError, InvalidArgumentError

from .models import (
    Ellipsoid,
    WGS84,
    UNIT_SPHERE,
    VertexFormat,
    EllipseOptions,
    DEFAULT_GRANULARITY,
)

from .results import (
    BoundingSphere,
    ComponentDatatype,
    EllipseMesh,
    GeometryAttribute,
    GeometryIndices,
    PrimitiveType,
)

from .geometry import MAX_ANOMALY_LIMIT, build_row_layout, expected_triangle_count

from .solver import compute_ellipse_geometry, ellipse_geometry

__all__ = [
    # Errors
    "EllipseGeometryError",
    "InvalidArgumentError",

    # Models
    "Ellipsoid",
    "WGS84",
    "UNIT_SPHERE",
    "VertexFormat",
    "EllipseOptions",
    "DEFAULT_GRANULARITY",

    # Results
    "BoundingSphere",
    "ComponentDatatype",
    "EllipseMesh",
    "GeometryAttribute",
    "GeometryIndices",
    "PrimitiveType",

    # Geometry
    "MAX_ANOMALY_LIMIT",
    "build_row_layout",
    "expected_triangle_count",

    # Pipeline
    "compute_ellipse_geometry",
    "ellipse_geometry",
]
