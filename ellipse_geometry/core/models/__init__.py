"""
Data models for ellipse geometry.

This module provides the input-side structures:
- Ellipsoid: Reference surface with geodetic projection helpers
- VertexFormat: Requested vertex attributes
- EllipseOptions: Validated construction options
"""

from .ellipsoid import Ellipsoid, WGS84, UNIT_SPHERE
from .vertex_format import VertexFormat
from .options import EllipseOptions, DEFAULT_GRANULARITY

__all__ = [
    "Ellipsoid",
    "WGS84",
    "UNIT_SPHERE",
    "VertexFormat",
    "EllipseOptions",
    "DEFAULT_GRANULARITY",
]
