"""Geometry stages of the ellipse tessellation."""

from .vectors import reflect, lerp, normalize, quaternion_from_axis_angle, matrix_from_quaternion
from .frame import LocalFrame, build_local_frame
from .rows import Row, RowLayout, build_row_layout
from .sampler import (
    MAX_ANOMALY_LIMIT,
    QuadrantSamples,
    ellipse_radius,
    quadrant_point_count,
    sample_quadrant,
)
from .expander import expand_symmetric
from .projector import project_to_surface
from .triangulator import triangulate, expected_triangle_count
from .attributes import compute_surface_attributes

__all__ = [
    # Vector helpers
    "reflect",
    "lerp",
    "normalize",
    "quaternion_from_axis_angle",
    "matrix_from_quaternion",

    # Stages
    "LocalFrame",
    "build_local_frame",
    "Row",
    "RowLayout",
    "build_row_layout",
    "MAX_ANOMALY_LIMIT",
    "QuadrantSamples",
    "ellipse_radius",
    "quadrant_point_count",
    "sample_quadrant",
    "expand_symmetric",
    "project_to_surface",
    "triangulate",
    "expected_triangle_count",
    "compute_surface_attributes",
]
