"""ellipse_geometry.core.solver.ellipse

Tessellation of an ellipse on the surface of a reference ellipsoid.

Pipeline (single pass, no state kept between calls):
  1) validate options (done by EllipseOptions)
  2) local east/north frame at the center, rotated by the bearing
  3) sample the positive half row by row
  4) mirror it across the rotated north axis
  5) project every point onto the surface, offset by height
  6) triangulate the row layout
  7) assemble attributes, indices, bounding sphere and model matrix

Either a complete mesh is returned or InvalidArgumentError is raised
before any geometry is computed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import numpy as np

from ..geometry.attributes import compute_surface_attributes
from ..geometry.expander import expand_symmetric
from ..geometry.frame import build_local_frame
from ..geometry.projector import project_to_surface
from ..geometry.sampler import sample_quadrant
from ..geometry.triangulator import triangulate
from ..models.options import EllipseOptions
from ..results.mesh import (
    BoundingSphere,
    ComponentDatatype,
    EllipseMesh,
    GeometryAttribute,
    GeometryIndices,
    PrimitiveType,
)

logger = logging.getLogger(__name__)


def compute_ellipse_geometry(options: EllipseOptions) -> EllipseMesh:
    """Compute vertices and indices for an ellipse on the ellipsoid.

    Args:
        options: Validated ellipse options

    Returns:
        EllipseMesh with a position attribute (if requested), one triangle
        index list, a bounding sphere and the model matrix

    Raises:
        InvalidArgumentError: If the center has no local frame or a point
            cannot be projected onto the ellipsoid
    """
    center = options.center
    a = options.semi_major_axis
    b = options.semi_minor_axis

    frame = build_local_frame(center, options.bearing)

    samples = sample_quadrant(center, frame, a, b, options.bearing, options.granularity)
    points, layout = expand_symmetric(samples, frame, center)

    positions = project_to_surface(points, options.ellipsoid, options.height)
    indices = triangulate(layout)

    logger.debug(
        "Ellipse a=%.3f b=%.3f: %d rows, %d vertices, %d triangles",
        a, b, layout.num_rows, len(positions), len(indices) // 3,
    )

    return assemble_mesh(options, positions, indices, layout.num_rows)


def assemble_mesh(
    options: EllipseOptions,
    positions: np.ndarray,
    indices: np.ndarray,
    num_rows: int,
) -> EllipseMesh:
    """Package projected positions and indices into an EllipseMesh.

    Indices are emitted even when positions were not requested.
    """
    vertex_format = options.vertex_format
    attributes: Dict[str, GeometryAttribute] = {}

    if vertex_format.position:
        attributes["position"] = GeometryAttribute(
            component_datatype=ComponentDatatype.DOUBLE,
            components_per_attribute=3,
            values=positions.reshape(-1),
        )

    for name, values in compute_surface_attributes(positions, options.ellipsoid, vertex_format).items():
        attributes[name] = GeometryAttribute(
            component_datatype=ComponentDatatype.DOUBLE,
            components_per_attribute=3,
            values=values.reshape(-1),
        )

    return EllipseMesh(
        attributes=attributes,
        index_lists=[GeometryIndices(primitive_type=PrimitiveType.TRIANGLES, values=indices)],
        bounding_sphere=BoundingSphere(center=np.array(options.center), radius=options.semi_major_axis),
        model_matrix=np.array(options.model_matrix),
        pick_data=options.pick_data,
        num_rows=num_rows,
    )


def ellipse_geometry(
    center: Any = None,
    semi_major_axis: Optional[float] = None,
    semi_minor_axis: Optional[float] = None,
    **kwargs: Any,
) -> EllipseMesh:
    """Build EllipseOptions from keyword arguments and tessellate.

    Example:
        >>> from ellipse_geometry import WGS84, ellipse_geometry
        >>> mesh = ellipse_geometry(
        ...     center=WGS84.cartesian_from_degrees(-75.59777, 40.03883),
        ...     semi_major_axis=500000.0,
        ...     semi_minor_axis=300000.0,
        ... )
        >>> mesh.bounding_sphere.radius
        500000.0
    """
    options = EllipseOptions(
        center=center,
        semi_major_axis=semi_major_axis,
        semi_minor_axis=semi_minor_axis,
        **kwargs,
    )
    return compute_ellipse_geometry(options)
