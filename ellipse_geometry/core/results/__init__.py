"""Result structures for ellipse geometry."""

from .mesh import (
    BoundingSphere,
    ComponentDatatype,
    EllipseMesh,
    GeometryAttribute,
    GeometryIndices,
    PrimitiveType,
)

__all__ = [
    "BoundingSphere",
    "ComponentDatatype",
    "EllipseMesh",
    "GeometryAttribute",
    "GeometryIndices",
    "PrimitiveType",
]
