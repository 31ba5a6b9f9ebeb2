"""
Mesh result classes for ellipse geometry.

This module defines the output of a tessellation: vertex attribute buffers,
index lists, bounding sphere and model matrix, plus JSON serialization.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np


class PrimitiveType(Enum):
    """Primitive an index list describes."""
    POINTS = "points"
    LINES = "lines"
    TRIANGLES = "triangles"


class ComponentDatatype(Enum):
    """Storage type of a vertex attribute's components."""
    FLOAT = "float32"
    DOUBLE = "float64"


@dataclass
class GeometryAttribute:
    """
    A flat vertex attribute buffer.

    Attributes:
        component_datatype: Storage type of each component
        components_per_attribute: Components per vertex (e.g. 3 for xyz)
        values: Flat array of length vertex_count * components_per_attribute
    """

    component_datatype: ComponentDatatype
    components_per_attribute: int
    values: np.ndarray

    @property
    def vertex_count(self) -> int:
        return len(self.values) // self.components_per_attribute

    def to_dict(self) -> Dict[str, Any]:
        return {
            "component_datatype": self.component_datatype.value,
            "components_per_attribute": self.components_per_attribute,
            "values": [float(v) for v in self.values],
        }


@dataclass
class GeometryIndices:
    """An index buffer and the primitive it describes."""

    primitive_type: PrimitiveType
    values: np.ndarray

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primitive_type": self.primitive_type.value,
            "values": [int(v) for v in self.values],
        }


@dataclass
class BoundingSphere:
    """Sphere enclosing the geometry."""

    center: np.ndarray
    radius: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "center": [float(c) for c in self.center],
            "radius": float(self.radius),
        }


@dataclass
class EllipseMesh:
    """
    Triangulated ellipse ready for rendering.

    Attributes:
        attributes: Vertex attributes keyed by name ("position", "normal", ...).
                    "position" is present only when requested.
        index_lists: A single triangle index list over the vertices
        bounding_sphere: Sphere at the ellipse center with the semi-major
                         axis as radius
        model_matrix: 4x4 model-to-world transform
        pick_data: Opaque value passed through from the options
        num_rows: Realized number of quadrant rows the mesh was built from
    """

    attributes: Dict[str, GeometryAttribute]
    index_lists: List[GeometryIndices]
    bounding_sphere: BoundingSphere
    model_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    pick_data: Any = None
    num_rows: int = 0

    @property
    def positions(self) -> np.ndarray:
        """Flat position buffer, empty when positions were not requested."""
        attribute = self.attributes.get("position")
        if attribute is None:
            return np.empty(0, dtype=float)
        return attribute.values

    @property
    def indices(self) -> np.ndarray:
        """Flat triangle index buffer."""
        return self.index_lists[0].values

    @property
    def vertex_count(self) -> int:
        """Vertices in the attribute buffers (0 when no attribute was requested)."""
        for attribute in self.attributes.values():
            return attribute.vertex_count
        return 0

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def position_array(self) -> np.ndarray:
        """Positions as an (N, 3) array."""
        return self.positions.reshape(-1, 3)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the mesh to a dictionary.

        ``pick_data`` is opaque and is not serialized.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "attributes": {
                name: attribute.to_dict() for name, attribute in self.attributes.items()
            },
            "index_lists": [index_list.to_dict() for index_list in self.index_lists],
            "bounding_sphere": self.bounding_sphere.to_dict(),
            "model_matrix": np.asarray(self.model_matrix, dtype=float).tolist(),
            "num_rows": self.num_rows,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """
        Serialize the mesh to a JSON string.

        Args:
            indent: Number of spaces for indentation (None for compact output)

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent)

    def save_json(self, path: Union[str, Path], indent: Optional[int] = None) -> Path:
        """Write the mesh as JSON to ``path`` and return the path."""
        path = Path(path)
        path.write_text(self.to_json(indent=indent), encoding="utf-8")
        return path

    def __repr__(self) -> str:
        return (
            f"EllipseMesh(vertices={self.vertex_count}, "
            f"triangles={self.triangle_count}, "
            f"attributes={sorted(self.attributes)})"
        )
