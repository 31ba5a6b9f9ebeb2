"""Vertex attribute selection for generated geometry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class VertexFormat:
    """
    Set of vertex attributes a geometry should compute.

    Attributes:
        position: Emit the 3-component position buffer
        normal: Emit geodetic surface normals
        tangent: Emit tangents (east direction of the surface frame)
        binormal: Emit binormals (north direction of the surface frame)
    """

    position: bool = False
    normal: bool = False
    tangent: bool = False
    binormal: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position,
            "normal": self.normal,
            "tangent": self.tangent,
            "binormal": self.binormal,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VertexFormat':
        return cls(
            position=bool(data.get("position", False)),
            normal=bool(data.get("normal", False)),
            tangent=bool(data.get("tangent", False)),
            binormal=bool(data.get("binormal", False)),
        )


VertexFormat.POSITION_ONLY = VertexFormat(position=True)
VertexFormat.POSITION_AND_NORMAL = VertexFormat(position=True, normal=True)
VertexFormat.ALL = VertexFormat(position=True, normal=True, tangent=True, binormal=True)
VertexFormat.DEFAULT = VertexFormat.POSITION_ONLY
