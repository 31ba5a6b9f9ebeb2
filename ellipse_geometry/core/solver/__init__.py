"""Ellipse tessellation pipeline."""

from .ellipse import compute_ellipse_geometry, assemble_mesh, ellipse_geometry

__all__ = ["compute_ellipse_geometry", "assemble_mesh", "ellipse_geometry"]
