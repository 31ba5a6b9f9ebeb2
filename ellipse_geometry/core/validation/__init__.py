"""Input validation for ellipse geometry."""

from .parameters import validate_center, validate_ellipse_parameters

__all__ = [
    "validate_center",
    "validate_ellipse_parameters",
]
