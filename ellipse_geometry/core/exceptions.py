"""Exceptions raised by ellipse geometry construction."""


class EllipseGeometryError(Exception):
    """Base class for ellipse geometry errors."""


class InvalidArgumentError(EllipseGeometryError, ValueError):
    """
    A construction precondition was violated.

    Raised for a missing center or semi-axis, a non-positive semi-axis,
    a non-positive granularity, or a center that has no usable local frame.
    """
