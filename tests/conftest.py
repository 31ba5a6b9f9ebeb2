"""Shared fixtures for ellipse geometry tests."""

import pytest

from ellipse_geometry.core.models.ellipsoid import WGS84


@pytest.fixture
def reference_center():
    """Center used throughout the tests: lon -75.59777, lat 40.03883 on WGS84."""
    return WGS84.cartesian_from_degrees(-75.59777, 40.03883)


@pytest.fixture
def equator_center():
    """Center on the equator at the prime meridian."""
    return WGS84.cartesian_from_degrees(0.0, 0.0)
