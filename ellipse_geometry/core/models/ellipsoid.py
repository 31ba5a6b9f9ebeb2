"""
Reference ellipsoid for ellipse geometry.

Conventions:
- Cartesian coordinates: Earth-centered, Earth-fixed (ECEF), metres
- Polar axis: +Z
- Longitude / latitude: radians internally, geodetic latitude
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np


# Newton iteration stops once the surface equation residual drops below this.
EPSILON12 = 1e-12

# Points closer to the center than this (in scaled units, squared) are
# projected radially instead of along the geodetic normal.
CENTER_TOLERANCE_SQUARED = 0.1

MAX_NEWTON_ITERATIONS = 100


@dataclass(frozen=True)
class Ellipsoid:
    """
    Triaxial ellipsoid defined by its radii along the X, Y and Z axes.

    Attributes:
        radius_x: Radius along X (metres)
        radius_y: Radius along Y (metres)
        radius_z: Radius along Z, the polar axis (metres)
    """

    radius_x: float
    radius_y: float
    radius_z: float

    def __post_init__(self):
        """Validate radii after initialization."""
        for name in ("radius_x", "radius_y", "radius_z"):
            value = float(getattr(self, name))
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value}")
            object.__setattr__(self, name, value)

    @property
    def radii(self) -> np.ndarray:
        return np.array([self.radius_x, self.radius_y, self.radius_z])

    @property
    def radii_squared(self) -> np.ndarray:
        return self.radii ** 2

    @property
    def one_over_radii(self) -> np.ndarray:
        return 1.0 / self.radii

    @property
    def one_over_radii_squared(self) -> np.ndarray:
        return 1.0 / self.radii_squared

    def geodetic_surface_normal(self, position: np.ndarray) -> np.ndarray:
        """
        Outward unit normal of the ellipsoid surface through ``position``.

        Accepts a single point or an (N, 3) array of points.
        """
        scaled = np.asarray(position, dtype=float) * self.one_over_radii_squared
        norms = np.linalg.norm(scaled, axis=-1, keepdims=True)
        return scaled / norms

    def scale_to_geodetic_surface(self, position: np.ndarray) -> Optional[np.ndarray]:
        """
        Project points onto the surface along the geodetic normal.

        Solves for the foot point with a Newton iteration on the surface
        equation. Points very near the ellipsoid center fall back to a
        radial projection.

        Args:
            position: A single point (3,) or an (N, 3) array of points

        Returns:
            Surface point(s) with the same shape as ``position``. For a
            single point that cannot be projected (the ellipsoid center)
            ``None`` is returned; in an array such rows are NaN.
        """
        position = np.asarray(position, dtype=float)
        single = position.ndim == 1
        points = np.atleast_2d(position)

        one_over_radii_squared = self.one_over_radii_squared
        scaled_squared = points ** 2 * self.one_over_radii ** 2
        squared_norm = scaled_squared.sum(axis=1)

        with np.errstate(divide="ignore", invalid="ignore"):
            ratio = np.sqrt(1.0 / squared_norm)
            intersection = points * ratio[:, np.newaxis]
            near_center = squared_norm < CENTER_TOLERANCE_SQUARED

            gradient = 2.0 * points * one_over_radii_squared
            lam = ((1.0 - ratio) * np.linalg.norm(points, axis=1)
                   / (0.5 * np.linalg.norm(gradient, axis=1)))

            correction = np.zeros_like(lam)
            multiplier = np.ones_like(points)
            active = ~near_center
            for _ in range(MAX_NEWTON_ITERATIONS):
                lam = lam - correction
                multiplier = 1.0 / (1.0 + lam[:, np.newaxis] * one_over_radii_squared)
                func = (scaled_squared * multiplier ** 2).sum(axis=1) - 1.0
                denominator = (scaled_squared * multiplier ** 3 * one_over_radii_squared).sum(axis=1)
                correction = func / (-2.0 * denominator)
                if not np.any(np.abs(func[active]) > EPSILON12):
                    break

        result = points * multiplier
        result[near_center] = intersection[near_center]

        if single:
            surface = result[0]
            return surface if np.all(np.isfinite(surface)) else None
        return result

    def cartographic_to_cartesian(self, longitude: float, latitude: float, height: float = 0.0) -> np.ndarray:
        """
        Convert geodetic longitude/latitude (radians) and height to ECEF.

        Args:
            longitude: Longitude in radians
            latitude: Geodetic latitude in radians
            height: Height above the surface in metres

        Returns:
            Cartesian position as a numpy array of shape (3,)
        """
        cos_lat = math.cos(latitude)
        normal = np.array([
            cos_lat * math.cos(longitude),
            cos_lat * math.sin(longitude),
            math.sin(latitude),
        ])
        k = self.radii_squared * normal
        gamma = math.sqrt(float(normal @ k))
        return k / gamma + normal * height

    def cartesian_from_degrees(self, longitude: float, latitude: float, height: float = 0.0) -> np.ndarray:
        """Same as :meth:`cartographic_to_cartesian` with angles in degrees."""
        return self.cartographic_to_cartesian(math.radians(longitude), math.radians(latitude), height)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize ellipsoid radii to a dictionary."""
        return {
            "radius_x": self.radius_x,
            "radius_y": self.radius_y,
            "radius_z": self.radius_z,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Ellipsoid':
        """Create an Ellipsoid from a dictionary of radii."""
        return cls(
            radius_x=float(data["radius_x"]),
            radius_y=float(data["radius_y"]),
            radius_z=float(data["radius_z"]),
        )

    @classmethod
    def wgs84(cls) -> 'Ellipsoid':
        """The WGS84 reference ellipsoid."""
        return WGS84

    def __repr__(self) -> str:
        return f"Ellipsoid({self.radius_x:.4f}, {self.radius_y:.4f}, {self.radius_z:.4f})"


WGS84 = Ellipsoid(6378137.0, 6378137.0, 6356752.3142451793)

UNIT_SPHERE = Ellipsoid(1.0, 1.0, 1.0)
