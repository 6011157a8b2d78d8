# -*- coding: utf-8 -*-
"""
Tilted Perspective - Local perspective projection seen from the satellite.

Thin wrapper around the PROJ tilted near-side perspective projection
(``+proj=tpers``) via pyproj. The view point sits ``altitude`` meters above
the sub-satellite point; ``tilt`` leans the view away from nadir and
``azimuth`` rotates the image plane so that its x axis runs across the
ground track.

Coordinates in projection space are expressed in units of the sphere
radius, so a value of ``0.1`` is roughly 637 km on the ground near nadir.
Points beyond the visible horizon have no forward projection and come out
as non-finite values.

Dependencies
------------
numpy
pyproj

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

# Standard library
from typing import Tuple, Union

# Third-party
import numpy as np

# leoscan internal
from leoscan.exceptions import GeolocationError
from leoscan.geolocation.leo._backend import require_projection_backend

# Sphere radius of the projection (m)
SPHERE_RADIUS_M = 6378137.0

ArrayLike = Union[float, np.ndarray]


class TiltedPerspective:
    """Tilted perspective projection centred on a satellite view point.

    Parameters
    ----------
    altitude : float
        View point height above the surface (meters).
    longitude : float
        Longitude of the projection centre (degrees).
    latitude : float
        Latitude of the projection centre (degrees).
    tilt : float, default=0.0
        Tilt of the view direction away from nadir (degrees).
    azimuth : float, default=0.0
        Bearing of the tilt / rotation of the image plane (degrees).

    Raises
    ------
    DependencyError
        If pyproj is not installed.
    GeolocationError
        If the view point is not above the surface.
    """

    def __init__(
        self,
        altitude: float,
        longitude: float,
        latitude: float,
        tilt: float = 0.0,
        azimuth: float = 0.0,
    ) -> None:
        require_projection_backend()

        import pyproj

        if not altitude > 0:
            raise GeolocationError(
                f"Perspective view point must be above the surface, "
                f"got altitude={altitude} m"
            )

        self.altitude = float(altitude)
        self.longitude = float(longitude)
        self.latitude = float(latitude)
        self.tilt = float(tilt)
        self.azimuth = float(azimuth)

        self._proj = pyproj.Proj(
            proj='tpers',
            h=self.altitude,
            lon_0=self.longitude,
            lat_0=self.latitude,
            tilt=self.tilt,
            azi=self.azimuth,
            R=SPHERE_RADIUS_M,
        )

    @property
    def parameters(self) -> Tuple[float, float, float, float, float]:
        """``(altitude, longitude, latitude, tilt, azimuth)``."""
        return (self.altitude, self.longitude, self.latitude,
                self.tilt, self.azimuth)

    def forward(
        self,
        lon: ArrayLike,
        lat: ArrayLike,
    ) -> Tuple[ArrayLike, ArrayLike]:
        """Project geographic coordinates into projection space.

        Returns non-finite values for points the view point cannot see.
        """
        x, y = self._proj(lon, lat)
        return (np.divide(x, SPHERE_RADIUS_M),
                np.divide(y, SPHERE_RADIUS_M))

    def inverse(
        self,
        x: ArrayLike,
        y: ArrayLike,
    ) -> Tuple[ArrayLike, ArrayLike]:
        """Map projection-space coordinates back to ``(lon, lat)`` degrees.

        Scalar inputs outside the visible disk raise ``GeolocationError``.
        Array inputs yield NaN for such points instead.
        """
        scalar = np.ndim(x) == 0 and np.ndim(y) == 0
        lon, lat = self._proj(
            np.multiply(x, SPHERE_RADIUS_M),
            np.multiply(y, SPHERE_RADIUS_M),
            inverse=True,
        )
        lon = np.asarray(lon, dtype=np.float64)
        lat = np.asarray(lat, dtype=np.float64)
        invalid = ~(np.isfinite(lon) & np.isfinite(lat))

        if scalar:
            if invalid:
                raise GeolocationError(
                    f"Projection coordinate ({x}, {y}) lies outside the "
                    f"visible disk"
                )
            return float(lon), float(lat)

        lon = np.where(invalid, np.nan, lon)
        lat = np.where(invalid, np.nan, lat)
        return lon, lat

    def __repr__(self) -> str:
        return (
            f"TiltedPerspective(altitude={self.altitude}, "
            f"longitude={self.longitude}, latitude={self.latitude}, "
            f"tilt={self.tilt}, azimuth={self.azimuth})"
        )
