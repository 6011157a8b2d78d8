# -*- coding: utf-8 -*-
"""
Orbit Propagation - Sub-satellite point and footprint from two-line elements.

Wraps the SGP4/SDP4 propagator from the ``sgp4`` package behind a small
"position at time T" interface. Positions come out of SGP4 in the TEME
frame, are rotated into Earth-fixed coordinates with the Greenwich mean
sidereal time, and are converted to geodetic latitude, longitude and
altitude on the WGS-84 ellipsoid.

Times are UNIX seconds (UTC, continuous epoch), as produced by scan line
time code decoders.

Dependencies
------------
numpy
sgp4

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
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

# leoscan internal
from leoscan.exceptions import GeolocationError, ValidationError
from leoscan.geolocation.leo._backend import require_orbit_backend

# WGS-84 equatorial radius (km) and flattening
WGS84_RADIUS_KM = 6378.137
WGS84_FLATTENING = 1.0 / 298.257223563

# Julian date of the UNIX epoch
_UNIX_EPOCH_JD = 2440587.5
_SECONDS_PER_DAY = 86400.0

_TLE_LINE_LENGTH = 69


def _tle_checksum(line: str) -> int:
    """Modulo-10 checksum of the first 68 columns of a TLE line."""
    total = 0
    for char in line[:68]:
        if char.isdigit():
            total += int(char)
        elif char == '-':
            total += 1
    return total % 10


def unix_to_julian(timestamp: float) -> Tuple[float, float]:
    """Split a UNIX timestamp into a (whole, fraction) Julian date pair.

    Keeping the day fraction separate preserves sub-millisecond precision
    through the propagator.
    """
    days = math.floor(timestamp / _SECONDS_PER_DAY)
    fraction = (timestamp - days * _SECONDS_PER_DAY) / _SECONDS_PER_DAY
    return _UNIX_EPOCH_JD + days, fraction


@dataclass(frozen=True)
class TwoLineElements:
    """A validated two-line element set.

    Parameters
    ----------
    line1 : str
        First element line (starts with ``'1 '``).
    line2 : str
        Second element line (starts with ``'2 '``).
    name : str, optional
        Satellite name (the optional "line 0").

    Raises
    ------
    ValidationError
        If the lines are too short, misnumbered, refer to different
        catalog numbers, or fail their checksum.
    """

    line1: str
    line2: str
    name: Optional[str] = None

    def __post_init__(self) -> None:
        # Strip trailing whitespace/newlines from file-read lines
        object.__setattr__(self, 'line1', self.line1.rstrip())
        object.__setattr__(self, 'line2', self.line2.rstrip())

        for number, line in ((1, self.line1), (2, self.line2)):
            if len(line) < _TLE_LINE_LENGTH:
                raise ValidationError(
                    f"TLE line {number} must be {_TLE_LINE_LENGTH} "
                    f"characters, got {len(line)}"
                )
            if not line.startswith(f"{number} "):
                raise ValidationError(
                    f"TLE line {number} must start with '{number} '"
                )
            if not line[68].isdigit():
                raise ValidationError(
                    f"TLE line {number} has no checksum digit"
                )
            if _tle_checksum(line) != int(line[68]):
                raise ValidationError(
                    f"TLE line {number} checksum mismatch: expected "
                    f"{_tle_checksum(line)}, found {line[68]}"
                )

        if self.line1[2:7] != self.line2[2:7]:
            raise ValidationError(
                f"TLE lines refer to different satellites: "
                f"{self.line1[2:7]!r} vs {self.line2[2:7]!r}"
            )

    @property
    def norad_id(self) -> int:
        """NORAD catalog number."""
        return int(self.line1[2:7])

    @property
    def epoch(self) -> datetime:
        """Element set epoch as a timezone-aware UTC datetime."""
        year = int(self.line1[18:20])
        year += 2000 if year < 57 else 1900
        day_of_year = float(self.line1[20:32])
        start = datetime(year, 1, 1, tzinfo=timezone.utc)
        return start + timedelta(days=day_of_year - 1.0)


@dataclass(frozen=True)
class SatellitePosition:
    """Geodetic satellite state at one instant.

    Attributes
    ----------
    time : float
        UNIX timestamp (seconds).
    latitude : float
        Geodetic latitude of the sub-satellite point (degrees).
    longitude : float
        Longitude of the sub-satellite point (degrees, [-180, 180)).
    altitude : float
        Height above the WGS-84 ellipsoid (km).
    footprint : float
        Diameter of the circle on the ground from which the satellite is
        above the horizon (km).
    """

    time: float
    latitude: float
    longitude: float
    altitude: float
    footprint: float


def footprint_diameter(altitude: float) -> float:
    """Visibility circle diameter (km) for a satellite at ``altitude`` km."""
    return 2.0 * WGS84_RADIUS_KM * math.acos(
        WGS84_RADIUS_KM / (WGS84_RADIUS_KM + altitude)
    )


def teme_to_geodetic(
    position_km,
    gmst: float,
) -> Tuple[float, float, float]:
    """Convert a TEME position to geodetic latitude, longitude and altitude.

    Parameters
    ----------
    position_km : sequence of float
        TEME ``(x, y, z)`` in km.
    gmst : float
        Greenwich mean sidereal time (radians).

    Returns
    -------
    tuple
        ``(latitude_deg, longitude_deg, altitude_km)``.
    """
    x, y, z = position_km
    e2 = WGS84_FLATTENING * (2.0 - WGS84_FLATTENING)

    longitude = math.atan2(y, x) - gmst
    longitude = (longitude + math.pi) % (2.0 * math.pi) - math.pi

    r = math.hypot(x, y)
    latitude = math.atan2(z, r)
    for _ in range(20):
        phi = latitude
        sin_phi = math.sin(phi)
        c = 1.0 / math.sqrt(1.0 - e2 * sin_phi * sin_phi)
        latitude = math.atan2(z + WGS84_RADIUS_KM * c * e2 * sin_phi, r)
        if abs(latitude - phi) < 1e-12:
            break

    # Valid at the poles
    sin_lat = math.sin(latitude)
    altitude = (
        r * math.cos(latitude) + z * sin_lat
        - WGS84_RADIUS_KM * math.sqrt(1.0 - e2 * sin_lat * sin_lat)
    )
    return math.degrees(latitude), math.degrees(longitude), altitude


class OrbitPropagator:
    """SGP4 propagator answering "where is the satellite at time T".

    Parameters
    ----------
    tle : TwoLineElements
        Element set of the satellite.

    Raises
    ------
    DependencyError
        If sgp4 is not installed.
    ValidationError
        If SGP4 rejects the element set.

    Examples
    --------
    >>> tle = TwoLineElements(line1, line2)
    >>> orbit = OrbitPropagator(tle)
    >>> pos = orbit.position_at(1575909510.0)
    >>> pos.latitude, pos.longitude, pos.altitude
    """

    def __init__(self, tle: TwoLineElements) -> None:
        require_orbit_backend()

        from sgp4.api import Satrec

        self.tle = tle
        self._satrec = Satrec.twoline2rv(tle.line1, tle.line2)
        if self._satrec.error != 0:
            raise ValidationError(
                f"SGP4 rejected the element set (error code "
                f"{self._satrec.error})"
            )

    @classmethod
    def from_lines(cls, line1: str, line2: str) -> 'OrbitPropagator':
        """Build a propagator straight from two element lines."""
        return cls(TwoLineElements(line1, line2))

    def position_at(self, timestamp: float) -> SatellitePosition:
        """Propagate to ``timestamp`` and return the geodetic position.

        Parameters
        ----------
        timestamp : float
            UNIX time (seconds).

        Returns
        -------
        SatellitePosition

        Raises
        ------
        GeolocationError
            If SGP4 reports a propagation error (decayed orbit, negative
            eccentricity, ...).
        """
        from sgp4.propagation import gstime

        jd, fraction = unix_to_julian(timestamp)
        error, position, _ = self._satrec.sgp4(jd, fraction)
        if error != 0:
            raise GeolocationError(
                f"SGP4 error code={error} at t={timestamp}"
            )

        latitude, longitude, altitude = teme_to_geodetic(
            position, gstime(jd + fraction)
        )
        return SatellitePosition(
            time=float(timestamp),
            latitude=latitude,
            longitude=longitude,
            altitude=altitude,
            footprint=footprint_diameter(altitude),
        )
