# -*- coding: utf-8 -*-
"""
Ground-Track Azimuth - Along-track heading of the satellite at a scan line.

The propagator only yields positions, so the heading used to orient each
scan line's projection is derived by finite differences: the sub-satellite
points shortly before and after the scan are projected onto a small raster
laid over a nadir-centred tangent plane, and the azimuth follows from the
arctangent of their vertical over horizontal separation.

Dependencies
------------
numpy

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
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

# Third-party
import numpy as np

# leoscan internal
from leoscan.exceptions import ValidationError
from leoscan.geolocation.leo.orbit import OrbitPropagator, SatellitePosition
from leoscan.geolocation.leo.perspective import TiltedPerspective

logger = logging.getLogger(__name__)

# Projected coordinates beyond this magnitude are treated as overflow
SATURATION_LIMIT = 1e10


@dataclass(frozen=True)
class AzimuthEstimate:
    """Orientation of one scan line.

    Attributes
    ----------
    raw : float
        Ground-track angle on the tangent-plane raster (degrees, in
        ``[-90, 90]``).
    azimuth : float
        Projection azimuth after the -90 degree convention shift and the
        fixed offset (degrees).
    invert_offset : bool
        True when ``raw`` is positive, in which case the fixed offset was
        subtracted rather than added.
    fallback : bool
        True when the finite difference was unusable and ``raw`` was
        inherited from the previous line.
    """

    raw: float
    azimuth: float
    invert_offset: bool
    fallback: bool = False


def _raster_position(
    x: float,
    y: float,
    grid_size: int,
    grid_scale: float,
) -> Optional[Tuple[float, float]]:
    """Place a projection-space point on the tangent-plane raster.

    Returns None for non-finite or saturated coordinates.
    """
    if not (np.isfinite(x) and np.isfinite(y)):
        return None
    if abs(x) > SATURATION_LIMIT or abs(y) > SATURATION_LIMIT:
        return None

    half = grid_size / 2.0
    image_x = x * grid_scale * half + half
    image_y = y * grid_scale * half + half
    return image_x, (grid_size - 1) - image_y


class GroundTrackAzimuth:
    """Finite-difference estimator of the along-track azimuth.

    Parameters
    ----------
    propagator : OrbitPropagator
        Position oracle of the satellite.
    window : float, default=0.2
        Half width of the finite-difference window (seconds).
    grid_size : int, default=200
        Side of the logical tangent-plane raster (pixels).
    grid_scale : float, default=4.0
        Zoom of the raster over the tangent plane.
    """

    def __init__(
        self,
        propagator: OrbitPropagator,
        window: float = 0.2,
        grid_size: int = 200,
        grid_scale: float = 4.0,
    ) -> None:
        if window <= 0:
            raise ValidationError(f"window must be positive, got {window}")
        self.propagator = propagator
        self.window = window
        self.grid_size = grid_size
        self.grid_scale = grid_scale

    def raw_azimuth(self, position: SatellitePosition) -> Optional[float]:
        """Ground-track angle at ``position`` on the tangent-plane raster.

        Parameters
        ----------
        position : SatellitePosition
            Satellite state at the scan line time.

        Returns
        -------
        float or None
            Angle in degrees within ``[-90, 90]``, or None when the two
            projected samples are unusable (non-finite, saturated, or
            coincident).
        """
        plane = TiltedPerspective(
            position.altitude * 1000.0,
            position.longitude,
            position.latitude,
        )

        before = self.propagator.position_at(position.time - self.window)
        after = self.propagator.position_at(position.time + self.window)

        points = []
        for sample in (before, after):
            x, y = plane.forward(sample.longitude, sample.latitude)
            points.append(_raster_position(
                float(x), float(y), self.grid_size, self.grid_scale
            ))
        if points[0] is None or points[1] is None:
            return None

        dx = points[0][0] - points[1][0]
        dy = points[0][1] - points[1][1]
        if dx == 0 and dy == 0:
            return None
        if dx == 0:
            return math.copysign(90.0, dy)
        return math.degrees(math.atan(dy / dx))

    def estimate(
        self,
        position: SatellitePosition,
        azimuth_offset: float = 0.0,
        previous: Optional[AzimuthEstimate] = None,
    ) -> AzimuthEstimate:
        """Projection azimuth for the scan line at ``position``.

        Parameters
        ----------
        position : SatellitePosition
            Satellite state at the scan line time.
        azimuth_offset : float, default=0.0
            Fixed azimuth correction (degrees). Applied on the same
            physical side of the ground track on ascending and descending
            passes.
        previous : AzimuthEstimate, optional
            Estimate of the preceding line, reused when this line's finite
            difference is unusable.

        Returns
        -------
        AzimuthEstimate
        """
        raw = self.raw_azimuth(position)
        fallback = raw is None
        if fallback:
            raw = previous.raw if previous is not None else 0.0
            logger.warning(
                "Azimuth undefined at t=%.3f, falling back to %.4f deg",
                position.time, raw,
            )

        invert_offset = raw > 0
        azimuth = raw - 90.0
        if invert_offset:
            azimuth -= azimuth_offset
        else:
            azimuth += azimuth_offset

        return AzimuthEstimate(
            raw=raw,
            azimuth=azimuth,
            invert_offset=invert_offset,
            fallback=fallback,
        )
