# -*- coding: utf-8 -*-
"""
LEO Scan Projector - Per-scan-line geolocation of LEO scanning instruments.

Provides ``LEOScanProjector``, a concrete ``Geolocation`` for cross-track
scanning radiometers and imagers on low-earth-orbit satellites. Every scan
line gets its own tilted perspective projection, placed at the satellite's
propagated position and rotated along the ground track, so geolocation
error stays bounded to a single scan instead of accumulating over a pass.

Coordinate flow for one sample:

    pixel --curvature--> corrected pixel --scale--> projection x
          --tpers inverse (x, 0)--> (lon, lat)

All tables and per-line projections are built in the constructor; after
that the projector is read-only, so concurrent queries need no locking.

Dependencies
------------
numpy
pyproj
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
import logging
from dataclasses import dataclass
from typing import List, Tuple, Union

# Third-party
import numpy as np

# leoscan internal
from leoscan.exceptions import ScanOutOfRangeError
from leoscan.geolocation.base import Geolocation
from leoscan.geolocation.leo._backend import require_leo_backend
from leoscan.geolocation.leo.azimuth import AzimuthEstimate, GroundTrackAzimuth
from leoscan.geolocation.leo.curvature import UNMAPPED, CurvatureTable
from leoscan.geolocation.leo.orbit import OrbitPropagator, SatellitePosition
from leoscan.geolocation.leo.perspective import TiltedPerspective
from leoscan.geolocation.leo.settings import LEOScanSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanLine:
    """Everything known about one scan line, all at the same instant.

    Attributes
    ----------
    index : int
        Line number in scan order.
    timestamp : float
        Acquisition time including the configured time offset (UNIX s).
    position : SatellitePosition
        Propagated satellite state at ``timestamp``.
    azimuth : AzimuthEstimate
        Orientation used for the line's projection.
    projection : TiltedPerspective
        Perspective projection of the line.
    """

    index: int
    timestamp: float
    position: SatellitePosition
    azimuth: AzimuthEstimate
    projection: TiltedPerspective

    @property
    def footprint(self) -> float:
        """Satellite footprint diameter at the line's instant (km)."""
        return self.position.footprint


class LEOScanProjector(Geolocation):
    """Geolocation for LEO scan-line imagery.

    Parameters
    ----------
    settings : LEOScanSettings
        Instrument geometry, alignment, orbit and scan timestamps.
    correct_curvature : bool, default=False
        Whether ``image_to_latlon`` resolves pixels through the curvature
        table. ``inverse`` takes this choice per call instead.

    Attributes
    ----------
    settings : LEOScanSettings
    curvature : CurvatureTable
    shape : Tuple[int, int]
        ``(line_count, image_width)``.

    Raises
    ------
    DependencyError
        If sgp4 or pyproj is not installed.
    ValidationError
        If the element set is rejected by SGP4.
    GeolocationError
        If propagation fails for any scan line.

    Examples
    --------
    >>> projector = LEOScanProjector(settings)
    >>> lat, lon = projector.inverse(45, 50, correct=True)
    >>> lats, lons, _ = projector.image_to_latlon([0, 50, 99], [0, 45, 89])
    """

    def __init__(
        self,
        settings: LEOScanSettings,
        correct_curvature: bool = False,
    ) -> None:
        require_leo_backend()

        self.settings = settings
        self.correct_curvature = correct_curvature

        logger.info("Building curvature table...")
        self.curvature = CurvatureTable.build(
            settings.image_width,
            settings.correction_swath,
            settings.correction_res,
            settings.correction_height,
        )

        logger.info(
            "Generating projections for %d scan lines...", settings.line_count
        )
        self._lines = tuple(self._build_lines())

        super().__init__(
            (len(self._lines), settings.image_width), crs='WGS84'
        )

    def _build_lines(self) -> List[ScanLine]:
        settings = self.settings
        propagator = OrbitPropagator(settings.tle)
        estimator = GroundTrackAzimuth(
            propagator, window=settings.azimuth_window
        )

        lines = []
        previous = None
        for index, stamp in enumerate(settings.timestamps):
            timestamp = stamp + settings.time_offset
            position = propagator.position_at(timestamp)
            azimuth = estimator.estimate(
                position, settings.az_offset, previous
            )

            # Point of view aligned with the satellite's ground track
            projection = TiltedPerspective(
                position.altitude * 1000.0,
                position.longitude,
                position.latitude,
                settings.tilt_offset,
                azimuth.azimuth,
            )
            lines.append(ScanLine(
                index=index,
                timestamp=timestamp,
                position=position,
                azimuth=azimuth,
                projection=projection,
            ))
            previous = azimuth

            logger.debug(
                "Line %d: lat=%.4f lon=%.4f alt=%.2f km az=%.3f",
                index, position.latitude, position.longitude,
                position.altitude, azimuth.azimuth,
            )

        fallbacks = sum(1 for line in lines if line.azimuth.fallback)
        if fallbacks:
            logger.warning(
                "%d of %d scan lines reused a previous azimuth",
                fallbacks, len(lines),
            )
        return lines

    @property
    def lines(self) -> Tuple[ScanLine, ...]:
        """Per-line records in scan order."""
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def image_width(self) -> int:
        return self.settings.image_width

    @property
    def corrected_width(self) -> int:
        return self.curvature.corrected_width

    @property
    def positions(self) -> Tuple[SatellitePosition, ...]:
        """Propagated satellite positions, one per line."""
        return tuple(line.position for line in self._lines)

    @property
    def footprints(self) -> np.ndarray:
        """Footprint diameters (km), one per line."""
        return np.array([line.footprint for line in self._lines])

    def _projection_x(
        self,
        x: Union[float, np.ndarray],
        width: float,
        footprint: float,
    ) -> Union[float, np.ndarray]:
        """Scale a pixel position along a line into projection space."""
        settings = self.settings
        if settings.invert_scan:
            x = (width - 1) - x
        x = x - width / 2.0 + settings.proj_offset
        x = x / (settings.proj_scale * (width / 2.0))

        # The instrument field of view is fixed, so its ground swath
        # follows the altitude; the projection is not to scale
        return x * (settings.instrument_swath / footprint)

    def inverse(
        self,
        pixel_x: float,
        line: int,
        correct: bool = False,
    ) -> Tuple[float, float]:
        """Geolocate one sample.

        Parameters
        ----------
        pixel_x : float
            Raw pixel index along the scan line, ``[0, image_width)``.
        line : int
            Scan line index, ``[0, line_count)``.
        correct : bool, default=False
            Resolve ``pixel_x`` through the curvature table and scale it
            against the corrected width.

        Returns
        -------
        Tuple[float, float]
            ``(lat, lon)`` in degrees.

        Raises
        ------
        ScanOutOfRangeError
            If the line or pixel is not finite or out of range, or the
            pixel has no curvature-corrected counterpart.
        GeolocationError
            If the scaled coordinate falls outside the projection's
            visible disk.
        """
        if not (np.isfinite(line) and np.isfinite(pixel_x)):
            raise ScanOutOfRangeError(
                f"Sample (pixel={pixel_x}, line={line}) is not finite"
            )
        if line < 0 or line >= len(self._lines):
            raise ScanOutOfRangeError(
                f"Line {line} is outside [0, {len(self._lines)})"
            )
        if pixel_x < 0 or pixel_x >= self.settings.image_width:
            raise ScanOutOfRangeError(
                f"Pixel {pixel_x} is outside [0, {self.settings.image_width})"
            )

        scan = self._lines[int(line)]
        if correct:
            x = float(self.curvature.corrected_position(int(pixel_x)))
            width = self.curvature.corrected_width
        else:
            x = float(pixel_x)
            width = self.settings.image_width

        pjx = self._projection_x(x, width, scan.footprint)
        lon, lat = scan.projection.inverse(pjx, 0.0)
        return lat, lon

    def _image_to_latlon_array(
        self,
        rows: np.ndarray,
        cols: np.ndarray,
        height: float = 0.0
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Vectorised ``inverse`` over (line, pixel) arrays.

        Samples that are out of range, unmapped by the curvature table or
        outside the projection's visible disk come back as NaN.
        """
        lats = np.full(rows.shape, np.nan)
        lons = np.full(rows.shape, np.nan)

        valid = (
            np.isfinite(rows) & np.isfinite(cols)
            & (rows >= 0) & (rows < len(self._lines))
            & (cols >= 0) & (cols < self.settings.image_width)
        )
        line_idx = np.where(valid, rows, 0).astype(np.int64)

        if self.correct_curvature:
            pixel_idx = np.where(valid, cols, 0).astype(np.int64)
            xs = self.curvature.inverse[pixel_idx].astype(np.float64)
            valid &= xs != UNMAPPED
            width = self.curvature.corrected_width
        else:
            xs = cols
            width = self.settings.image_width

        # Group valid samples by scan line with a single sort
        samples = np.flatnonzero(valid)
        samples = samples[np.argsort(line_idx[samples], kind="stable")]
        indices, starts = np.unique(line_idx[samples], return_index=True)
        for index, group in zip(indices, np.split(samples, starts[1:])):
            scan = self._lines[index]
            pjx = self._projection_x(xs[group], width, scan.footprint)
            lon, lat = scan.projection.inverse(pjx, np.zeros_like(pjx))
            lons[group] = lon
            lats[group] = lat

        heights = np.full_like(lats, height)
        return lats, lons, heights
