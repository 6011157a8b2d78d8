# -*- coding: utf-8 -*-
"""
Curvature Tables - Raw scan pixel <-> uniform ground-distance pixel mapping.

A cross-track scanner samples at uniform *view angle*, so on a spherical
Earth the ground distance between adjacent samples grows toward the edges
of the swath. ``CurvatureTable`` precomputes, once per instrument
configuration, the mapping between the raw (angularly sampled) pixel index
and a corrected pixel index sampled at uniform ground distance.

Geometry, with ``R`` the Earth radius and ``r = R + h`` the orbit radius,
for a ground arc angle ``a`` measured from nadir::

    view(a) = -atan(R sin(a) / (R cos(a) - r))

The swath edge sits at ``a = swath / (2 R)``. Corrected sample ``i`` lies
at the uniform ground arc ``a_i = (i / N - 0.5) * swath / R`` and maps to
the raw pixel::

    f_i = width * (view(a_i) / view(a_edge) + 1) / 2

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
from dataclasses import dataclass

# Third-party
import numpy as np

# leoscan internal
from leoscan.exceptions import ScanOutOfRangeError, ValidationError

logger = logging.getLogger(__name__)

# Spherical Earth radius used by the curvature model (km)
EARTH_RADIUS_KM = 6371.0

# Marker for raw pixels that no corrected sample lands on
UNMAPPED = -1


def _view_angle(ground_angle: np.ndarray, orbit_radius: float) -> np.ndarray:
    """Satellite-relative view angle (rad) of a ground arc angle (rad)."""
    return -np.arctan(
        EARTH_RADIUS_KM * np.sin(ground_angle)
        / (np.cos(ground_angle) * EARTH_RADIUS_KM - orbit_radius)
    )


@dataclass(frozen=True, eq=False)
class CurvatureTable:
    """Forward and inverse curvature correction tables.

    Attributes
    ----------
    image_width : int
        Raw instrument pixel count per scan line.
    corrected_width : int
        Pixel count of the uniform ground-distance grid,
        ``round(swath / resolution)``.
    edge_angle : float
        View angle (radians) at the outer swath boundary.
    forward : np.ndarray
        ``forward[i]`` is the raw floating pixel position of corrected
        sample ``i``. Shape ``(corrected_width,)``, monotonically
        non-decreasing.
    inverse : np.ndarray
        ``inverse[j]`` is the corrected sample whose raw position falls in
        raw pixel ``j`` (the last such sample). Raw pixels that no
        corrected sample lands on hold ``-1``. Shape ``(image_width,)``.

    Notes
    -----
    Both arrays are flagged read-only.
    """

    image_width: int
    corrected_width: int
    edge_angle: float
    forward: np.ndarray
    inverse: np.ndarray

    @classmethod
    def build(
        cls,
        image_width: int,
        swath: float,
        resolution: float,
        height: float,
    ) -> 'CurvatureTable':
        """Compute the curvature tables for one instrument geometry.

        Parameters
        ----------
        image_width : int
            Raw instrument pixel count.
        swath : float
            Ground swath width covered by the scan (km).
        resolution : float
            Ground resolution of the corrected grid (km).
        height : float
            Orbit height assumed for the correction (km).

        Returns
        -------
        CurvatureTable

        Raises
        ------
        ValidationError
            If any parameter is non-positive or the edge geometry is
            singular.
        """
        if image_width <= 0:
            raise ValidationError(
                f"image_width must be positive, got {image_width}"
            )
        if swath <= 0 or resolution <= 0:
            raise ValidationError(
                f"swath and resolution must be positive, got "
                f"swath={swath}, resolution={resolution}"
            )
        if height <= 0:
            raise ValidationError(
                f"correction height must be positive, got {height}"
            )

        orbit_radius = EARTH_RADIUS_KM + height
        corrected_width = int(round(swath / resolution))
        if corrected_width <= 0:
            raise ValidationError(
                f"swath / resolution rounds to {corrected_width} samples"
            )
        view_angle = swath / EARTH_RADIUS_KM

        half = view_angle / 2
        denominator = np.cos(half) * EARTH_RADIUS_KM - orbit_radius
        if denominator == 0:
            raise ValidationError(
                "Correction geometry is singular: orbit radius equals the "
                "projected swath chord"
            )
        edge_angle = float(_view_angle(np.float64(half), orbit_radius))
        if not np.isfinite(edge_angle) or edge_angle == 0:
            raise ValidationError(
                f"Invalid curvature edge angle {edge_angle}"
            )

        samples = np.arange(corrected_width, dtype=np.float64)
        angles = (samples / corrected_width - 0.5) * view_angle
        satellite_angles = _view_angle(angles, orbit_radius)
        forward = image_width * ((satellite_angles / edge_angle + 1.0) / 2.0)

        # forward is monotonic, so raw is sorted: the last corrected
        # sample landing in each raw pixel is found by bisection
        raw = np.clip(forward.astype(np.int64), 0, image_width - 1)
        pixels = np.arange(image_width, dtype=np.int64)
        last = np.searchsorted(raw, pixels, side="right") - 1
        hit = (last >= 0) & (raw[np.clip(last, 0, None)] == pixels)
        inverse = np.where(hit, last, UNMAPPED).astype(np.int64)

        forward.setflags(write=False)
        inverse.setflags(write=False)

        logger.debug(
            "Curvature table: %d raw px -> %d corrected px, edge angle "
            "%.4f deg, %d raw px unmapped",
            image_width, corrected_width, np.degrees(edge_angle),
            int(np.count_nonzero(inverse == UNMAPPED)),
        )

        return cls(
            image_width=image_width,
            corrected_width=corrected_width,
            edge_angle=edge_angle,
            forward=forward,
            inverse=inverse,
        )

    def corrected_position(self, pixel: int) -> int:
        """Resolve a raw pixel index to its corrected sample index.

        Parameters
        ----------
        pixel : int
            Raw pixel index in ``[0, image_width)``.

        Returns
        -------
        int
            Corrected sample index in ``[0, corrected_width)``.

        Raises
        ------
        ScanOutOfRangeError
            If ``pixel`` lies outside the raw width or no corrected sample
            maps to it.
        """
        if pixel < 0 or pixel >= self.image_width:
            raise ScanOutOfRangeError(
                f"Pixel {pixel} is outside the raw width [0, {self.image_width})"
            )
        corrected = int(self.inverse[pixel])
        if corrected == UNMAPPED:
            raise ScanOutOfRangeError(
                f"Pixel {pixel} has no curvature-corrected counterpart"
            )
        return corrected
