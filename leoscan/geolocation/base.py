# -*- coding: utf-8 -*-
"""
Geolocation Base Classes - Abstract interface for scan-image geolocation.

Defines the abstract base class for transforming instrument image pixel
coordinates into geographic coordinates (latitude/longitude). Concrete
implementations handle a specific acquisition geometry (e.g. the per-line
perspective model of a LEO scanning radiometer).

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

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, Union, Any

import numpy as np


def _is_scalar(val: Any) -> bool:
    """Check if a value is a scalar (not array-like)."""
    if isinstance(val, np.ndarray):
        return val.ndim == 0
    return isinstance(val, (int, float, np.integer, np.floating))


def _to_array(val: Any) -> np.ndarray:
    """Convert scalar, list, or array to 1D numpy array of float64."""
    arr = np.asarray(val, dtype=np.float64)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    return arr


class Geolocation(ABC):
    """
    Abstract base class for image-to-ground geolocation.

    Provides the interface for transforming image pixel coordinates into
    geographic coordinates. For scanning instruments a row is one scan line
    and a column is one instrument sample along that line.

    ``image_to_latlon`` accepts three input forms:

    - **Scalar:** ``geo.image_to_latlon(50, 45)``
    - **Separate arrays:** ``geo.image_to_latlon(rows_array, cols_array)``
    - **Stacked (2, N) array:** ``geo.image_to_latlon(points_2xN)``

    Coordinate Conventions
    ----------------------
    - **Image coordinates:** (row, col) = (scan line, pixel), (0, 0) is
      the first sample of the first scan line
    - **Geographic coordinates:** (lat, lon, height) in degrees / meters

    Notes
    -----
    Subclasses implement ``_image_to_latlon_array`` which operates on 1D
    numpy arrays. The public method handles scalar/list/array dispatch.
    Samples that cannot be geolocated are reported as NaN.
    """

    def __init__(
        self,
        shape: Tuple[int, int],
        crs: str = 'WGS84',
    ):
        """
        Initialize geolocation.

        Parameters
        ----------
        shape : Tuple[int, int]
            Image shape (rows, cols).
        crs : str, default='WGS84'
            Coordinate reference system of the returned coordinates.
        """
        self.shape = shape
        self.crs = crs

    @abstractmethod
    def _image_to_latlon_array(
        self,
        rows: np.ndarray,
        cols: np.ndarray,
        height: float = 0.0
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Transform pixel coordinate arrays to geographic coordinate arrays.

        Parameters
        ----------
        rows : np.ndarray
            Row (scan line) coordinates (1D array, float64).
        cols : np.ndarray
            Column (pixel) coordinates (1D array, float64).
        height : float, default=0.0
            Height reported with every output point (meters).

        Returns
        -------
        Tuple[np.ndarray, np.ndarray, np.ndarray]
            (lats, lons, heights) arrays.
        """
        pass

    def image_to_latlon(
        self,
        row_or_points: Union[float, list, np.ndarray],
        col: Optional[Union[float, list, np.ndarray]] = None,
        height: float = 0.0
    ) -> Union[Tuple[float, float, float],
               Tuple[np.ndarray, np.ndarray, np.ndarray],
               np.ndarray]:
        """
        Transform image coordinates to geographic coordinates.

        Accepts three input forms:

        - **Scalar:** ``image_to_latlon(row, col)`` returns ``(lat, lon, height)`` floats.
        - **Separate arrays:** ``image_to_latlon(rows, cols)`` returns
          ``(lats, lons, heights)`` tuple of arrays.
        - **Stacked array:** ``image_to_latlon(points_2xN)`` returns ``(3, N)``
          ndarray with rows ``[lats, lons, heights]``.

        Parameters
        ----------
        row_or_points : float, list, np.ndarray
            Row coordinate(s) when ``col`` is provided, or a ``(2, N)`` ndarray
            of stacked ``[rows; cols]`` when ``col`` is None.
        col : float, list, or np.ndarray, optional
            Column coordinate(s). Omit to pass a ``(2, N)`` stacked array as
            the first argument.
        height : float, default=0.0
            Height reported with the output points (meters).

        Returns
        -------
        Tuple[float, float, float]
            ``(lat, lon, height)`` when scalar inputs are given.
        Tuple[np.ndarray, np.ndarray, np.ndarray]
            ``(lats, lons, heights)`` when separate array/list inputs are given.
        np.ndarray
            Shape ``(3, N)`` when a ``(2, N)`` stacked array is given.

        Raises
        ------
        ValueError
            If the stacked input does not have shape ``(2, N)``.

        Examples
        --------
        >>> lat, lon, h = geo.image_to_latlon(50, 45)
        >>> lats, lons, heights = geo.image_to_latlon([0, 10, 20], [0, 45, 89])
        """
        if col is None:
            # (2, N) ndarray input
            pts = np.asarray(row_or_points, dtype=np.float64)
            if pts.ndim != 2 or pts.shape[0] != 2:
                raise ValueError(
                    f"Expected (2, N) array, got shape {pts.shape}"
                )
            lats, lons, heights = self._image_to_latlon_array(
                pts[0], pts[1], height
            )
            return np.vstack([lats, lons, heights])
        elif _is_scalar(row_or_points) and _is_scalar(col):
            lats, lons, heights = self._image_to_latlon_array(
                _to_array(row_or_points), _to_array(col), height
            )
            return (float(lats[0]), float(lons[0]), float(heights[0]))
        else:
            return self._image_to_latlon_array(
                _to_array(row_or_points), _to_array(col), height
            )

    def get_footprint(self) -> Dict[str, Any]:
        """
        Calculate image footprint as geographic polygon and bounding box.

        Returns
        -------
        Dict[str, Any]
            Dictionary with keys:
            - 'type': 'Polygon' or 'None'
            - 'coordinates': List of (lon, lat) tuples forming perimeter polygon
            - 'bounds': (min_lon, min_lat, max_lon, max_lat) bounding box

        Notes
        -----
        Samples points along the image perimeter using
        ``sample_image_perimeter()``. Perimeter samples that cannot be
        geolocated (NaN) are dropped.
        """
        from leoscan.geolocation.utils import (
            calculate_footprint,
            sample_image_perimeter,
        )

        sample_rows, sample_cols = sample_image_perimeter(
            self.shape, samples_per_edge=10
        )
        lats, lons, _ = self.image_to_latlon(sample_rows, sample_cols)

        # Filter out any NaN values from outside coverage area
        valid = ~(np.isnan(lats) | np.isnan(lons))
        perimeter_coords = list(zip(
            lons[valid].tolist(), lats[valid].tolist()
        ))
        return calculate_footprint(perimeter_coords)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """
        Get bounding box of image footprint.

        Returns
        -------
        Tuple[float, float, float, float]
            (min_lon, min_lat, max_lon, max_lat) in degrees

        Raises
        ------
        NotImplementedError
            If too few perimeter samples could be geolocated
        """
        bounds = self.get_footprint().get('bounds')

        if bounds is None:
            raise NotImplementedError("Geolocation not available for this imagery")

        return bounds
