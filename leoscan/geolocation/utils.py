# -*- coding: utf-8 -*-
"""
Geolocation Utilities - Helper functions for coordinate transformations.

Utility functions for geolocation operations including footprint calculation,
bounds computation and perimeter sampling.

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

from typing import Dict, List, Tuple, Any

import numpy as np


def calculate_footprint(
    corner_coords: List[Tuple[float, float]]
) -> Dict[str, Any]:
    """
    Calculate footprint polygon and bounding box from corner coordinates.

    Parameters
    ----------
    corner_coords : List[Tuple[float, float]]
        List of (lon, lat) tuples for polygon corners

    Returns
    -------
    Dict[str, Any]
        Dictionary with:
        - 'type': 'Polygon' (or 'None' for fewer than 3 points)
        - 'coordinates': List of (lon, lat) tuples
        - 'bounds': (min_lon, min_lat, max_lon, max_lat)
    """
    if not corner_coords or len(corner_coords) < 3:
        return {
            'type': 'None',
            'coordinates': None,
            'bounds': None
        }

    return {
        'type': 'Polygon',
        'coordinates': corner_coords,
        'bounds': bounds_from_corners(corner_coords)
    }


def bounds_from_corners(
    corners: List[Tuple[float, float]]
) -> Tuple[float, float, float, float]:
    """
    Calculate bounding box from corner coordinates.

    Parameters
    ----------
    corners : List[Tuple[float, float]]
        List of (lon, lat) tuples

    Returns
    -------
    Tuple[float, float, float, float]
        (min_lon, min_lat, max_lon, max_lat) bounding box
    """
    if not corners:
        raise ValueError("No corner coordinates provided")

    corners_array = np.array(corners)
    lons = corners_array[:, 0]
    lats = corners_array[:, 1]

    return (float(np.min(lons)), float(np.min(lats)),
            float(np.max(lons)), float(np.max(lats)))


def sample_image_perimeter(
    shape: Tuple[int, int],
    samples_per_edge: int = 10
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate sample points along image perimeter for footprint calculation.

    Parameters
    ----------
    shape : Tuple[int, int]
        Image shape (rows, cols)
    samples_per_edge : int, default=10
        Number of sample points per edge

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        (rows, cols) arrays of sample coordinates along perimeter
    """
    rows, cols = shape

    # Top edge (row=0, col varies)
    top_rows = np.zeros(samples_per_edge)
    top_cols = np.linspace(0, cols-1, samples_per_edge)

    # Right edge (col=cols-1, row varies)
    right_rows = np.linspace(0, rows-1, samples_per_edge)
    right_cols = np.full(samples_per_edge, cols-1)

    # Bottom edge (row=rows-1, col varies)
    bottom_rows = np.full(samples_per_edge, rows-1)
    bottom_cols = np.linspace(cols-1, 0, samples_per_edge)

    # Left edge (col=0, row varies)
    left_rows = np.linspace(rows-1, 0, samples_per_edge)
    left_cols = np.zeros(samples_per_edge)

    all_rows = np.concatenate([top_rows, right_rows, bottom_rows, left_rows])
    all_cols = np.concatenate([top_cols, right_cols, bottom_cols, left_cols])

    return all_rows, all_cols
