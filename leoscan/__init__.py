# -*- coding: utf-8 -*-
"""
leoscan - Scan-line geolocation for low-earth-orbit instrument imagery.

Turns scan line timestamps, orbital elements and instrument geometry into
per-line projections that answer point-wise "where did this sample look"
queries for a downstream reprojection stage.

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from leoscan.exceptions import (
    LeoscanError,
    ValidationError,
    DependencyError,
    GeolocationError,
    ScanOutOfRangeError,
)

__all__ = [
    'LeoscanError',
    'ValidationError',
    'DependencyError',
    'GeolocationError',
    'ScanOutOfRangeError',
]
