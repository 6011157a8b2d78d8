# -*- coding: utf-8 -*-
"""
Geolocation Module - Pixel to ground transformations for scan imagery.

Provides the interface and the LEO scan-line implementation for
transforming instrument pixel coordinates into geographic coordinates
(latitude/longitude).

Key Classes
-----------
- Geolocation: Abstract base class for coordinate transformations
- LEOScanProjector: Per-scan-line perspective geolocation

Usage
-----
    >>> from leoscan.geolocation import LEOScanProjector
    >>> from leoscan.geolocation.leo import TwoLineElements, mwts2_settings
    >>>
    >>> tle = TwoLineElements(line1, line2)
    >>> projector = LEOScanProjector(mwts2_settings(tle, timestamps))
    >>>
    >>> # Single sample (raises ScanOutOfRangeError when out of range)
    >>> lat, lon = projector.inverse(45, 100, correct=True)
    >>>
    >>> # Arrays of samples (NaN where no position is available)
    >>> lats, lons, heights = projector.image_to_latlon(
    ...     np.array([0, 100, 200]), np.array([0, 45, 89])
    ... )

Modules
-------
- base: Abstract base class
- leo: LEO scan-line geolocation
- utils: Utility functions

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

from leoscan.geolocation.base import Geolocation
from leoscan.geolocation.leo.scan_projector import LEOScanProjector

__all__ = [
    'Geolocation',
    'LEOScanProjector',
]
