# -*- coding: utf-8 -*-
"""
leoscan Exception Hierarchy - Domain-specific exceptions for scan geolocation.

Provides a small exception hierarchy that lets downstream consumers (e.g.,
a reprojection stage walking an output raster) catch leoscan errors
distinctly from Python built-in exceptions. All leoscan exceptions subclass
both ``LeoscanError`` and the appropriate built-in exception so existing
``except ValueError`` / ``except IndexError`` handlers keep working.

Author
------
Steven Siebert

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


class LeoscanError(Exception):
    """Base exception for all leoscan errors."""


class ValidationError(LeoscanError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for malformed two-line elements, empty or non-monotonic scan
    timestamp sequences, non-positive instrument geometry, and other
    configuration failures detected at construction time.
    """


class DependencyError(LeoscanError, ImportError):
    """Missing dependency required for a specific module.

    Raised when the orbital propagator (sgp4) or the projection
    library (pyproj) is not installed.
    """


class GeolocationError(LeoscanError, RuntimeError):
    """Coordinate transformation or geolocation failure.

    Raised when orbit propagation fails or a projection-space coordinate
    lies outside the representable range of the perspective projection.
    """


class ScanOutOfRangeError(GeolocationError, IndexError):
    """A query addressed a scan line or pixel the engine does not hold.

    Raised per call by inverse geolocation queries. Other queries against
    the same engine are unaffected.
    """
