# -*- coding: utf-8 -*-
"""
LEO Geolocation Backend Detection - Detect available orbit/projection libraries.

Probes for sgp4 (orbit propagation from two-line elements) and pyproj
(tilted perspective projection) at import time. Provides boolean flags and
helper functions that the LEO scan geolocation uses to verify required
packages are installed before constructing anything.

Dependencies
------------
sgp4
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
from typing import List

# leoscan internal
from leoscan.exceptions import DependencyError

_HAS_SGP4 = False
_HAS_PYPROJ = False

try:
    from sgp4.api import Satrec  # noqa: F401
    _HAS_SGP4 = True
except ImportError:
    pass

try:
    import pyproj  # noqa: F401
    _HAS_PYPROJ = True
except ImportError:
    pass


def _require(names: List[str], feature: str) -> None:
    flags = {'sgp4': _HAS_SGP4, 'pyproj': _HAS_PYPROJ}
    missing = [name for name in names if not flags[name]]
    if missing:
        raise DependencyError(
            f"{feature} requires {', '.join(missing)}. "
            f"Install with: pip install {' '.join(missing)}"
        )


def require_orbit_backend() -> None:
    """Verify that sgp4 is installed.

    Raises
    ------
    DependencyError
        If sgp4 is not installed.
    """
    _require(['sgp4'], 'OrbitPropagator')


def require_projection_backend() -> None:
    """Verify that pyproj is installed.

    Raises
    ------
    DependencyError
        If pyproj is not installed.
    """
    _require(['pyproj'], 'TiltedPerspective')


def require_leo_backend() -> None:
    """Verify that all packages required for LEO scan geolocation are installed.

    Raises a single ``DependencyError`` listing all missing packages so
    users can install everything in one step.

    Raises
    ------
    DependencyError
        If sgp4 or pyproj (or both) are not installed.
    """
    _require(['sgp4', 'pyproj'], 'LEOScanProjector')
