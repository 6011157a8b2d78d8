# -*- coding: utf-8 -*-
"""
LEO Geolocation Module - Scan-line geolocation for low-earth-orbit instruments.

Builds one tilted perspective projection per scan line from two-line
elements and scan timestamps, and answers "which latitude/longitude did
this instrument sample observe".

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

from leoscan.geolocation.leo.curvature import CurvatureTable
from leoscan.geolocation.leo.orbit import (
    OrbitPropagator,
    SatellitePosition,
    TwoLineElements,
)
from leoscan.geolocation.leo.perspective import TiltedPerspective
from leoscan.geolocation.leo.azimuth import AzimuthEstimate, GroundTrackAzimuth
from leoscan.geolocation.leo.settings import LEOScanSettings, make_settings
from leoscan.geolocation.leo.scan_projector import LEOScanProjector, ScanLine
from leoscan.geolocation.leo.georef import (
    read_reference_file,
    reference_from_projector,
    write_reference_file,
)
from leoscan.geolocation.leo.instruments import (
    INSTRUMENT_PRESETS,
    mwts2_settings,
    preset_settings,
)

__all__ = [
    'CurvatureTable',
    'OrbitPropagator',
    'SatellitePosition',
    'TwoLineElements',
    'TiltedPerspective',
    'AzimuthEstimate',
    'GroundTrackAzimuth',
    'LEOScanSettings',
    'make_settings',
    'LEOScanProjector',
    'ScanLine',
    'read_reference_file',
    'reference_from_projector',
    'write_reference_file',
    'INSTRUMENT_PRESETS',
    'mwts2_settings',
    'preset_settings',
]
