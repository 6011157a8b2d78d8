# -*- coding: utf-8 -*-
"""
Instrument Presets - Tuned scan geolocation settings for known instruments.

Alignment values (pixel offset, projection scale, swath) are found by
overlaying reprojected imagery on coastlines; they are kept here so decoders
only have to provide orbital elements and scan timestamps.

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
from typing import Any, Callable, Dict, Sequence

# leoscan internal
from leoscan.exceptions import ValidationError
from leoscan.geolocation.leo.orbit import TwoLineElements
from leoscan.geolocation.leo.settings import LEOScanSettings, make_settings


def mwts2_settings(
    tle: TwoLineElements,
    timestamps: Sequence[float],
    image_width: int = 90,
    **overrides: Any,
) -> LEOScanSettings:
    """Settings for the FengYun-3 MWTS-2 microwave temperature sounder.

    Parameters
    ----------
    tle : TwoLineElements
        Orbital elements of the carrying satellite.
    timestamps : Sequence[float]
        UNIX time of every scan line.
    image_width : int, default=90
        Samples per scan line.
    **overrides
        Any ``LEOScanSettings`` field to change.
    """
    params: Dict[str, Any] = {
        'proj_offset': 60.0,
        'correction_swath': 1400.0,
        'correction_res': 17.4 / 20,
        'correction_height': 827.0,
        'instrument_swath': 2200.0,
        'proj_scale': 2.42,
        'az_offset': 0.0,
        'tilt_offset': 0.0,
        'time_offset': 0.0,
        'invert_scan': True,
    }
    params.update(overrides)
    return make_settings(tle, timestamps, image_width, **params)


INSTRUMENT_PRESETS: Dict[str, Callable[..., LEOScanSettings]] = {
    'fengyun_mwts2': mwts2_settings,
}


def preset_settings(
    name: str,
    tle: TwoLineElements,
    timestamps: Sequence[float],
    **kwargs: Any,
) -> LEOScanSettings:
    """Look up a preset by name and build its settings.

    Raises
    ------
    ValidationError
        If no preset is registered under ``name``.
    """
    try:
        factory = INSTRUMENT_PRESETS[name]
    except KeyError:
        raise ValidationError(
            f"Unknown instrument preset {name!r}. Available: "
            f"{', '.join(sorted(INSTRUMENT_PRESETS))}"
        ) from None
    return factory(tle, timestamps, **kwargs)
