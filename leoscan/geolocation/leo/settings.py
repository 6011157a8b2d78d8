# -*- coding: utf-8 -*-
"""
LEO Scan Settings - Immutable configuration of a scan geolocation engine.

Gathers the instrument geometry, the fixed alignment corrections, the
satellite's two-line elements and the scan line timestamps into a single
validated value object. A new configuration always means a new engine.

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
import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

# leoscan internal
from leoscan.exceptions import ValidationError
from leoscan.geolocation.leo.orbit import TwoLineElements


@dataclass(frozen=True)
class LEOScanSettings:
    """Configuration of a ``LEOScanProjector``.

    Parameters
    ----------
    image_width : int
        Raw instrument pixel count per scan line.
    correction_swath : float
        Ground swath used by the curvature correction (km).
    correction_res : float
        Ground resolution of the curvature-corrected grid (km).
    correction_height : float
        Orbit height assumed by the curvature correction (km).
    instrument_swath : float
        Swath implied by the instrument field of view (km). Divided by the
        per-line footprint to scale projection space.
    proj_scale : float
        Scale of a half scan line in projection space.
    proj_offset : float
        Pixel offset added after recentring a scan line.
    tilt_offset : float
        Fixed tilt of every line's projection (degrees).
    az_offset : float
        Fixed azimuth offset relative to the ground track (degrees).
    time_offset : float
        Seconds added to every scan timestamp.
    invert_scan : bool
        Mirror the scan direction.
    tle : TwoLineElements
        Orbital elements of the satellite.
    timestamps : Sequence[float]
        UNIX time of every scan line, non-decreasing, one per line.
    azimuth_window : float, default=0.2
        Half width (seconds) of the finite-difference window used to
        estimate the ground-track azimuth.

    Raises
    ------
    ValidationError
        If any geometric parameter is non-positive, an offset is not
        finite, or the timestamps are empty, non-finite, or decreasing.
    """

    image_width: int
    correction_swath: float
    correction_res: float
    correction_height: float
    instrument_swath: float
    proj_scale: float
    proj_offset: float
    tilt_offset: float
    az_offset: float
    time_offset: float
    invert_scan: bool
    tle: TwoLineElements
    timestamps: Tuple[float, ...]
    azimuth_window: float = 0.2

    def __post_init__(self) -> None:
        object.__setattr__(
            self, 'timestamps', tuple(float(t) for t in self.timestamps)
        )

        if int(self.image_width) != self.image_width or self.image_width <= 0:
            raise ValidationError(
                f"image_width must be a positive integer, got {self.image_width}"
            )
        object.__setattr__(self, 'image_width', int(self.image_width))

        for name in ('correction_swath', 'correction_res',
                     'correction_height', 'instrument_swath',
                     'proj_scale', 'azimuth_window'):
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0):
                raise ValidationError(f"{name} must be positive, got {value}")

        for name in ('proj_offset', 'tilt_offset', 'az_offset',
                     'time_offset'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValidationError(f"{name} must be finite, got {value}")

        if not isinstance(self.tle, TwoLineElements):
            raise ValidationError(
                f"tle must be a TwoLineElements instance, got "
                f"{type(self.tle).__name__}"
            )

        if not self.timestamps:
            raise ValidationError("At least one scan line timestamp is required")
        if not all(math.isfinite(t) for t in self.timestamps):
            raise ValidationError("Scan line timestamps must be finite")
        for index, (earlier, later) in enumerate(
                zip(self.timestamps, self.timestamps[1:])):
            if later < earlier:
                raise ValidationError(
                    f"Scan line timestamps must be non-decreasing: line "
                    f"{index + 1} ({later}) precedes line {index} ({earlier})"
                )

    @property
    def line_count(self) -> int:
        """Number of scan lines."""
        return len(self.timestamps)

    def replace(self, **changes: Any) -> 'LEOScanSettings':
        """Return a copy with ``changes`` applied (and re-validated)."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to a JSON-compatible dictionary."""
        data = {
            field.name: getattr(self, field.name)
            for field in dataclasses.fields(self)
            if field.name not in ('tle', 'timestamps')
        }
        data['tle'] = {
            'name': self.tle.name,
            'line1': self.tle.line1,
            'line2': self.tle.line2,
        }
        data['timestamps'] = list(self.timestamps)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LEOScanSettings':
        """Rebuild settings from ``to_dict()`` output.

        Raises
        ------
        ValidationError
            If keys are missing or unknown, or the values are invalid.
        """
        names = {field.name for field in dataclasses.fields(cls)}
        unknown = set(data) - names
        if unknown:
            raise ValidationError(
                f"Unknown settings keys: {', '.join(sorted(unknown))}"
            )
        kwargs = dict(data)
        try:
            tle = kwargs.pop('tle')
            kwargs['tle'] = TwoLineElements(
                tle['line1'], tle['line2'], tle.get('name')
            )
            return cls(**kwargs)
        except (KeyError, TypeError) as exc:
            raise ValidationError(f"Incomplete settings: {exc}") from exc


def make_settings(
    tle: TwoLineElements,
    timestamps: Sequence[float],
    image_width: int,
    **overrides: Any,
) -> LEOScanSettings:
    """Build settings with neutral defaults for everything not given.

    Defaults: no alignment offsets, no time offset, unmirrored scan,
    unit projection scale, and a 2200 km swath at 827 km with the
    instrument swath equal to the correction swath.
    """
    params: Dict[str, Any] = {
        'correction_swath': 2200.0,
        'correction_res': 1.0,
        'correction_height': 827.0,
        'instrument_swath': 2200.0,
        'proj_scale': 1.0,
        'proj_offset': 0.0,
        'tilt_offset': 0.0,
        'az_offset': 0.0,
        'time_offset': 0.0,
        'invert_scan': False,
    }
    params.update(overrides)
    return LEOScanSettings(
        image_width=image_width,
        tle=tle,
        timestamps=tuple(timestamps),
        **params,
    )
