# -*- coding: utf-8 -*-
"""
Geodetic Reference Files - Persist the inputs of a scan geolocation.

A reference file stores everything needed to rebuild a ``LEOScanProjector``
later (instrument settings, orbital elements, scan timestamps and the
satellite's NORAD id) next to the decoded imagery, so reprojection can run
without the original telemetry. Files are JSON.

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
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

# leoscan internal
from leoscan.exceptions import ValidationError
from leoscan.geolocation.leo.settings import LEOScanSettings

logger = logging.getLogger(__name__)

REFERENCE_FORMAT = 'leoscan-georef'
REFERENCE_VERSION = 1


def reference_from_settings(
    settings: LEOScanSettings,
    norad: Optional[int] = None,
) -> Dict[str, Any]:
    """Build the reference document for ``settings``.

    Parameters
    ----------
    settings : LEOScanSettings
        Settings of the projector to persist.
    norad : int, optional
        NORAD catalog number. Defaults to the one in the element set.

    Returns
    -------
    Dict[str, Any]
        JSON-compatible reference document.
    """
    return {
        'format': REFERENCE_FORMAT,
        'version': REFERENCE_VERSION,
        'norad': settings.tle.norad_id if norad is None else int(norad),
        'settings': settings.to_dict(),
    }


def reference_from_projector(projector, norad: Optional[int] = None) -> Dict[str, Any]:
    """Build the reference document of an existing ``LEOScanProjector``."""
    return reference_from_settings(projector.settings, norad)


def write_reference_file(
    path: Union[str, Path],
    settings: LEOScanSettings,
    norad: Optional[int] = None,
) -> Path:
    """Write a geodetic reference file.

    Parameters
    ----------
    path : str or Path
        Destination file (conventionally ``*.georef``).
    settings : LEOScanSettings
        Settings to persist.
    norad : int, optional
        NORAD catalog number override.

    Returns
    -------
    Path
        The written path.
    """
    path = Path(path)
    document = reference_from_settings(settings, norad)
    path.write_text(json.dumps(document, indent=2))
    logger.info(
        "Wrote reference file %s (%d scan lines)", path, settings.line_count
    )
    return path


def read_reference_file(
    path: Union[str, Path],
) -> Tuple[LEOScanSettings, int]:
    """Read a geodetic reference file.

    Parameters
    ----------
    path : str or Path
        File written by ``write_reference_file``.

    Returns
    -------
    Tuple[LEOScanSettings, int]
        ``(settings, norad)``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValidationError
        If the file is not a reference file of a supported version.
    """
    path = Path(path)
    try:
        document = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValidationError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(document, dict) or document.get('format') != REFERENCE_FORMAT:
        raise ValidationError(f"{path} is not a {REFERENCE_FORMAT} file")
    version = document.get('version')
    if version != REFERENCE_VERSION:
        raise ValidationError(
            f"Unsupported reference file version {version} "
            f"(expected {REFERENCE_VERSION})"
        )
    if 'settings' not in document:
        raise ValidationError(f"{path} has no settings section")

    settings = LEOScanSettings.from_dict(document['settings'])
    norad = int(document.get('norad', settings.tle.norad_id))
    return settings, norad
