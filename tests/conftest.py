# -*- coding: utf-8 -*-
"""
Shared fixtures for the LEO scan geolocation tests.

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

import pytest

# ISS element set, epoch 2019-12-09 16:38:29 UTC
ISS_LINE1 = "1 25544U 98067A   19343.69339541  .00001764  00000-0  38792-4 0  9991"
ISS_LINE2 = "2 25544  51.6439 211.2001 0007417  17.6667  85.6398 15.50103472202482"
ISS_INCLINATION = 51.6439

# UNIX time a few seconds after the element set epoch
ISS_EPOCH_UNIX = 1575909510.0


@pytest.fixture
def iss_lines():
    return ISS_LINE1, ISS_LINE2


@pytest.fixture
def scan_timestamps():
    """100 scan lines, one second apart."""
    return [ISS_EPOCH_UNIX + i for i in range(100)]
