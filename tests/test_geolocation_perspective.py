# -*- coding: utf-8 -*-
"""
Tilted Perspective Tests - pyproj tpers wrapper.

Tests centre mapping, forward/inverse consistency, horizon handling for
scalar and array inputs, and parameter reporting.

Dependencies
------------
pytest
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

import pytest
import numpy as np

from leoscan.exceptions import GeolocationError
from leoscan.geolocation.leo._backend import _HAS_PYPROJ
from leoscan.geolocation.leo.perspective import TiltedPerspective

pytestmark = pytest.mark.skipif(
    not _HAS_PYPROJ, reason="pyproj not installed"
)


@pytest.fixture
def nadir_view():
    """Untilted view from 827 km above (10E, 20N)."""
    return TiltedPerspective(827000.0, 10.0, 20.0)


class TestCentre:
    """Test the projection centre."""

    def test_forward_centre(self, nadir_view):
        """Test the sub-satellite point projects to the origin."""
        x, y = nadir_view.forward(10.0, 20.0)
        assert float(x) == pytest.approx(0.0, abs=1e-9)
        assert float(y) == pytest.approx(0.0, abs=1e-9)

    def test_inverse_centre(self, nadir_view):
        """Test the origin maps back to the sub-satellite point."""
        lon, lat = nadir_view.inverse(0.0, 0.0)
        assert lon == pytest.approx(10.0, abs=1e-9)
        assert lat == pytest.approx(20.0, abs=1e-9)

    def test_rotated_centre(self):
        """Test azimuth rotation keeps the centre fixed."""
        view = TiltedPerspective(827000.0, -45.0, 60.0, 0.0, 37.0)
        lon, lat = view.inverse(0.0, 0.0)
        assert lon == pytest.approx(-45.0, abs=1e-9)
        assert lat == pytest.approx(60.0, abs=1e-9)


class TestRoundTrip:
    """Test forward/inverse consistency."""

    @pytest.mark.parametrize("tilt,azimuth", [
        (0.0, 0.0), (0.0, -67.5), (5.0, 120.0),
    ])
    def test_nearby_point(self, tilt, azimuth):
        """Test a visible point survives forward then inverse."""
        view = TiltedPerspective(827000.0, 10.0, 20.0, tilt, azimuth)
        x, y = view.forward(12.0, 21.5)
        lon, lat = view.inverse(float(x), float(y))
        assert lon == pytest.approx(12.0, abs=1e-6)
        assert lat == pytest.approx(21.5, abs=1e-6)

    def test_units_are_sphere_radii(self, nadir_view):
        """Test one degree of arc east at the equator is ~1/57 radius."""
        view = TiltedPerspective(827000.0, 0.0, 0.0)
        x, _ = view.forward(1.0, 0.0)
        # Perspective shrinks distances slightly away from nadir
        assert 0.015 < float(x) < np.radians(1.0)

    def test_array_round_trip(self, nadir_view):
        """Test array inputs are accepted in both directions."""
        lons = np.array([9.0, 10.0, 11.0])
        lats = np.array([19.0, 20.0, 21.0])
        x, y = nadir_view.forward(lons, lats)
        back_lon, back_lat = nadir_view.inverse(x, y)
        np.testing.assert_allclose(back_lon, lons, atol=1e-6)
        np.testing.assert_allclose(back_lat, lats, atol=1e-6)


class TestHorizon:
    """Test behaviour beyond the visible disk."""

    def test_forward_antipode_not_finite(self, nadir_view):
        """Test the far side of the Earth has no finite projection."""
        x, y = nadir_view.forward(-170.0, -20.0)
        assert not (np.isfinite(x) and np.isfinite(y))

    def test_scalar_inverse_outside(self, nadir_view):
        """Test scalar inverse outside the disk raises."""
        with pytest.raises(GeolocationError, match="visible disk"):
            nadir_view.inverse(5.0, 0.0)

    def test_array_inverse_outside(self, nadir_view):
        """Test array inverse marks points outside the disk as NaN."""
        lon, lat = nadir_view.inverse(np.array([0.0, 5.0]), np.zeros(2))
        assert np.isfinite(lon[0]) and np.isfinite(lat[0])
        assert np.isnan(lon[1]) and np.isnan(lat[1])


class TestParameters:
    """Test construction parameters."""

    def test_parameters(self):
        """Test parameters are reported in constructor order."""
        view = TiltedPerspective(827000, 10, 20, 1.5, -30)
        assert view.parameters == (827000.0, 10.0, 20.0, 1.5, -30.0)

    def test_non_positive_altitude(self):
        """Test a view point on the surface is rejected."""
        with pytest.raises(GeolocationError, match="above the surface"):
            TiltedPerspective(0.0, 10.0, 20.0)
