# -*- coding: utf-8 -*-
"""
Geolocation Base Tests - Input dispatch and footprint helpers.

Tests the scalar, array and (2,N) dispatch of ``Geolocation`` with a minimal
grid subclass, and footprint/bounds derivation including NaN filtering.

Dependencies
------------
pytest

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

from leoscan.geolocation.base import Geolocation
from leoscan.geolocation.utils import (
    bounds_from_corners,
    calculate_footprint,
    sample_image_perimeter,
)


class GridGeolocation(Geolocation):
    """0.1 degree/pixel grid, optionally blind outside a column range."""

    def __init__(self, shape, visible_cols=None):
        super().__init__(shape)
        self.visible_cols = visible_cols

    def _image_to_latlon_array(self, rows, cols, height=0.0):
        lats = 10.0 - rows * 0.1
        lons = 20.0 + cols * 0.1
        if self.visible_cols is not None:
            lo, hi = self.visible_cols
            blind = (cols < lo) | (cols > hi)
            lats = np.where(blind, np.nan, lats)
            lons = np.where(blind, np.nan, lons)
        return lats, lons, np.full_like(lats, height)


@pytest.fixture
def geo():
    return GridGeolocation((100, 90))


# ---------------------------------------------------------------------------
# Dispatch tests
# ---------------------------------------------------------------------------

class TestDispatch:
    """Test ``image_to_latlon`` input forms."""

    def test_scalar(self, geo):
        lat, lon, height = geo.image_to_latlon(10, 5)
        assert isinstance(lat, float)
        assert lat == pytest.approx(9.0)
        assert lon == pytest.approx(20.5)
        assert height == 0.0

    def test_numpy_scalar(self, geo):
        lat, lon, _ = geo.image_to_latlon(np.int64(10), np.float32(5))
        assert lat == pytest.approx(9.0)
        assert lon == pytest.approx(20.5)

    def test_lists(self, geo):
        lats, lons, heights = geo.image_to_latlon([0, 10], [0, 10])
        np.testing.assert_allclose(lats, [10.0, 9.0])
        np.testing.assert_allclose(lons, [20.0, 21.0])
        assert heights.shape == (2,)

    def test_stacked(self, geo):
        result = geo.image_to_latlon(np.array([[0, 10], [0, 10]]))
        assert result.shape == (3, 2)
        np.testing.assert_allclose(result[0], [10.0, 9.0])

    def test_bad_stacked_shape(self, geo):
        with pytest.raises(ValueError, match=r"\(2, N\)"):
            geo.image_to_latlon(np.zeros((3, 4)))

    def test_height_passthrough(self, geo):
        _, _, height = geo.image_to_latlon(1, 1, height=250.0)
        assert height == 250.0

    def test_crs_default(self, geo):
        assert geo.crs == 'WGS84'
        assert geo.shape == (100, 90)


# ---------------------------------------------------------------------------
# Footprint tests
# ---------------------------------------------------------------------------

class TestFootprint:
    """Test footprint and bounds derivation."""

    def test_bounds(self, geo):
        min_lon, min_lat, max_lon, max_lat = geo.get_bounds()
        assert min_lon == pytest.approx(20.0)
        assert max_lon == pytest.approx(28.9)
        assert min_lat == pytest.approx(0.1)
        assert max_lat == pytest.approx(10.0)

    def test_footprint_polygon(self, geo):
        footprint = geo.get_footprint()
        assert footprint['type'] == 'Polygon'
        assert len(footprint['coordinates']) == 40

    def test_nan_samples_dropped(self):
        """Test blind perimeter samples are excluded from the polygon."""
        geo = GridGeolocation((100, 90), visible_cols=(10, 80))
        footprint = geo.get_footprint()
        assert footprint['type'] == 'Polygon'
        assert len(footprint['coordinates']) < 40
        min_lon, _, max_lon, _ = footprint['bounds']
        assert min_lon >= 21.0
        assert max_lon <= 28.0

    def test_no_coverage(self):
        """Test imagery with nothing geolocatable has no bounds."""
        geo = GridGeolocation((100, 90), visible_cols=(200, 300))
        assert geo.get_footprint()['type'] == 'None'
        with pytest.raises(NotImplementedError):
            geo.get_bounds()


# ---------------------------------------------------------------------------
# Utility tests
# ---------------------------------------------------------------------------

class TestUtils:
    """Test footprint helpers."""

    def test_perimeter_samples(self):
        rows, cols = sample_image_perimeter((100, 90), samples_per_edge=5)
        assert rows.shape == (20,)
        assert rows.min() == 0 and rows.max() == 99
        assert cols.min() == 0 and cols.max() == 89

    def test_footprint_too_few_points(self):
        assert calculate_footprint([(0.0, 0.0), (1.0, 1.0)])['bounds'] is None

    def test_bounds_from_corners(self):
        bounds = bounds_from_corners([(1.0, 5.0), (-2.0, 3.0), (4.0, -1.0)])
        assert bounds == (-2.0, -1.0, 4.0, 5.0)

    def test_bounds_empty(self):
        with pytest.raises(ValueError):
            bounds_from_corners([])

