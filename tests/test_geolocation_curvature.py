# -*- coding: utf-8 -*-
"""
Curvature Table Tests - Raw <-> uniform ground-distance pixel mapping.

Tests monotonicity, table sizes, inverse/forward consistency, unmapped
raw pixels, validation, and determinism of ``CurvatureTable``.

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

import math

import pytest
import numpy as np

from leoscan.exceptions import ScanOutOfRangeError, ValidationError
from leoscan.geolocation.leo.curvature import UNMAPPED, CurvatureTable


@pytest.fixture
def table():
    """90-sample instrument, 2200 km swath at 0.87 km resolution."""
    return CurvatureTable.build(90, 2200.0, 17.4 / 20, 827.0)


@pytest.fixture
def coarse_table():
    """Corrected grid much coarser than the raw scan, leaving gaps."""
    return CurvatureTable.build(100, 2200.0, 100.0, 827.0)


# ---------------------------------------------------------------------------
# Table shape tests
# ---------------------------------------------------------------------------

class TestTableShape:
    """Test table sizes and value ranges."""

    def test_corrected_width(self, table):
        """Test corrected width is swath / resolution, rounded."""
        assert table.corrected_width == 2529
        assert table.forward.shape == (2529,)

    def test_inverse_length(self, table):
        """Test inverse table has one entry per raw pixel."""
        assert table.image_width == 90
        assert table.inverse.shape == (90,)

    def test_forward_range(self, table):
        """Test forward positions stay inside the raw scan line."""
        assert table.forward[0] == pytest.approx(0.0, abs=1e-9)
        assert np.all(table.forward >= -1e-9)
        assert np.all(table.forward < 90)

    def test_edge_angle(self, table):
        """Test edge angle lies strictly between 0 and 90 degrees."""
        assert 0 < table.edge_angle < math.pi / 2

    def test_tables_read_only(self, table):
        """Test tables cannot be modified after construction."""
        with pytest.raises(ValueError):
            table.forward[0] = 1.0
        with pytest.raises(ValueError):
            table.inverse[0] = 1


# ---------------------------------------------------------------------------
# Mapping property tests
# ---------------------------------------------------------------------------

class TestMapping:
    """Test forward monotonicity and inverse consistency."""

    @pytest.mark.parametrize("width,swath,res,height", [
        (90, 2200.0, 0.87, 827.0),
        (2048, 2800.0, 1.1, 836.0),
        (98, 2700.0, 30.0, 830.0),
        (56, 1400.0, 5.0, 500.0),
    ])
    def test_forward_monotonic(self, width, swath, res, height):
        """Test forward positions never decrease."""
        table = CurvatureTable.build(width, swath, res, height)
        assert np.all(np.diff(table.forward) >= 0)

    def test_inverse_lands_in_pixel(self, table):
        """Test each mapped raw pixel's corrected sample falls inside it."""
        for pixel in range(table.image_width):
            corrected = table.inverse[pixel]
            if corrected == UNMAPPED:
                continue
            assert int(table.forward[corrected]) == pixel

    def test_inverse_keeps_last_sample(self, table):
        """Test the next corrected sample already lies in a later pixel."""
        for pixel in range(table.image_width):
            corrected = table.inverse[pixel]
            if corrected == UNMAPPED or corrected + 1 >= table.corrected_width:
                continue
            assert int(table.forward[corrected + 1]) > pixel

    def test_forward_then_inverse(self, table):
        """Test inverse of a forward position is at or after the sample."""
        for sample in range(0, table.corrected_width, 97):
            pixel = int(table.forward[sample])
            resolved = table.inverse[pixel]
            assert resolved >= sample
            assert int(table.forward[resolved]) == pixel

    def test_dense_grid_maps_all_pixels(self, table):
        """Test a grid finer than the scan leaves no raw pixel unmapped."""
        assert np.all(table.inverse != UNMAPPED)

    def test_edges_denser_in_corrected_grid(self, table):
        """Test edge raw pixels span more corrected samples than nadir."""
        counts = np.bincount(
            table.forward.astype(int), minlength=table.image_width
        )
        assert counts[0] > counts[45]
        assert counts[-1] > counts[45]


# ---------------------------------------------------------------------------
# corrected_position tests
# ---------------------------------------------------------------------------

class TestCorrectedPosition:
    """Test raw pixel resolution through the inverse table."""

    def test_resolves_mapped_pixel(self, table):
        """Test a mapped pixel resolves to its inverse entry."""
        assert table.corrected_position(45) == int(table.inverse[45])

    def test_nadir_near_centre(self, table):
        """Test the centre raw pixel resolves near the corrected centre."""
        corrected = table.corrected_position(45)
        assert abs(corrected - table.corrected_width / 2) < 60

    def test_out_of_range(self, table):
        """Test pixels outside the raw width raise."""
        with pytest.raises(ScanOutOfRangeError):
            table.corrected_position(90)
        with pytest.raises(ScanOutOfRangeError):
            table.corrected_position(-1)

    def test_unmapped_pixel(self, coarse_table):
        """Test raw pixels without a corrected sample raise."""
        unmapped = np.where(coarse_table.inverse == UNMAPPED)[0]
        assert unmapped.size > 0
        with pytest.raises(ScanOutOfRangeError, match="no curvature"):
            coarse_table.corrected_position(int(unmapped[0]))


# ---------------------------------------------------------------------------
# Validation and determinism tests
# ---------------------------------------------------------------------------

class TestValidation:
    """Test invalid geometry is rejected."""

    def test_zero_width(self):
        """Test zero image width raises ValidationError."""
        with pytest.raises(ValidationError, match="image_width"):
            CurvatureTable.build(0, 2200.0, 1.0, 827.0)

    def test_negative_resolution(self):
        """Test negative resolution raises ValidationError."""
        with pytest.raises(ValidationError):
            CurvatureTable.build(90, 2200.0, -1.0, 827.0)

    def test_zero_height(self):
        """Test non-positive correction height raises ValidationError."""
        with pytest.raises(ValidationError, match="height"):
            CurvatureTable.build(90, 2200.0, 1.0, 0.0)

    def test_validation_error_is_value_error(self):
        """Test ValidationError is catchable as ValueError."""
        with pytest.raises(ValueError):
            CurvatureTable.build(90, 0.0, 1.0, 827.0)


class TestDeterminism:
    """Test identical inputs produce identical tables."""

    def test_bit_identical(self):
        """Test two builds are bit-identical."""
        a = CurvatureTable.build(90, 2200.0, 17.4 / 20, 827.0)
        b = CurvatureTable.build(90, 2200.0, 17.4 / 20, 827.0)
        assert np.array_equal(a.forward, b.forward)
        assert np.array_equal(a.inverse, b.inverse)
        assert a.edge_angle == b.edge_angle
