"""Tests for the hexagonal builder."""

import pytest

from py_landmass.core.graph import Prop
from py_landmass.core.hex_builder import (
    HexBuilder,
    grid_size,
    half_width,
    hex_corners,
    offset_to_pixel,
    row_height,
)


class TestHexGeometry:
    """Test hex layout helpers."""

    def test_half_width(self):
        assert half_width(32.0) == pytest.approx(27.7128, rel=1e-4)
        assert row_height(32.0) == 48.0

    def test_odd_rows_shift(self):
        assert offset_to_pixel(0, 0, 32.0) == (0.0, 0.0)
        assert offset_to_pixel(0, 1, 32.0) == pytest.approx((half_width(32.0), 48.0))
        assert offset_to_pixel(1, 2, 32.0) == pytest.approx((2 * half_width(32.0), 96.0))

    def test_six_corners_at_radius(self):
        center = offset_to_pixel(3, 3, 32.0)
        corners = hex_corners(center, 32.0)
        assert len(corners) == 6
        for corner in corners:
            assert corner.distance_to(center) == pytest.approx(32.0)

    def test_grid_size(self):
        width, height = grid_size(3, 2)
        assert width == pytest.approx(6 * half_width(32.0))
        assert height == pytest.approx(96.0)


class TestHexBuilder:
    """Test map graphs built from hexes."""

    @pytest.mark.parametrize("columns,rows", [(1, 1), (2, 2), (3, 2), (4, 4)])
    def test_center_count(self, make_hex, columns, rows):
        assert len(make_hex(columns, rows).map.centers) == columns * rows

    def test_every_hex_has_six_sides(self, make_hex):
        builder = make_hex(4, 4)
        for center in builder.map.centers.values():
            assert len(center.borders) == 6
            assert len(center.corners) == 6

    def test_interior_hex_has_six_neighbours(self, make_hex):
        builder = make_hex(4, 4)
        interior = builder.map.find_center(offset_to_pixel(1, 1, 32.0))
        assert len(interior.neighbours) == 6
        assert not interior.has(Prop.BORDER)

    def test_single_hex(self, make_hex):
        builder = make_hex(1, 1)
        center = next(iter(builder.map.centers.values()))
        assert center.neighbours == {}
        assert all(e.has(Prop.BORDER) for e in builder.map.edges.values())

    def test_hex_does_not_prune(self):
        assert HexBuilder.prunes_lakes is False

    def test_invalid_radius(self):
        with pytest.raises(ValueError):
            HexBuilder(100.0, 100.0, 1, radius=0.0)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            HexBuilder(0.0, 100.0, 1)
