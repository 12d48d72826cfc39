"""Tests for the center nearest-neighbour index."""

import pytest

from py_landmass.core.graph import Center
from py_landmass.core.geometry import Point
from py_landmass.core.spatial_index import CenterIndex


@pytest.fixture
def index():
    index = CenterIndex()
    for i, (x, y) in enumerate([(0.0, 0.0), (10.0, 0.0), (0.0, 10.0), (50.0, 50.0)]):
        index.add_point((x, y), Center(id=i, point=Point(x, y)))
    return index


class TestCenterIndex:
    """Test add_point / nearest_neighbors."""

    def test_nearest(self, index):
        assert index.nearest_neighbors((9.0, 1.0), 1)[0].id == 1

    def test_ordered_by_distance(self, index):
        found = index.nearest_neighbors((45.0, 45.0), 3)
        assert [c.id for c in found][0] == 3
        assert len(found) == 3

    def test_k_larger_than_index(self, index):
        assert len(index.nearest_neighbors((0.0, 0.0), 10)) == 4

    def test_empty_index(self):
        assert CenterIndex().nearest_neighbors((0.0, 0.0), 2) == []

    def test_invalid_k(self, index):
        with pytest.raises(ValueError):
            index.nearest_neighbors((0.0, 0.0), 0)

    def test_add_after_query(self, index):
        index.nearest_neighbors((0.0, 0.0), 1)
        index.add_point((100.0, 100.0), Center(id=9, point=Point(100.0, 100.0)))
        assert index.nearest_neighbors((99.0, 99.0), 1)[0].id == 9
