"""Tests for giving a center a private copy of a shared corner."""

import pytest

from py_landmass.core.errors import PreconditionViolation
from py_landmass.core.hex_builder import half_width

HW = half_width(32.0)


@pytest.fixture
def split_setup(hex_2x2):
    map_ = hex_2x2.map
    center = map_.find_center((0.0, 0.0))
    corner = map_.find_corner((HW, 16.0))
    others = [c for c in map_.centers.values() if c is not center]
    before = {c.id: set(c.corners) for c in others}
    new_corner = hex_2x2.factory.split_corner_for_center(
        (HW, 19.0), corner, center, jitter_radius=0.0)
    return dict(map=map_, factory=hex_2x2.factory, center=center, corner=corner,
                new_corner=new_corner, others=others, before=before)


class TestSplitCorner:
    """Test split_corner_for_center."""

    def test_shared_corner_touches_three_hexes(self, hex_2x2):
        corner = hex_2x2.map.find_corner((HW, 16.0))
        assert len(corner.touches) == 3

    def test_center_uses_new_corner(self, split_setup):
        center = split_setup["center"]
        assert split_setup["corner"].id not in center.corners
        assert center.corners[split_setup["new_corner"].id] is split_setup["new_corner"]
        assert len(center.corners) == 6

    def test_new_corner_position(self, split_setup):
        assert split_setup["new_corner"].point == pytest.approx((HW, 19.0))
        assert split_setup["map"].find_corner((HW, 19.0)) is split_setup["new_corner"]

    def test_new_corner_touches_center(self, split_setup):
        new_corner = split_setup["new_corner"]
        assert set(new_corner.touches) == {split_setup["center"].id}
        assert split_setup["center"].id not in split_setup["corner"].touches

    def test_other_centers_unchanged(self, split_setup):
        for other in split_setup["others"]:
            assert set(other.corners) == split_setup["before"][other.id]
        holders = [o for o in split_setup["others"] if split_setup["corner"].id in o.corners]
        assert len(holders) == 2

    def test_borders_rerouted(self, split_setup):
        center, new_corner = split_setup["center"], split_setup["new_corner"]
        assert len(center.borders) == 6
        endpoints = {c.id for e in center.borders.values() for c in e.corners()}
        assert endpoints == set(center.corners)
        assert len(new_corner.protrudes) == 2
        for edge in new_corner.protrudes.values():
            assert center.borders[edge.id] is edge
            assert edge.other_corner(new_corner).protrudes[edge.id] is edge

    def test_adjacency_rerouted(self, split_setup):
        corner, new_corner = split_setup["corner"], split_setup["new_corner"]
        center = split_setup["center"]
        assert len(new_corner.adjacents) == 2
        for adjacent in new_corner.adjacents.values():
            assert adjacent.adjacents[new_corner.id] is new_corner
            assert center.id in adjacent.touches
            assert corner.id not in adjacent.adjacents
        assert all(center.id not in c.touches for c in corner.adjacents.values())

    def test_far_side_adjacency_kept(self, split_setup):
        map_, corner = split_setup["map"], split_setup["corner"]
        far_side = map_.find_corner((2 * HW, 32.0))
        assert split_setup["center"].id not in far_side.touches
        assert corner.adjacents == {far_side.id: far_side}
        assert far_side.adjacents[corner.id] is corner
        assert split_setup["new_corner"].id not in far_side.adjacents

    def test_far_side_edge_still_ends_at_corner(self, split_setup):
        corner = split_setup["corner"]
        far_side = split_setup["map"].find_corner((2 * HW, 32.0))
        shared = [e for e in corner.protrudes.values() if e.other_corner(corner) is far_side]
        assert len(shared) == 1
        assert set(corner.touches) == {c.id for c in shared[0].centers()}

    def test_corner_not_in_center(self, hex_2x2):
        map_ = hex_2x2.map
        center = map_.find_center((0.0, 0.0))
        far_corner = map_.find_corner((2 * HW, 32.0))
        with pytest.raises(PreconditionViolation):
            hex_2x2.factory.split_corner_for_center((2 * HW, 35.0), far_corner, center,
                                                    jitter_radius=0.0)

    def test_split_onto_same_corner(self, hex_2x2):
        map_ = hex_2x2.map
        center = map_.find_center((0.0, 0.0))
        corner = map_.find_corner((HW, 16.0))
        with pytest.raises(PreconditionViolation):
            hex_2x2.factory.split_corner_for_center(corner.point, corner, center,
                                                    jitter_radius=0.0)
        assert corner.id in center.corners

    def test_default_jitter(self, hex_2x2):
        map_ = hex_2x2.map
        center = map_.find_center((0.0, 0.0))
        corner = map_.find_corner((HW, 16.0))
        new_corner = hex_2x2.factory.split_corner_for_center(corner.point, corner, center)
        assert new_corner.point.distance_to(corner.point) == pytest.approx(5.0)
