"""Tests for tolerant position keys."""

import math

import numpy as np
import pytest

from py_landmass.core.geometry import Point, TolerancePolicy, as_point, jitter, midpoint


class TestTolerancePolicy:
    """Test quantized keys."""

    def test_key_snaps_to_grid(self):
        policy = TolerancePolicy(10.0)
        assert policy.key((14.0, 3.0)) == (1, 0)
        assert policy.key((-14.0, 26.0)) == (-1, 3)

    def test_near_points_are_equal(self):
        """Points inside one grid cell share a key."""
        policy = TolerancePolicy(10.0)
        assert policy.equals((100.0, 100.0), (103.0, 98.0))
        assert hash(policy.key((100.0, 100.0))) == hash(policy.key((103.0, 98.0)))

    def test_corner_policy_is_finer(self):
        centers = TolerancePolicy(10.0)
        corners = TolerancePolicy(0.1)
        assert centers.equals((1.0, 1.0), (1.3, 1.0))
        assert not corners.equals((1.0, 1.0), (1.3, 1.0))
        assert corners.equals((1.0, 1.0), (1.02, 1.01))

    def test_equal_points_have_equal_hashes(self):
        """Equality implies equal hashes for any pair of points."""
        policy = TolerancePolicy(0.1)
        rng = np.random.default_rng(0)
        for _ in range(200):
            a = rng.uniform(-100, 100, 2)
            b = a + rng.uniform(-0.2, 0.2, 2)
            if policy.equals(a, b):
                assert hash(policy.key(a)) == hash(policy.key(b))

    def test_invalid_cell(self):
        with pytest.raises(ValueError):
            TolerancePolicy(0.0)


class TestPoints:
    """Test point helpers."""

    def test_midpoint_is_order_independent(self):
        assert midpoint((0.0, 0.0), (10.0, 4.0)) == midpoint((10.0, 4.0), (0.0, 0.0)) == Point(5.0, 2.0)

    def test_point_arithmetic(self):
        p = Point(1.0, 2.0)
        assert p + (1.0, 1.0) == Point(2.0, 3.0)
        assert p - (1.0, 1.0) == Point(0.0, 1.0)
        assert p.scaled(2) == Point(2.0, 4.0)
        assert p.distance_to((4.0, 6.0)) == pytest.approx(5.0)

    def test_as_point_from_array(self):
        point = as_point(np.array([1.5, 2.5]))
        assert isinstance(point, Point)
        assert point == Point(1.5, 2.5)

    def test_jitter_zero_radius(self):
        assert jitter((3.0, 4.0), 0.0) == Point(3.0, 4.0)

    def test_jitter_length(self):
        rng = np.random.default_rng(42)
        moved = jitter((3.0, 4.0), 5.0, rng)
        assert math.hypot(moved.x - 3.0, moved.y - 4.0) == pytest.approx(5.0)

    def test_jitter_is_seeded(self):
        a = jitter((0.0, 0.0), 5.0, np.random.default_rng(7))
        b = jitter((0.0, 0.0), 5.0, np.random.default_rng(7))
        assert a == b
