"""Radial island shape used as the default land predicate."""

import math
from functools import lru_cache
from typing import NamedTuple

import numpy as np

ISLAND_FACTOR = 1.0


class IslandShape(NamedTuple):
    """Random parameters of one island outline."""
    bumps: int
    start_angle: float
    dip_angle: float
    dip_width: float


@lru_cache(maxsize=32)
def island_shape(seed: int) -> IslandShape:
    """Draw the outline parameters for a seed. Same seed, same island."""
    rng = np.random.default_rng(seed)
    bumps = int(rng.integers(1, 6))
    start_angle = rng.uniform(0.0, 1.0) * 2 * math.pi
    dip_angle = rng.uniform(0.0, 1.0) * 2 * math.pi
    dip_width = rng.uniform(2.0, 7.0) / 10
    return IslandShape(bumps, start_angle, dip_angle, dip_width)


def is_land_shape(x: float, y: float, seed: int) -> bool:
    """
    Test a point in [-1, 1] x [-1, 1] against the island outline.

    The outline is two wobbly radii r1 < r2 around the origin. Points inside
    r1 are land, as are points between r1 and r2. Inside the dip sector both
    radii collapse to 0.2, which cuts a bay into the island.
    """
    shape = island_shape(seed)
    angle = math.atan2(y, x)
    length = 0.5 * (max(abs(x), abs(y)) + math.hypot(x, y))

    phase = shape.start_angle + shape.bumps * angle
    r1 = 0.5 + 0.40 * math.sin(phase + math.cos((shape.bumps + 3) * angle))
    r2 = 0.7 - 0.20 * math.sin(phase - math.sin((shape.bumps + 2) * angle))

    delta = angle - shape.dip_angle
    if (abs(delta) < shape.dip_width
            or abs(delta + 2 * math.pi) < shape.dip_width
            or abs(delta - 2 * math.pi) < shape.dip_width):
        r1 = r2 = 0.2

    return length < r1 or (r1 * ISLAND_FACTOR < length < r2)


def in_land(position, width: float, height: float, seed: int) -> bool:
    """Land predicate for a map of the given size: normalises position and tests the island shape."""
    x = 2 * (position[0] / width - 0.5)
    y = 2 * (position[1] / height - 0.5)
    return is_land_shape(x, y, seed)
