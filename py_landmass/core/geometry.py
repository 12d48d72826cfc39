"""Planar points and tolerant position keys.

Positions are deduplicated by snapping them onto a grid sized to the
tolerance of their kind. The snapped integer pair is the registry key, so
two positions are equal exactly when their keys are equal and the hash of
the key is consistent with that equality.
"""

import math
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

import numpy as np

# Grid sizes used when no settings are supplied
SITE_TOLERANCE = 10.0
CENTER_TOLERANCE = 10.0
CORNER_TOLERANCE = 0.1


class Point(NamedTuple):
    """A position on the map plane. Elevation is stored separately."""
    x: float
    y: float

    def __add__(self, other):
        return Point(self.x + other[0], self.y + other[1])

    def __sub__(self, other):
        return Point(self.x - other[0], self.y - other[1])

    def scaled(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def distance_to(self, other) -> float:
        return math.hypot(self.x - other[0], self.y - other[1])


Key = Tuple[int, int]


@dataclass(frozen=True)
class TolerancePolicy:
    """Quantization grid used to build tolerant keys.

    Attributes:
        cell: Grid spacing in map units. Positions inside the same cell
            share a key.
    """
    cell: float

    def __post_init__(self):
        if self.cell <= 0:
            raise ValueError("tolerance cell must be > 0")

    def key(self, point) -> Key:
        return (int(round(point[0] / self.cell)), int(round(point[1] / self.cell)))

    def equals(self, a, b) -> bool:
        return self.key(a) == self.key(b)


def as_point(value) -> Point:
    """Coerce a pair, array or Point into a Point of floats."""
    return Point(float(value[0]), float(value[1]))


def midpoint(a, b) -> Point:
    return Point((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)


def jitter(point, radius: float, rng: Optional[np.random.Generator] = None) -> Point:
    """
    Offset a point by a random planar vector of the given length.

    Args:
        point: Point to move
        radius: Length of the offset, zero leaves the point unchanged
        rng: numpy Generator, a fresh unseeded one is used when omitted

    Returns:
        The offset point
    """
    if radius <= 0:
        return as_point(point)
    rng = rng or np.random.default_rng()
    angle = rng.uniform(0.0, 2.0 * math.pi)
    return Point(point[0] + radius * math.cos(angle), point[1] + radius * math.sin(angle))
