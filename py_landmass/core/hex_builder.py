"""Regular hexagonal map graph (pointy-top hexes in odd-row offset layout)."""

import math
from typing import Iterator, List, Tuple

import structlog

from .builders import GraphBuilder, RawEdge
from .geometry import Point

logger = structlog.get_logger()

HEX_RADIUS = 32.0


def half_width(radius: float) -> float:
    return math.sqrt(radius * radius - (radius / 2) * (radius / 2))


def hex_width(radius: float) -> float:
    return 2 * half_width(radius)


def row_height(radius: float) -> float:
    return 1.5 * radius


def grid_size(columns: int, rows: int, radius: float = HEX_RADIUS) -> Tuple[float, float]:
    """Map width and height that hold exactly columns x rows hexes."""
    return columns * hex_width(radius), rows * row_height(radius)


def offset_to_pixel(column: int, row: int, radius: float) -> Point:
    """Center of the hex at an odd-row offset coordinate. Odd rows shift right by half a hex."""
    x = column * hex_width(radius) + (half_width(radius) if row % 2 else 0.0)
    return Point(x, row * row_height(radius))


def hex_corners(center: Point, radius: float) -> List[Point]:
    """Six corners clockwise from the top, in map coordinates."""
    hw = half_width(radius)
    offsets = [
        (0.0, -radius),
        (hw, -radius / 2),
        (hw, radius / 2),
        (0.0, radius),
        (-hw, radius / 2),
        (-hw, -radius / 2),
    ]
    return [center + offset for offset in offsets]


class HexBuilder(GraphBuilder):
    """
    Builds a map of regular hexes covering width x height.

    Lakes are never pruned on hex maps so the grid stays regular.
    """

    name = "hex"
    prunes_lakes = False

    def __init__(self, width: float, height: float, seed: int,
                 radius: float = HEX_RADIUS, **options):
        super().__init__(width, height, seed, **options)
        if radius <= 0:
            raise ValueError("radius must be > 0")
        self.radius = radius

    def hex_coordinates(self) -> Iterator[Tuple[int, int]]:
        # widths from grid_size() divide back to a whole count up to rounding error
        columns = self.width / hex_width(self.radius) - 1e-9
        rows = self.height / row_height(self.radius) - 1e-9
        column = 0
        while column < columns:
            row = 0
            while row < rows:
                yield column, row
                row += 1
            column += 1

    def raw_edges(self) -> Iterator[RawEdge]:
        for column, row in self.hex_coordinates():
            center = offset_to_pixel(column, row, self.radius)
            corners = hex_corners(center, self.radius)
            for i, corner in enumerate(corners):
                yield RawEdge(None, center, corner, corners[(i + 1) % 6])

    def add_raw_edge(self, raw: RawEdge) -> None:
        """
        Add one hex side. A side already created by the neighbouring hex is
        shared: this hex takes its open Delaunay side.
        """
        center = self.factory.get_or_create_center(raw.site_b)
        begin = self.factory.get_or_create_corner(raw.vertex_a)
        end = self.factory.get_or_create_corner(raw.vertex_b)
        edge = self.factory.get_or_create_edge(begin, end, None, center)
        if edge.delaunay_end is not center and edge.delaunay_start is None:
            edge.delaunay_start = center
