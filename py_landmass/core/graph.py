"""Dual graph data structures.

A Map owns three registries keyed by tolerant position keys:

- centers: Voronoi cells (Delaunay vertices)
- corners: Voronoi vertices (Delaunay triangle circumcenters)
- edges: one Voronoi segment paired with its Delaunay segment, keyed by
  the midpoint of the Voronoi segment

Relations between entities are plain dicts from entity id to entity. They
are back references only; an entity exists in the map while its registry
holds it.
"""

import enum
import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from .geometry import (
    CENTER_TOLERANCE,
    CORNER_TOLERANCE,
    Key,
    Point,
    TolerancePolicy,
    midpoint,
)


class Prop(enum.Flag):
    """Tag bits carried by centers, corners and edges."""
    NONE = 0
    LAND = enum.auto()
    WATER = enum.auto()
    SHORE = enum.auto()
    BORDER = enum.auto()  # touches the map boundary


def _tag(entity, prop: Prop) -> None:
    entity.props |= prop


def _untag(entity, prop: Prop) -> None:
    entity.props &= ~prop


@dataclass(eq=False)
class Center:
    """A Voronoi cell: one region of the map."""
    id: int
    point: Point
    props: Prop = Prop.WATER
    elevation: float = 0.0
    corners: Dict[int, "Corner"] = field(default_factory=dict)
    borders: Dict[int, "Edge"] = field(default_factory=dict)
    neighbours: Dict[int, "Center"] = field(default_factory=dict)

    def has(self, prop: Prop) -> bool:
        return bool(self.props & prop)

    def tag(self, prop: Prop) -> None:
        _tag(self, prop)

    def untag(self, prop: Prop) -> None:
        _untag(self, prop)

    def __repr__(self):
        return f"Center(id={self.id}, point=({self.point.x:.2f}, {self.point.y:.2f}), props={self.props})"


@dataclass(eq=False)
class Corner:
    """A Voronoi vertex where three or more cells meet."""
    id: int
    point: Point
    props: Prop = Prop.WATER
    elevation: float = 0.0
    protrudes: Dict[int, "Edge"] = field(default_factory=dict)
    touches: Dict[int, Center] = field(default_factory=dict)
    adjacents: Dict[int, "Corner"] = field(default_factory=dict)

    def has(self, prop: Prop) -> bool:
        return bool(self.props & prop)

    def tag(self, prop: Prop) -> None:
        _tag(self, prop)

    def untag(self, prop: Prop) -> None:
        _untag(self, prop)

    def __repr__(self):
        return f"Corner(id={self.id}, point=({self.point.x:.2f}, {self.point.y:.2f}), props={self.props})"


@dataclass(eq=False)
class Edge:
    """
    A Voronoi segment between two corners paired with the Delaunay segment
    between the two cells it separates.

    Either Delaunay side may be None for edges on the map boundary.
    """
    id: int
    voronoi_start: Corner
    voronoi_end: Corner
    delaunay_start: Optional[Center] = None
    delaunay_end: Optional[Center] = None
    props: Prop = Prop.WATER

    @property
    def midpoint(self) -> Point:
        return midpoint(self.voronoi_start.point, self.voronoi_end.point)

    def has(self, prop: Prop) -> bool:
        return bool(self.props & prop)

    def tag(self, prop: Prop) -> None:
        _tag(self, prop)

    def untag(self, prop: Prop) -> None:
        _untag(self, prop)

    def corners(self) -> List[Corner]:
        return [self.voronoi_start, self.voronoi_end]

    def centers(self) -> List[Center]:
        """Present Delaunay sides, in start/end order."""
        return [c for c in (self.delaunay_start, self.delaunay_end) if c is not None]

    def other_corner(self, corner: Corner) -> Corner:
        return self.voronoi_end if self.voronoi_start is corner else self.voronoi_start

    def other_center(self, center: Center) -> Optional[Center]:
        if self.delaunay_start is center:
            return self.delaunay_end
        if self.delaunay_end is center:
            return self.delaunay_start
        return None

    def separates(self, center: Center) -> bool:
        return self.delaunay_start is center or self.delaunay_end is center

    def is_shore(self) -> bool:
        """True when both sides are present and exactly one of them is land."""
        if self.delaunay_start is None or self.delaunay_end is None:
            return False
        return self.delaunay_start.has(Prop.LAND) != self.delaunay_end.has(Prop.LAND)

    def __repr__(self):
        m = self.midpoint
        return f"Edge(id={self.id}, midpoint=({m.x:.2f}, {m.y:.2f}), props={self.props})"


class Map:
    """Owning container for every center, corner and edge of one build."""

    def __init__(self, center_tolerance: float = CENTER_TOLERANCE,
                 corner_tolerance: float = CORNER_TOLERANCE):
        self.center_policy = TolerancePolicy(center_tolerance)
        self.corner_policy = TolerancePolicy(corner_tolerance)
        # edges are keyed by their midpoint at corner precision
        self.edge_policy = self.corner_policy

        self.centers: Dict[Key, Center] = {}
        self.corners: Dict[Key, Corner] = {}
        self.edges: Dict[Key, Edge] = {}
        self.shoreline: List[Edge] = []

        self._ids = itertools.count()

    def next_id(self) -> int:
        return next(self._ids)

    def center_key(self, point) -> Key:
        return self.center_policy.key(point)

    def corner_key(self, point) -> Key:
        return self.corner_policy.key(point)

    def edge_key(self, a, b) -> Key:
        return self.edge_policy.key(midpoint(a, b))

    def key_of_edge(self, edge: Edge) -> Key:
        return self.edge_policy.key(edge.midpoint)

    def find_center(self, point) -> Optional[Center]:
        return self.centers.get(self.center_key(point))

    def find_corner(self, point) -> Optional[Corner]:
        return self.corners.get(self.corner_key(point))

    def find_edge(self, a, b) -> Optional[Edge]:
        return self.edges.get(self.edge_key(a, b))

    def iter_centers(self, prop: Optional[Prop] = None) -> Iterator[Center]:
        for center in list(self.centers.values()):
            if prop is None or center.has(prop):
                yield center

    def stats(self) -> Dict[str, int]:
        return {
            "centers": len(self.centers),
            "corners": len(self.corners),
            "edges": len(self.edges),
            "shoreline": len(self.shoreline),
        }

    def __repr__(self):
        s = self.stats()
        return (f"Map(centers={s['centers']}, corners={s['corners']}, "
                f"edges={s['edges']}, shoreline={s['shoreline']})")
