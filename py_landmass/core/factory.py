"""Get-or-create registries for centers, corners and edges."""

from typing import Optional

import numpy as np
import structlog

from .errors import PreconditionViolation
from .geometry import as_point, jitter
from .graph import Center, Corner, Edge, Map

logger = structlog.get_logger()

# Offset applied to a corner copied by split_corner_for_center
SPLIT_JITTER = 5.0


class DataFactory:
    """
    Creates map entities, deduplicating them by tolerant position key.

    A request for a position that already has an entity returns that
    entity. Nothing else about the existing entity is changed.
    """

    def __init__(self, map_: Map, rng: Optional[np.random.Generator] = None,
                 split_jitter: float = SPLIT_JITTER):
        """
        Args:
            map_: Map whose registries receive the entities
            rng: Generator used to jitter split corners
            split_jitter: Default offset length for split corners
        """
        self.map = map_
        self.rng = rng if rng is not None else np.random.default_rng()
        self.split_jitter = split_jitter

    def get_or_create_center(self, position) -> Center:
        key = self.map.center_key(position)
        center = self.map.centers.get(key)
        if center is None:
            center = Center(id=self.map.next_id(), point=as_point(position))
            self.map.centers[key] = center
            logger.debug("Created center", center=center.id, x=center.point.x, y=center.point.y)
        return center

    def get_or_create_corner(self, position) -> Corner:
        key = self.map.corner_key(position)
        corner = self.map.corners.get(key)
        if corner is None:
            corner = Corner(id=self.map.next_id(), point=as_point(position))
            self.map.corners[key] = corner
            logger.debug("Created corner", corner=corner.id, x=corner.point.x, y=corner.point.y)
        return corner

    def get_or_create_edge(self, begin: Corner, end: Corner,
                           left: Optional[Center] = None,
                           right: Optional[Center] = None) -> Edge:
        """
        Return the edge whose Voronoi midpoint matches begin/end.

        The midpoint does not depend on the order of begin and end. An
        existing edge keeps its endpoints and sides; the arguments are only
        used when the edge is new.
        """
        key = self.map.edge_key(begin.point, end.point)
        edge = self.map.edges.get(key)
        if edge is None:
            edge = Edge(
                id=self.map.next_id(),
                voronoi_start=begin,
                voronoi_end=end,
                delaunay_start=left,
                delaunay_end=right,
            )
            self.map.edges[key] = edge
            logger.debug("Created edge", edge=edge.id, begin=begin.id, end=end.id)
        return edge

    def remove_edge(self, edge: Edge) -> None:
        """Drop an edge from the registry. References held by other entities are left alone."""
        key = self.map.key_of_edge(edge)
        if self.map.edges.get(key) is edge:
            del self.map.edges[key]

    def remove_corner(self, corner: Corner) -> None:
        """Drop a corner from the registry. References held by other entities are left alone."""
        key = self.map.corner_key(corner.point)
        if self.map.corners.get(key) is corner:
            del self.map.corners[key]

    def remove_center(self, center: Center) -> None:
        key = self.map.center_key(center.point)
        if self.map.centers.get(key) is center:
            del self.map.centers[key]

    def split_corner_for_center(self, position, corner: Corner, center: Center,
                                jitter_radius: Optional[float] = None) -> Corner:
        """
        Give a center its own copy of a corner it shares with other centers.

        The copy is placed at position offset by a random vector of length
        jitter_radius. Corner adjacency on the center's side is rerouted
        through the copy, every border edge of the center that ends at the
        corner is replaced by an edge ending at the copy, and the copy takes
        the corner's place in center.corners. Other centers touching the
        original corner keep it.

        Args:
            position: Base position of the new corner
            corner: Corner currently shared by center and its neighbours
            center: Center that receives the private copy
            jitter_radius: Offset length, defaults to the factory's split_jitter

        Returns:
            The new corner

        Raises:
            PreconditionViolation: corner does not belong to center, or the
                new position resolves to the same corner
        """
        if center.corners.get(corner.id) is not corner:
            raise PreconditionViolation(
                f"Corner {corner.id} is not a corner of center {center.id}"
            )

        radius = self.split_jitter if jitter_radius is None else jitter_radius
        new_corner = self.get_or_create_corner(jitter(position, radius, self.rng))
        if new_corner is corner:
            raise PreconditionViolation(
                f"Split position for corner {corner.id} resolves to the corner itself"
            )
        if not new_corner.touches:
            new_corner.props = corner.props
            new_corner.elevation = corner.elevation
        new_corner.touches[center.id] = center

        for adjacent in list(corner.adjacents.values()):
            if center.id not in adjacent.touches:
                continue
            adjacent.adjacents.pop(corner.id, None)
            corner.adjacents.pop(adjacent.id, None)
            new_corner.adjacents[adjacent.id] = adjacent
            adjacent.adjacents[new_corner.id] = new_corner

        for border in [e for e in corner.protrudes.values() if e.separates(center)]:
            center.borders.pop(border.id, None)

            if border.voronoi_start is corner:
                replacement = self.get_or_create_edge(
                    new_corner, border.voronoi_end, border.delaunay_start, border.delaunay_end)
            else:
                replacement = self.get_or_create_edge(
                    border.voronoi_start, new_corner, border.delaunay_start, border.delaunay_end)
            replacement.props = border.props

            new_corner.protrudes[replacement.id] = replacement
            replacement.other_corner(new_corner).protrudes[replacement.id] = replacement
            center.borders[replacement.id] = replacement

        del center.corners[corner.id]
        center.corners[new_corner.id] = new_corner
        corner.touches.pop(center.id, None)

        logger.debug("Split corner", corner=corner.id, new_corner=new_corner.id, center=center.id)
        return new_corner
