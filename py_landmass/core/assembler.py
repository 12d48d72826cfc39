"""
Adjacency derivation for an edge-populated map.

Given centers, corners and edges already registered in a Map, this module
rebuilds every relation on centers and corners from the edge endpoints
alone:

- Corner.protrudes / Center.borders: edges incident to the node
- Corner.adjacents: the other Voronoi endpoint of each incident edge
- Corner.touches: both Delaunay sides of each incident edge
- Center.neighbours: the other Delaunay side of each border edge
- Center.corners: both Voronoi endpoints of each border edge

Every step is a dict insert per edge per relation, so the pass is linear in
the number of edges and does not depend on edge order.
"""

from typing import List

import structlog

from .errors import GraphConsistencyError
from .graph import Map, Prop

logger = structlog.get_logger()


def link_edges(map_: Map) -> int:
    """
    Register every edge with its endpoint corners and its Delaunay sides.

    Edges missing a Delaunay side are tagged BORDER, together with their
    corners and the side that is present.

    Returns:
        Number of border edges found
    """
    border_edges = 0
    for edge in map_.edges.values():
        for corner in edge.corners():
            corner.protrudes[edge.id] = edge
        for center in edge.centers():
            center.borders[edge.id] = edge

        if edge.delaunay_start is None or edge.delaunay_end is None:
            border_edges += 1
            edge.tag(Prop.BORDER)
            for node in edge.corners() + edge.centers():
                node.tag(Prop.BORDER)
    return border_edges


def derive_corner_relations(map_: Map) -> None:
    for corner in map_.corners.values():
        for edge in corner.protrudes.values():
            other = edge.other_corner(corner)
            if other is not corner:
                corner.adjacents[other.id] = other
            for center in edge.centers():
                corner.touches.setdefault(center.id, center)


def derive_center_relations(map_: Map) -> None:
    for center in map_.centers.values():
        for edge in center.borders.values():
            other = edge.other_center(center)
            if other is not None and other is not center:
                center.neighbours[other.id] = other
            for corner in edge.corners():
                center.corners.setdefault(corner.id, corner)


def assemble_graph(map_: Map) -> Map:
    """Derive all center and corner relations from the map's edges."""
    logger.info("Assembling graph adjacency", **map_.stats())

    border_edges = link_edges(map_)
    derive_corner_relations(map_)
    derive_center_relations(map_)

    logger.info("Graph adjacency assembled", border_edges=border_edges)
    return map_


def validate_graph(map_: Map) -> List[str]:
    """
    Check the structural invariants of an assembled map.

    Returns:
        Human readable description of every violation found, empty when
        the graph is consistent
    """
    errors: List[str] = []

    for key, edge in map_.edges.items():
        if map_.key_of_edge(edge) != key:
            errors.append(f"Edge {edge.id} is registered under a key that does not match its midpoint")
        for corner in edge.corners():
            if corner.protrudes.get(edge.id) is not edge:
                errors.append(f"Edge {edge.id} is missing from protrudes of corner {corner.id}")
            if map_.corners.get(map_.corner_key(corner.point)) is not corner:
                errors.append(f"Edge {edge.id} references unregistered corner {corner.id}")
        for center in edge.centers():
            if center.borders.get(edge.id) is not edge:
                errors.append(f"Edge {edge.id} is missing from borders of center {center.id}")
            if map_.centers.get(map_.center_key(center.point)) is not center:
                errors.append(f"Edge {edge.id} references unregistered center {center.id}")

    for key, corner in map_.corners.items():
        if map_.corner_key(corner.point) != key:
            errors.append(f"Corner {corner.id} is registered under a key that does not match its position")
        for other in corner.adjacents.values():
            if other.adjacents.get(corner.id) is not corner:
                errors.append(f"Corner {corner.id} lists {other.id} as adjacent, but not vice versa")

    for key, center in map_.centers.items():
        if map_.center_key(center.point) != key:
            errors.append(f"Center {center.id} is registered under a key that does not match its position")
        for other in center.neighbours.values():
            if other.neighbours.get(center.id) is not center:
                errors.append(f"Center {center.id} lists {other.id} as neighbour, but not vice versa")

        border_corners = {c.id for e in center.borders.values() for c in e.corners()}
        if border_corners != set(center.corners):
            errors.append(f"Center {center.id} corners do not match the endpoints of its borders")

    return errors


def ensure_consistent(map_: Map) -> None:
    """Raise GraphConsistencyError when validate_graph reports any violation."""
    errors = validate_graph(map_)
    if errors:
        logger.error("Graph consistency check failed", violations=len(errors))
        raise GraphConsistencyError(errors)
