"""
Coast-distance elevation.

Corners are raised by their distance, in corner hops, from the nearest
coastal corner. Heights are normalised to [0, 1] and every center takes
the mean height of its corners.
"""

from collections import deque
from typing import Dict

import structlog

from .factory import DataFactory
from .graph import Map, Prop

logger = structlog.get_logger()

COAST = Prop.SHORE | Prop.WATER | Prop.BORDER


def corner_distances(map_: Map) -> Dict[int, int]:
    """Breadth-first hop count from coastal corners across registered corners."""
    registered = {corner.id: corner for corner in map_.corners.values()}
    distance: Dict[int, int] = {}
    queue = deque()

    for corner in registered.values():
        if corner.props & COAST:
            distance[corner.id] = 0
            queue.append(corner)

    while queue:
        corner = queue.popleft()
        for neighbour in corner.adjacents.values():
            if neighbour.id not in registered or neighbour.id in distance:
                continue
            distance[neighbour.id] = distance[corner.id] + 1
            queue.append(neighbour)

    return distance


def assign_elevation(map_: Map, factory: DataFactory = None) -> None:
    """
    Set corner and center elevations in place.

    Corners that cannot reach the coast get the highest elevation. Water
    corners stay at 0.
    """
    distance = corner_distances(map_)
    highest = max(distance.values(), default=0)

    for corner in map_.corners.values():
        if corner.has(Prop.WATER):
            corner.elevation = 0.0
            continue
        hops = distance.get(corner.id, highest)
        corner.elevation = hops / highest if highest else 0.0

    for center in map_.centers.values():
        corners = list(center.corners.values())
        if corners:
            center.elevation = sum(c.elevation for c in corners) / len(corners)
        else:
            center.elevation = 0.0

    logger.info("Elevation assigned", max_hops=highest, corners=len(map_.corners))
