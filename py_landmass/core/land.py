"""
Land/water classification, lake pruning and shoreline detection.

This module handles:
- Tagging centers land or water from an external predicate
- Spreading land tags to the corners and borders of land centers
- Removing interior water topology
- Collecting shoreline edges
"""

from dataclasses import dataclass
from typing import Callable, Optional

import structlog

from .factory import DataFactory
from .geometry import Point
from .graph import Map, Prop
from .spatial_index import CenterIndex

logger = structlog.get_logger()

LandPredicate = Callable[[Point, float, float, int], bool]


@dataclass
class ClassificationResult:
    """Counts gathered while classifying a map."""
    land_centers: int = 0
    water_centers: int = 0
    pruned_centers: int = 0
    pruned_corners: int = 0
    pruned_edges: int = 0
    shoreline_edges: int = 0
    skipped_edges: int = 0


def classify_land(map_: Map, land: LandPredicate, width: float, height: float, seed: int,
                  index: Optional[CenterIndex] = None,
                  result: Optional[ClassificationResult] = None) -> ClassificationResult:
    """
    Tag every center land or water.

    The predicate is called once per center. A land center passes the LAND
    tag to all of its corners and border edges, so a corner shared with any
    land center ends up land whatever the visiting order. Land centers are
    added to index when one is given.
    """
    result = result or ClassificationResult()

    for center in map_.iter_centers():
        if land(center.point, width, height, seed):
            nodes = [center] + list(center.corners.values()) + list(center.borders.values())
            for node in nodes:
                node.tag(Prop.LAND)
                node.untag(Prop.WATER)
            if index is not None:
                index.add_point(center.point, center)
            result.land_centers += 1
        else:
            center.tag(Prop.WATER)
            result.water_centers += 1

    logger.info("Land classified", land=result.land_centers, water=result.water_centers)
    return result


def prune_lakes(map_: Map, factory: DataFactory,
                result: Optional[ClassificationResult] = None) -> ClassificationResult:
    """
    Remove water centers and the water topology inside them.

    For each water center, border edges whose corners are both water and
    corners that are water are dropped from their registries, then the
    center itself is dropped. Edges and corners with at least one land end
    stay for the shoreline.
    """
    result = result or ClassificationResult()

    for center in list(map_.iter_centers(Prop.WATER)):
        for edge in list(center.borders.values()):
            if edge.voronoi_start.has(Prop.WATER) and edge.voronoi_end.has(Prop.WATER):
                if map_.edges.get(map_.key_of_edge(edge)) is edge:
                    result.pruned_edges += 1
                factory.remove_edge(edge)
        for corner in list(center.corners.values()):
            if corner.has(Prop.WATER):
                if map_.corners.get(map_.corner_key(corner.point)) is corner:
                    result.pruned_corners += 1
                factory.remove_corner(corner)
        factory.remove_center(center)
        result.pruned_centers += 1

    logger.info("Lakes pruned", centers=result.pruned_centers,
                corners=result.pruned_corners, edges=result.pruned_edges)
    return result


def detect_shoreline(map_: Map, result: Optional[ClassificationResult] = None) -> ClassificationResult:
    """
    Collect edges separating a land center from a water center.

    Shoreline edges are appended to map_.shoreline once and tag themselves,
    their corners and both centers SHORE. Edges missing a Delaunay side are
    never shoreline and are skipped.
    """
    result = result or ClassificationResult()
    seen = {edge.id for edge in map_.shoreline}

    for edge in map_.edges.values():
        if edge.delaunay_start is None or edge.delaunay_end is None:
            result.skipped_edges += 1
            continue
        if not edge.is_shore():
            continue
        for node in [edge] + edge.corners() + edge.centers():
            node.tag(Prop.SHORE)
        if edge.id not in seen:
            seen.add(edge.id)
            map_.shoreline.append(edge)
            result.shoreline_edges += 1

    if result.skipped_edges:
        logger.debug("Edges without both sides skipped", count=result.skipped_edges)
    logger.info("Shoreline detected", edges=result.shoreline_edges)
    return result


def post_creation(map_: Map, factory: DataFactory, land: LandPredicate,
                  width: float, height: float, seed: int,
                  index: Optional[CenterIndex] = None,
                  prune: bool = True) -> ClassificationResult:
    """Classify land, optionally prune lakes, then detect the shoreline."""
    result = classify_land(map_, land, width, height, seed, index=index)
    if prune:
        prune_lakes(map_, factory, result)
    detect_shoreline(map_, result)
    return result
