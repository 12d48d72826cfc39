"""
Graph builders.

A builder produces raw dual-graph edges. Everything after that is shared:
the factory deduplicates the endpoints, the assembler derives adjacency and
post_creation classifies land. Variants only differ in raw_edges() and in
whether lakes are pruned.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, NamedTuple, Optional, Sequence

import numpy as np
import structlog

from .assembler import assemble_graph, ensure_consistent
from .factory import SPLIT_JITTER, DataFactory
from .geometry import CENTER_TOLERANCE, CORNER_TOLERANCE
from .graph import Map
from .land import ClassificationResult, LandPredicate, post_creation
from .spatial_index import CenterIndex

logger = structlog.get_logger()

GraphMutator = Callable[[Map, DataFactory], None]


class RawEdge(NamedTuple):
    """One edge from an edge source. Any field may be None."""
    site_a: Optional[Sequence[float]]
    site_b: Optional[Sequence[float]]
    vertex_a: Optional[Sequence[float]]
    vertex_b: Optional[Sequence[float]]


class GraphBuilder(ABC):
    """Base class for edge sources feeding the shared map pipeline."""

    name = "base"
    prunes_lakes = True

    def __init__(self, width: float, height: float, seed: int,
                 center_tolerance: float = CENTER_TOLERANCE,
                 corner_tolerance: float = CORNER_TOLERANCE,
                 split_jitter: float = SPLIT_JITTER):
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = width
        self.height = height
        self.seed = seed
        self.map = Map(center_tolerance, corner_tolerance)
        self.factory = DataFactory(self.map, np.random.default_rng(seed), split_jitter)
        self.index = CenterIndex()
        self.classification: Optional[ClassificationResult] = None

    @abstractmethod
    def raw_edges(self) -> Iterable[RawEdge]:
        """Yield the raw dual-graph edges of this variant."""

    def add_raw_edge(self, raw: RawEdge) -> None:
        """Feed one raw edge through the factory. Edges without both vertices are skipped."""
        if raw.vertex_a is None or raw.vertex_b is None:
            return
        left = self.factory.get_or_create_center(raw.site_a) if raw.site_a is not None else None
        right = self.factory.get_or_create_center(raw.site_b) if raw.site_b is not None else None
        begin = self.factory.get_or_create_corner(raw.vertex_a)
        end = self.factory.get_or_create_corner(raw.vertex_b)
        self.factory.get_or_create_edge(begin, end, left, right)

    def build(self) -> Map:
        """Create every entity from the raw edges and derive adjacency."""
        logger.info("Building map graph", builder=self.name, width=self.width,
                    height=self.height, seed=self.seed)
        for raw in self.raw_edges():
            self.add_raw_edge(raw)
        assemble_graph(self.map)
        ensure_consistent(self.map)
        logger.info("Map graph built", builder=self.name, **self.map.stats())
        return self.map

    def post_creation(self, land: LandPredicate,
                      mutators: Sequence[GraphMutator] = ()) -> ClassificationResult:
        """Classify land and water, then run downstream mutators in order."""
        self.classification = post_creation(
            self.map, self.factory, land, self.width, self.height, self.seed,
            index=self.index, prune=self.prunes_lakes,
        )
        for mutator in mutators:
            mutator(self.map, self.factory)
        return self.classification


def make_builder(world) -> GraphBuilder:
    """
    Build the graph builder selected by a WorldSettings instance.

    Args:
        world: WorldSettings

    Returns:
        VoronoiBuilder or HexBuilder
    """
    from .hex_builder import HexBuilder
    from .voronoi_builder import VoronoiBuilder

    options = dict(
        center_tolerance=world.center_tolerance,
        corner_tolerance=world.corner_tolerance,
        split_jitter=world.split_jitter,
    )
    if world.builder == "voronoi":
        return VoronoiBuilder(world.width, world.height, world.site_count, world.seed,
                              smoothing=world.smoothing, **options)
    if world.builder == "hex":
        return HexBuilder(world.width, world.height, world.seed,
                          radius=world.hex_radius, **options)
    raise ValueError(f"Unknown builder: {world.builder!r}")
