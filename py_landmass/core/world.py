"""World generation pipeline: build graph, classify land, run mutators."""

import time
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

import structlog

from ..config import Settings, WorldSettings
from .builders import GraphBuilder, GraphMutator, make_builder
from .elevation import assign_elevation
from .graph import Map
from .island_shape import in_land
from .land import ClassificationResult, LandPredicate
from .spatial_index import CenterIndex

logger = structlog.get_logger()

DEFAULT_MUTATORS = (assign_elevation,)


@dataclass
class World:
    """Result of one world build."""
    settings: WorldSettings
    builder: GraphBuilder
    classification: ClassificationResult
    timings: Dict[str, float] = field(default_factory=dict)  # milliseconds per stage

    @property
    def map(self) -> Map:
        return self.builder.map

    @property
    def index(self) -> CenterIndex:
        return self.builder.index


def generate_world(world_settings: Optional[WorldSettings] = None,
                   land: LandPredicate = in_land,
                   mutators: Sequence[GraphMutator] = DEFAULT_MUTATORS) -> World:
    """
    Build a complete world.

    Args:
        world_settings: Build settings, defaults to the environment Settings
        land: Land predicate called once per center
        mutators: Graph mutators run after classification, in order

    Returns:
        World holding the builder, its map and per-stage timings
    """
    if world_settings is None:
        world_settings = WorldSettings.from_settings(Settings())
    builder = make_builder(world_settings)
    timings: Dict[str, float] = {}

    start = time.perf_counter()
    builder.build()
    timings["build"] = (time.perf_counter() - start) * 1000
    logger.info("Build stage finished", builder=builder.name, ms=round(timings["build"], 2))

    start = time.perf_counter()
    classification = builder.post_creation(land, mutators)
    timings["post_creation"] = (time.perf_counter() - start) * 1000
    logger.info("Post creation stage finished", builder=builder.name,
                ms=round(timings["post_creation"], 2), **builder.map.stats())

    return World(world_settings, builder, classification, timings)
