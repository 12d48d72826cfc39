"""
Core map graph functionality.
"""

from .geometry import Point, TolerancePolicy
from .graph import Center, Corner, Edge, Map, Prop
from .errors import MapGraphError, PreconditionViolation, GraphConsistencyError
from .factory import DataFactory
from .assembler import assemble_graph, validate_graph, ensure_consistent
from .spatial_index import CenterIndex
from .land import ClassificationResult, classify_land, prune_lakes, detect_shoreline, post_creation
from .island_shape import in_land, is_land_shape
from .elevation import assign_elevation
from .builders import GraphBuilder, RawEdge, make_builder
from .voronoi_builder import VoronoiBuilder
from .hex_builder import HexBuilder
from .world import World, generate_world

__all__ = ['Point', 'TolerancePolicy', 'Center', 'Corner', 'Edge', 'Map', 'Prop',
           'MapGraphError', 'PreconditionViolation', 'GraphConsistencyError',
           'DataFactory', 'assemble_graph', 'validate_graph', 'ensure_consistent',
           'CenterIndex', 'ClassificationResult', 'classify_land', 'prune_lakes',
           'detect_shoreline', 'post_creation', 'in_land', 'is_land_shape',
           'assign_elevation', 'GraphBuilder', 'RawEdge', 'make_builder',
           'VoronoiBuilder', 'HexBuilder', 'World', 'generate_world']
