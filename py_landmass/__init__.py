"""Procedural landmass map graphs: Voronoi/Delaunay dual graphs with land, water and shoreline."""

from .core import Map, DataFactory, generate_world
from .config import WorldSettings, settings

__version__ = "0.1.0"

__all__ = ['Map', 'DataFactory', 'generate_world', 'WorldSettings', 'settings']
