"""
Configuration for map generation.
"""

from .config import Settings, settings
from .world_settings import BuilderKind, WorldSettings

__all__ = ['Settings', 'settings', 'BuilderKind', 'WorldSettings']
