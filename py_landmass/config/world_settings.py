"""
Per-build world settings.

These are validated values for a single map build. Defaults come from the
application Settings.
"""

from enum import Enum

from pydantic import BaseModel, Field

from .config import Settings


class BuilderKind(str, Enum):
    """Available graph builders."""

    VORONOI = "voronoi"
    HEX = "hex"


class WorldSettings(BaseModel):
    """Settings for one world build."""

    width: float = Field(default=1000.0, gt=0, description="Map width")
    height: float = Field(default=1000.0, gt=0, description="Map height")
    seed: int = Field(default=4, description="Random seed for reproducible builds")
    site_count: int = Field(default=300, ge=3, description="Number of Voronoi sites")
    smoothing: int = Field(default=10, ge=0, description="Number of relaxation rounds")
    builder: BuilderKind = Field(default=BuilderKind.VORONOI, description="Graph builder")

    center_tolerance: float = Field(default=10.0, gt=0, description="Center merge grid size")
    corner_tolerance: float = Field(default=0.1, gt=0, description="Corner merge grid size")
    hex_radius: float = Field(default=32.0, gt=0, description="Hex corner radius")
    split_jitter: float = Field(default=5.0, ge=0, description="Offset applied to split corners")

    @classmethod
    def from_settings(cls, settings: Settings, **overrides) -> "WorldSettings":
        """Fill a WorldSettings from application defaults, then apply overrides."""
        values = dict(
            width=settings.default_width,
            height=settings.default_height,
            seed=settings.default_seed,
            site_count=settings.default_site_count,
            smoothing=settings.default_smoothing,
            builder=settings.default_builder,
            center_tolerance=settings.center_tolerance,
            corner_tolerance=settings.corner_tolerance,
            hex_radius=settings.hex_radius,
            split_jitter=settings.split_jitter,
        )
        values.update(overrides)
        return cls(**values)
