"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from environment variables (prefix LANDMASS_)."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Map Generation Configuration
    default_width: float = Field(default=1000.0, description="Default map width")
    default_height: float = Field(default=1000.0, description="Default map height")
    default_seed: int = Field(default=4, description="Default build seed")
    default_site_count: int = Field(default=300, description="Default number of Voronoi sites")
    default_smoothing: int = Field(default=10, description="Default number of relaxation rounds")
    default_builder: str = Field(default="voronoi", description="Default builder (voronoi or hex)")

    # Graph Configuration
    center_tolerance: float = Field(default=10.0, description="Grid size used to merge nearby centers")
    corner_tolerance: float = Field(default=0.1, description="Grid size used to merge nearby corners")
    hex_radius: float = Field(default=32.0, description="Hex corner radius")
    split_jitter: float = Field(default=5.0, description="Offset applied to split corners")

    class Config:
        env_prefix = "LANDMASS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
