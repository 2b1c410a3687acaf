"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings, overridable through DELAUNAY_VORONOI_* variables."""

    # Delaunay
    bounding_margin: float = Field(
        default=0.1, gt=0, description="Margin of the bounding square around [0,1]^2"
    )
    max_legalize_calls: int = Field(
        default=100, ge=1, description="Flip budget of one legalization pass"
    )
    legalize_insertions: bool = Field(
        default=True, description="Legalize the new fan after every insertion"
    )

    # Voronoi
    extension_margin: float = Field(
        default=1e6, gt=0, description="Reach of the rays that close border regions"
    )
    collision_radius: float = Field(
        default=0.01, ge=0, description="Merge radius of simplify_vertices"
    )

    # Seeds
    min_seed_distance: float = Field(
        default=0.01, ge=0, description="Minimum distance between generated seeds"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="console", description="console or json")

    model_config = SettingsConfigDict(
        env_prefix="DELAUNAY_VORONOI_", env_file=".env", extra="ignore"
    )


settings = Settings()
