from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from .constants import DEFAULT_MAX_BARS
from .models import RelationshipMode


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    # Aggregation settings
    relationship: RelationshipMode = Field(
        RelationshipMode.SOURCE_OR_DESTINATION,
        description="Which packet addresses are counted",
    )
    max_bars: int = Field(DEFAULT_MAX_BARS, ge=0, description="Top-N capacity of the histogram")

    # Chart settings
    title: str = Field("Top Addresses", description="Default chart title")
    subtitle: str = Field("", description="Default chart subtitle")
    chart_width: float = Field(6.0, gt=0, description="Chart width in inches")
    chart_height: float = Field(3.0, gt=0, description="Chart height in inches")

    # Caching settings
    cache_enabled: bool = Field(True, description="Enable caching of address key lookups")
    address_cache_size: int = Field(65536, description="Maximum entries in address cache")

    class Config:
        env_prefix = "NETVIZ_"
        env_file = ".env"


@lru_cache()
def get_settings() -> Settings:
    """Return a singleton settings instance."""
    return Settings()


settings = get_settings()
