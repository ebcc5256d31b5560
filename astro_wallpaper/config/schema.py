"""
Pydantic configuration models for astro-wallpaper.

All models use extra="ignore" to allow unknown YAML keys without crashing.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ProviderName = Literal["mars", "earth", "epic"]


class NasaConfig(BaseModel):
    """NASA API access configuration."""

    model_config = ConfigDict(extra="ignore")

    api_key: str = Field(
        default="DEMO_KEY",
        description="api.nasa.gov key (NASA_API_KEY env var overrides)",
    )
    api_base: str = Field(
        default="https://api.nasa.gov", description="Base URL for api.nasa.gov endpoints"
    )
    epic_archive_base: str = Field(
        default="https://epic.gsfc.nasa.gov/archive/natural",
        description="Archive base for EPIC natural-color images",
    )


class MarsConfig(BaseModel):
    """Mars rover photo provider configuration."""

    model_config = ConfigDict(extra="ignore")

    rover: str = Field(default="curiosity", description="Rover whose photos to list")
    max_days: int = Field(
        default=30, ge=1, le=365, description="Days to roll back before giving up"
    )


class EarthConfig(BaseModel):
    """Earth single-point imagery provider configuration."""

    model_config = ConfigDict(extra="ignore")

    coordinate_attempts: int = Field(
        default=5, ge=1, le=50, description="Independent random coordinate draws"
    )
    max_days: int = Field(
        default=3, ge=1, le=365, description="Days to roll back per coordinate draw"
    )
    dim: float = Field(
        default=0.2, gt=0.0, le=1.0, description="Image width/height in degrees"
    )


class HttpConfig(BaseModel):
    """Transport configuration."""

    model_config = ConfigDict(extra="ignore")

    timeout: float = Field(default=30.0, gt=0.0, description="Per-request timeout in seconds")
    max_attempts: int = Field(
        default=3, ge=1, le=10, description="Attempts per fetch for transient network errors"
    )
    backoff_min: float = Field(default=1.0, ge=0.0, description="Minimum retry backoff in seconds")
    backoff_max: float = Field(default=10.0, ge=0.0, description="Maximum retry backoff in seconds")


class ResolutionConfig(BaseModel):
    """Resolution engine configuration."""

    model_config = ConfigDict(extra="ignore")

    deadline: float | None = Field(
        default=None,
        gt=0.0,
        description="Overall seconds allowed per rolling-date resolution (None = unbounded)",
    )


class OutputConfig(BaseModel):
    """Output, logging, and download configuration."""

    model_config = ConfigDict(extra="ignore")

    verbosity: Literal["quiet", "normal", "verbose"] = Field(
        default="normal", description="Logging verbosity level"
    )
    log_format: Literal["text", "json"] = Field(
        default="text", description="Stderr log line format"
    )
    download_dir: str | None = Field(
        default=None, description="Where downloaded wallpapers go (None = system temp dir)"
    )


class AstroWallpaperConfig(BaseModel):
    """Root configuration for astro-wallpaper."""

    model_config = ConfigDict(extra="ignore")

    providers: list[ProviderName] = Field(
        default_factory=lambda: ["mars", "earth", "epic"],
        min_length=1,
        description="Providers eligible for random selection",
    )
    nasa: NasaConfig = Field(default_factory=NasaConfig)
    mars: MarsConfig = Field(default_factory=MarsConfig)
    earth: EarthConfig = Field(default_factory=EarthConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
