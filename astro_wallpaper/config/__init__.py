"""Configuration system for astro-wallpaper."""

from .loader import get_config_path, load_config
from .schema import (
    AstroWallpaperConfig,
    EarthConfig,
    HttpConfig,
    MarsConfig,
    NasaConfig,
    OutputConfig,
    ResolutionConfig,
)

__all__ = [
    "AstroWallpaperConfig",
    "NasaConfig",
    "MarsConfig",
    "EarthConfig",
    "HttpConfig",
    "ResolutionConfig",
    "OutputConfig",
    "load_config",
    "get_config_path",
]
