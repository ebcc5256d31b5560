"""
Configuration loading with auto-creation of defaults.

Uses platformdirs for cross-platform config directory management.
"""

import logging
import os
from pathlib import Path

import yaml
from platformdirs import user_config_path

from .schema import AstroWallpaperConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "NASA_API_KEY"


def get_config_path() -> Path:
    """Get path to config file, ensuring config directory exists."""
    config_dir = user_config_path("astro-wallpaper", ensure_exists=True)
    return config_dir / "config.yaml"


def load_config(path: Path | None = None) -> AstroWallpaperConfig:
    """
    Load configuration from YAML file.

    If the config file doesn't exist, creates it with defaults.
    The NASA_API_KEY environment variable overrides nasa.api_key.

    Args:
        path: Explicit config file (defaults to the platform config dir)

    Returns:
        Validated Pydantic model

    Raises:
        ValueError: If the file is not a mapping or fails validation
        yaml.YAMLError: If the file is not valid YAML
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        config = AstroWallpaperConfig()
        config_dict = config.model_dump(mode="json")

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with config_path.open("w") as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Created default config at {config_path}")
    else:
        with config_path.open("r") as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            raise ValueError(f"{config_path}: top level must be a mapping, got {type(config_data).__name__}")

        config = AstroWallpaperConfig(**config_data)
        logger.info(f"Loaded config from {config_path}")

    if api_key := os.environ.get(API_KEY_ENV):
        config.nasa.api_key = api_key

    return config
