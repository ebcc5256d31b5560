"""Factory for building the configured provider set."""

import random
from collections.abc import Callable
from datetime import date

from astro_wallpaper.config.schema import AstroWallpaperConfig
from astro_wallpaper.resolution import RollingDateResolver
from astro_wallpaper.transport import Transport

from .base import ImageProvider
from .earth import EarthProvider
from .epic import EpicProvider
from .mars import MarsProvider
from .selector import ProviderSelector


def create_providers(
    config: AstroWallpaperConfig,
    transport: Transport,
    rng: random.Random,
    today: Callable[[], date] = date.today,
) -> list[ImageProvider]:
    """
    Create the providers listed in config.providers, in that order.

    Args:
        config: Root AstroWallpaperConfig
        transport: Shared transport for every provider
        rng: Shared random source
        today: First day for rolling-date providers

    Returns:
        Provider instances (duplicates in config.providers are collapsed)
    """
    resolver = RollingDateResolver(transport, today=today, deadline=config.resolution.deadline)
    nasa = config.nasa

    builders: dict[str, Callable[[], ImageProvider]] = {
        "mars": lambda: MarsProvider(
            resolver,
            nasa.api_key,
            rng,
            rover=config.mars.rover,
            max_days=config.mars.max_days,
            api_base=nasa.api_base,
        ),
        "earth": lambda: EarthProvider(
            resolver,
            nasa.api_key,
            rng,
            coordinate_attempts=config.earth.coordinate_attempts,
            max_days=config.earth.max_days,
            dim=config.earth.dim,
            api_base=nasa.api_base,
        ),
        "epic": lambda: EpicProvider(
            transport,
            nasa.api_key,
            rng,
            api_base=nasa.api_base,
            archive_base=nasa.epic_archive_base,
        ),
    }

    return [builders[name]() for name in dict.fromkeys(config.providers)]


def create_selector(
    config: AstroWallpaperConfig,
    transport: Transport,
    rng: random.Random | None = None,
    today: Callable[[], date] = date.today,
) -> ProviderSelector:
    """Build a ProviderSelector over the configured providers."""
    if rng is None:
        rng = random.Random()
    return ProviderSelector(create_providers(config, transport, rng, today=today), rng)
