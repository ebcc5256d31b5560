"""Uniform random choice among the configured providers."""

import logging
import random
from collections.abc import Iterable

from astro_wallpaper.errors import NoProviderSucceeded, ResolutionError, UnknownProviderError
from astro_wallpaper.models import ResolvedImage

from .base import ImageProvider

logger = logging.getLogger(__name__)


class ProviderSelector:
    """
    Picks one provider per call and delegates to its resolve().

    Holds no state between calls beyond the provider set and the shared
    random source.
    """

    def __init__(self, providers: Iterable[ImageProvider], rng: random.Random):
        self._providers: dict[str, ImageProvider] = {p.name: p for p in providers}
        if not self._providers:
            raise ValueError("ProviderSelector needs at least one provider")
        self.rng = rng

    @property
    def names(self) -> list[str]:
        return list(self._providers)

    @property
    def providers(self) -> list[ImageProvider]:
        return list(self._providers.values())

    def choose(self) -> ImageProvider:
        """Pick a provider uniformly at random."""
        return self.rng.choice(self.providers)

    def get(self, name: str) -> ImageProvider:
        try:
            return self._providers[name]
        except KeyError:
            raise UnknownProviderError(name, self.names) from None

    def resolve_random_image(self) -> ResolvedImage:
        """
        Resolve one image from a randomly chosen provider.

        Raises:
            NoProviderSucceeded: If the chosen provider fails terminally
        """
        return self._resolve(self.choose())

    def resolve_with(self, name: str) -> ResolvedImage:
        """
        Resolve one image from a named provider.

        Raises:
            UnknownProviderError: If no provider has that name
            NoProviderSucceeded: If the provider fails terminally
        """
        return self._resolve(self.get(name))

    def _resolve(self, provider: ImageProvider) -> ResolvedImage:
        logger.info(f"Using provider: {provider.name}")
        try:
            return provider.resolve()
        except ResolutionError as e:
            logger.warning(f"Provider {provider.name} failed: {e}")
            raise NoProviderSucceeded(provider.name, e) from e
