"""
Earth single-point imagery.

Imagery exists for very few coordinate/date combinations, so resolution runs
two nested loops: independent random coordinate draws outside, a short
rolling-date search inside each draw.
"""

import logging
import random
from datetime import date
from typing import Any

import httpx

from astro_wallpaper.errors import DecodeError, ExhaustedRetriesError
from astro_wallpaper.models import (
    Coordinates,
    DirectImageAt,
    ImageRequest,
    RawImage,
    ResolvedImage,
)
from astro_wallpaper.resolution import DATE_FORMAT, RollingDateResolver, RollingDateSource

from .base import ImageProvider

logger = logging.getLogger(__name__)


class EarthImagerySource(RollingDateSource):
    """Rolling-date search at one fixed coordinate pair."""

    name = "earth"

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        coordinates: Coordinates,
        max_days: int = 3,
        dim: float = 0.2,
    ):
        self.endpoint = endpoint
        self.api_key = api_key
        self.coordinates = coordinates
        self.max_attempts = max_days
        self.dim = dim

    def build_request(self, day: date) -> ImageRequest:
        url = httpx.URL(
            self.endpoint,
            params={
                "lon": f"{self.coordinates.lon:f}",
                "lat": f"{self.coordinates.lat:f}",
                "date": day.strftime(DATE_FORMAT),
                "dim": f"{self.dim:g}",
                "api_key": self.api_key,
            },
        )
        return ImageRequest(url=str(url), day=day, coordinates=self.coordinates)

    def parse(self, decoded: Any) -> RawImage:
        # Only image bytes count; any JSON body here is a miss
        if not isinstance(decoded, RawImage):
            raise DecodeError("earth: expected image bytes, got JSON")
        return decoded

    def extract(self, response: RawImage, request: ImageRequest) -> DirectImageAt:
        return DirectImageAt(request.url)


class EarthProvider(ImageProvider):
    """Random-coordinate Earth imagery with a short date roll per coordinate."""

    name = "earth"
    description = "Earth imagery at random coordinates"

    def __init__(
        self,
        resolver: RollingDateResolver,
        api_key: str,
        rng: random.Random,
        coordinate_attempts: int = 5,
        max_days: int = 3,
        dim: float = 0.2,
        api_base: str = "https://api.nasa.gov",
    ):
        self.resolver = resolver
        self.api_key = api_key
        self.rng = rng
        self.coordinate_attempts = coordinate_attempts
        self.max_days = max_days
        self.dim = dim
        self.endpoint = f"{api_base.rstrip('/')}/planetary/earth/imagery"

    def draw_coordinates(self) -> Coordinates:
        """Uniform latitude in [-90, 90] and longitude in [-180, 180]."""
        return Coordinates(lat=self.rng.uniform(-90, 90), lon=self.rng.uniform(-180, 180))

    def resolve(self) -> ResolvedImage:
        """
        Try up to coordinate_attempts random locations, each with its own date roll.

        The resolver deadline covers all draws together, not each one.
        """
        started = self.resolver.clock()
        for attempt in range(1, self.coordinate_attempts + 1):
            source = EarthImagerySource(
                self.endpoint,
                self.api_key,
                self.draw_coordinates(),
                max_days=self.max_days,
                dim=self.dim,
            )
            try:
                return self.resolver.resolve(source, started=started)
            except ExhaustedRetriesError as e:
                logger.info(
                    f"Attempt {attempt} failed at lat={source.coordinates.lat:.4f} "
                    f"lon={source.coordinates.lon:.4f}: {e}"
                )

        raise ExhaustedRetriesError(
            self.coordinate_attempts,
            self.name,
            message=f"failed to get Earth image after {self.coordinate_attempts} attempts",
        )

    def retry_summary(self) -> str:
        return f"{self.coordinate_attempts} coordinates x {self.max_days} days"
