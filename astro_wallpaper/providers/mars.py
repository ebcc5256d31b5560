"""Mars rover photos, rolling back one earth date at a time."""

import logging
import random
from datetime import date
from typing import Any

import httpx

from astro_wallpaper.errors import EmptyResultError
from astro_wallpaper.models import ImageAt, ImageRequest, MarsPhotos, ResolvedImage
from astro_wallpaper.resolution import DATE_FORMAT, RollingDateResolver, RollingDateSource

from .base import ImageProvider, validate_payload

logger = logging.getLogger(__name__)


class MarsProvider(ImageProvider, RollingDateSource):
    """Random photo from the most recent earth date the rover has photos for."""

    name = "mars"
    description = "Mars rover photos (rolls back day by day)"

    def __init__(
        self,
        resolver: RollingDateResolver,
        api_key: str,
        rng: random.Random,
        rover: str = "curiosity",
        max_days: int = 30,
        api_base: str = "https://api.nasa.gov",
    ):
        self.resolver = resolver
        self.api_key = api_key
        self.rng = rng
        self.rover = rover
        self.max_attempts = max_days
        self.endpoint = f"{api_base.rstrip('/')}/mars-photos/api/v1/rovers/{rover}/photos"

    def build_request(self, day: date) -> ImageRequest:
        url = httpx.URL(
            self.endpoint,
            params={"earth_date": day.strftime(DATE_FORMAT), "api_key": self.api_key},
        )
        return ImageRequest(url=str(url), day=day)

    def parse(self, decoded: Any) -> MarsPhotos:
        return validate_payload(MarsPhotos, decoded, self.name)

    def extract(self, response: MarsPhotos, request: ImageRequest) -> ImageAt:
        """Pick one photo uniformly at random; an empty listing rolls the date."""
        if not response.photos:
            raise EmptyResultError(f"no Mars images found for {request.day}")
        photo = self.rng.choice(response.photos)
        logger.debug(f"Picked 1 of {len(response.photos)} {self.rover} photos")
        return ImageAt(photo.img_src)

    def resolve(self) -> ResolvedImage:
        return self.resolver.resolve(self)

    def retry_summary(self) -> str:
        return f"{self.max_attempts} days"
