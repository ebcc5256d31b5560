"""EPIC natural-color imagery: one fetch, no date rolling."""

import logging
import random

import httpx

from astro_wallpaper.errors import EmptyResultError, ExhaustedRetriesError, FetchFailure
from astro_wallpaper.logging_config import redact_api_key
from astro_wallpaper.models import EpicImage, EpicRecords, ResolvedImage
from astro_wallpaper.resolution import fetch_and_decode
from astro_wallpaper.transport import Transport

from .base import ImageProvider, validate_payload

logger = logging.getLogger(__name__)

IMAGE_FORMAT = "png"


def archive_url(archive_base: str, record: EpicImage) -> str:
    """
    Build the archive URL for one EPIC record.

    "2024-03-07 11:22:33" + "epic_1b_20240307112233" ->
    {archive_base}/2024/03/07/png/epic_1b_20240307112233.png
    """
    return f"{archive_base.rstrip('/')}/{record.date_path}/{IMAGE_FORMAT}/{record.image}.{IMAGE_FORMAT}"


class EpicProvider(ImageProvider):
    """Random record from the latest EPIC natural-color set."""

    name = "epic"
    description = "EPIC full-disc Earth (latest natural-color set)"

    def __init__(
        self,
        transport: Transport,
        api_key: str,
        rng: random.Random,
        api_base: str = "https://api.nasa.gov",
        archive_base: str = "https://epic.gsfc.nasa.gov/archive/natural",
    ):
        self.transport = transport
        self.api_key = api_key
        self.rng = rng
        self.archive_base = archive_base
        self.endpoint = f"{api_base.rstrip('/')}/EPIC/api/natural"

    def request_url(self) -> str:
        return str(httpx.URL(self.endpoint, params={"api_key": self.api_key}))

    def resolve(self) -> ResolvedImage:
        url = self.request_url()
        logger.info(f"Checking URL: {redact_api_key(url)}")

        try:
            decoded = fetch_and_decode(self.transport, url)
            # The endpoint returns a bare JSON array
            records = validate_payload(EpicRecords, {"records": decoded}, self.name).records
            if not records:
                raise EmptyResultError("no EPIC images available")
        except FetchFailure as e:
            raise ExhaustedRetriesError(1, self.name, message=str(e)) from e

        record = self.rng.choice(records)
        logger.debug(f"Picked {record.image} of {len(records)} EPIC records")
        return ResolvedImage(url=archive_url(self.archive_base, record), provider=self.name)

    def retry_summary(self) -> str:
        return "single fetch"
