"""
Transient resolution entities.

Everything here lives for a single resolution call; nothing is persisted.
"""

from dataclasses import dataclass
from datetime import date

from .records import EpicRecords, MarsPhotos


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair drawn for one Earth imagery attempt."""

    lat: float
    lon: float


@dataclass(frozen=True)
class ImageRequest:
    """Parameters of one fetch attempt."""

    url: str
    day: date | None = None
    coordinates: Coordinates | None = None


@dataclass(frozen=True)
class RawImage:
    """Image bytes returned directly by the endpoint (Earth imagery)."""

    content_type: str
    size: int


# Exactly one variant is produced, depending on the provider that asked
ProviderResponse = MarsPhotos | RawImage | EpicRecords


@dataclass(frozen=True)
class ImageAt:
    """Extraction found an image locator in the payload."""

    url: str


@dataclass(frozen=True)
class DirectImageAt:
    """The request URL itself serves the image."""

    url: str


Extraction = ImageAt | DirectImageAt


@dataclass(frozen=True)
class ResolvedImage:
    """
    End artifact of a resolution.

    The URL is well-formed but never checked for real image bytes.
    """

    url: str
    provider: str
    day: date | None = None
