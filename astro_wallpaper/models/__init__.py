"""Wire schemas and transient resolution entities."""

from .images import (
    Coordinates,
    DirectImageAt,
    Extraction,
    ImageAt,
    ImageRequest,
    ProviderResponse,
    RawImage,
    ResolvedImage,
)
from .records import (
    ApiErrorBody,
    EpicImage,
    EpicRecords,
    GatewayError,
    MarsPhoto,
    MarsPhotos,
)

__all__ = [
    "Coordinates",
    "DirectImageAt",
    "Extraction",
    "ImageAt",
    "ImageRequest",
    "ProviderResponse",
    "RawImage",
    "ResolvedImage",
    "ApiErrorBody",
    "EpicImage",
    "EpicRecords",
    "GatewayError",
    "MarsPhoto",
    "MarsPhotos",
]
