"""
Abstract base class for image providers.

Each provider owns its endpoint, response schema, and selection rule, and
exposes a single resolve() that either returns a ResolvedImage or raises a
terminal ResolutionError.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ValidationError

from astro_wallpaper.errors import DecodeError
from astro_wallpaper.models import RawImage, ResolvedImage

ModelT = TypeVar("ModelT", bound=BaseModel)


class ImageProvider(ABC):
    """
    Abstract base class for NASA image providers.

    Class Attributes:
        name: Unique identifier used for selection and provenance
        description: One-line summary for the CLI provider listing
    """

    name: ClassVar[str]
    description: ClassVar[str] = ""

    @abstractmethod
    def resolve(self) -> ResolvedImage:
        """
        Resolve one image URL from this provider.

        Raises:
            ExhaustedRetriesError: If the provider's retry budget runs out
            DeadlineExceededError: If the overall deadline passes first
        """
        ...

    def retry_summary(self) -> str:
        """Human-readable retry bound for the CLI listing."""
        return ""


def validate_payload(model: type[ModelT], data: Any, provider: str) -> ModelT:
    """
    Validate decoded JSON against a wire schema.

    Args:
        model: Pydantic model to validate against
        data: Output of decode_response()
        provider: Provider name for error messages

    Returns:
        Validated model instance

    Raises:
        DecodeError: If the body was an image or does not match the schema
    """
    if isinstance(data, RawImage):
        raise DecodeError(f"{provider}: expected JSON, got {data.content_type}")
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"{provider}: unexpected response shape: {e.error_count()} error(s)") from e
