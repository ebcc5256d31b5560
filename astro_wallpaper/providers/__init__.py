"""
NASA image providers.

Exports the three providers, the random selector, and factories that build
them from configuration.
"""

from .base import ImageProvider, validate_payload
from .earth import EarthImagerySource, EarthProvider
from .epic import EpicProvider, archive_url
from .factory import create_providers, create_selector
from .mars import MarsProvider
from .selector import ProviderSelector

__all__ = [
    "ImageProvider",
    "validate_payload",
    "EarthImagerySource",
    "EarthProvider",
    "EpicProvider",
    "archive_url",
    "MarsProvider",
    "ProviderSelector",
    "create_providers",
    "create_selector",
]
