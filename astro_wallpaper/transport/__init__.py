"""HTTP transport: the Response/Transport seam plus an httpx implementation."""

from .base import Response, Transport
from .http import HttpxTransport
from .retry import is_retryable, transport_retry

__all__ = [
    "Response",
    "Transport",
    "HttpxTransport",
    "is_retryable",
    "transport_retry",
]
