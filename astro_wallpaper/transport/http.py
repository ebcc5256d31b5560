"""Blocking httpx transport with per-request timeouts and transient retries."""

import logging

import httpx

from astro_wallpaper import __version__
from astro_wallpaper.errors import TransportError

from .base import Response
from .retry import RETRYABLE_STATUSES, RetryableStatusError, transport_retry

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    Transport backed by a synchronous httpx.Client.

    Handles:
    - Per-request timeout (a hung server surfaces as TransportError)
    - Redirect following (archive URLs redirect to CDN hosts)
    - Transient retries for network errors and 502/503/504
    """

    def __init__(
        self,
        timeout: float = 30.0,
        max_attempts: int = 3,
        backoff_min: float = 1.0,
        backoff_max: float = 10.0,
        client: httpx.Client | None = None,
    ):
        """
        Initialize the transport.

        Args:
            timeout: Per-request timeout in seconds
            max_attempts: Attempts per fetch for transient failures
            backoff_min: Minimum backoff between attempts in seconds
            backoff_max: Maximum backoff between attempts in seconds
            client: Pre-built client (tests pass one with httpx.MockTransport)
        """
        self.timeout = timeout
        self._owns_client = client is None
        self.client = client or httpx.Client(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            headers={"User-Agent": f"astro-wallpaper/{__version__}"},
        )
        self._get = transport_retry(max_attempts, backoff_min, backoff_max)(self._get_once)

    def _get_once(self, url: str) -> httpx.Response:
        response = self.client.get(url)
        if response.status_code in RETRYABLE_STATUSES:
            raise RetryableStatusError(response)
        return response

    def fetch(self, url: str) -> Response:
        """
        Fetch a URL.

        Args:
            url: Absolute URL

        Returns:
            Response with status, headers, and full body

        Raises:
            TransportError: On network failures, timeouts, or gateway errors
                that persisted through every retry
        """
        try:
            response = self._get(url)
        except RetryableStatusError as e:
            raise TransportError(str(e)) from e
        except httpx.HTTPError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        return Response(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
