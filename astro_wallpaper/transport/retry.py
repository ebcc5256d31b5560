"""Retry logic for transient transport failures with exponential backoff."""

import logging

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

# Gateway-level statuses worth retrying; 429 is a daily quota on api.nasa.gov
RETRYABLE_STATUSES = frozenset({502, 503, 504})


class RetryableStatusError(Exception):
    """Raised internally for responses whose status is worth retrying."""

    def __init__(self, response: httpx.Response):
        self.response = response
        super().__init__(f"HTTP {response.status_code} from {response.url.host}")


def is_retryable(exception: BaseException) -> bool:
    """
    Returns True if the exception should be retried.

    Retryable conditions:
    - httpx.TransportError (connect/read failures, timeouts)
    - RetryableStatusError (502, 503, 504)
    """
    if isinstance(exception, httpx.TransportError):
        return True
    return isinstance(exception, RetryableStatusError)


def transport_retry(max_attempts: int = 3, backoff_min: float = 1, backoff_max: float = 10):
    """
    Build the tenacity retry decorator used by HttpxTransport.

    Args:
        max_attempts: Total attempts including the first
        backoff_min: Minimum wait between attempts in seconds
        backoff_max: Maximum wait between attempts in seconds

    Returns:
        Decorator that re-raises the last exception once attempts run out
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=backoff_min, max=backoff_max),
        retry=retry_if_exception(is_retryable),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
