"""
Rolling-date retry driver.

Tries today, then yesterday, and so on, until a provider-supplied strategy
finds an image or the attempt bound is reached. Each provider plugs in via a
RollingDateSource that owns its URL shape, payload parsing, and extraction.
"""

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

from astro_wallpaper.errors import DeadlineExceededError, ExhaustedRetriesError, FetchFailure
from astro_wallpaper.logging_config import redact_api_key
from astro_wallpaper.models import Extraction, ImageRequest, ProviderResponse, ResolvedImage
from astro_wallpaper.transport import Transport

from .decode import fetch_and_decode

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


class RollingDateSource(ABC):
    """
    Strategy plugged into RollingDateResolver.

    Subclasses define:
    - name: provider name recorded on the ResolvedImage
    - max_attempts: how many consecutive days to try
    - build_request(): the URL for a given day
    - parse(): decoded body -> provider response variant
    - extract(): provider response -> image locator
    """

    name: str = ""
    max_attempts: int = 1

    @abstractmethod
    def build_request(self, day: date) -> ImageRequest:
        """Build the fetch attempt for one calendar day."""
        ...

    @abstractmethod
    def parse(self, decoded: Any) -> ProviderResponse:
        """
        Convert a decoded body into this provider's response variant.

        Raises:
            DecodeError: If the body does not have the expected shape
        """
        ...

    @abstractmethod
    def extract(self, response: ProviderResponse, request: ImageRequest) -> Extraction:
        """
        Pick the image out of a parsed response.

        Returns:
            ImageAt with a locator from the payload, or DirectImageAt when the
            request URL itself serves the image

        Raises:
            EmptyResultError: If the response holds nothing usable
        """
        ...


@dataclass
class RetryState:
    """Cursor for one resolve() call: the day being tried and attempts used."""

    day: date
    max_attempts: int
    attempts: int = 0

    @property
    def remaining(self) -> int:
        return self.max_attempts - self.attempts

    def step_back(self) -> None:
        """Record a failed attempt and move to the previous day."""
        self.attempts += 1
        self.day -= timedelta(days=1)


class RollingDateResolver:
    """Generic "try today, else yesterday, ..." driver."""

    def __init__(
        self,
        transport: Transport,
        today: Callable[[], date] = date.today,
        deadline: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the resolver.

        Args:
            transport: Fetches each candidate URL
            today: Returns the first day to try
            deadline: Overall budget in seconds for one resolve() call (None = unbounded)
            clock: Monotonic clock used for the deadline
        """
        self.transport = transport
        self.today = today
        self.deadline = deadline
        self.clock = clock

    def resolve(self, source: RollingDateSource, started: float | None = None) -> ResolvedImage:
        """
        Find an image by stepping back one day per failed attempt.

        Fetch failures, API error payloads, malformed bodies, and empty results
        all count as a failed attempt for that day.

        Args:
            source: Provider strategy
            started: Clock reading the deadline counts from (None = now). Callers
                that run several resolutions under one budget pass the same value.

        Returns:
            ResolvedImage for the first day that yields an image

        Raises:
            ExhaustedRetriesError: After source.max_attempts days without an image
            DeadlineExceededError: If the overall deadline passes first
        """
        state = RetryState(day=self.today(), max_attempts=source.max_attempts)
        if started is None:
            started = self.clock()

        while state.remaining > 0:
            if self.deadline is not None and self.clock() - started >= self.deadline:
                raise DeadlineExceededError(state.attempts, self.deadline)

            request = source.build_request(state.day)
            logger.info(f"Checking URL: {redact_api_key(request.url)}")

            try:
                decoded = fetch_and_decode(self.transport, request.url)
                extraction = source.extract(source.parse(decoded), request)
            except FetchFailure as e:
                logger.debug(f"{source.name} {state.day.strftime(DATE_FORMAT)}: {e}")
                state.step_back()
                continue

            logger.info(
                f"{source.name}: found image for {state.day.strftime(DATE_FORMAT)} "
                f"after {state.attempts + 1} attempt(s)"
            )
            return ResolvedImage(url=extraction.url, provider=source.name, day=request.day)

        raise ExhaustedRetriesError(state.attempts, source.name)
