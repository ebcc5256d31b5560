"""
Error taxonomy for image resolution.

Fetch-level failures (FetchFailure subclasses) are caught inside the retry
loops and turned into "advance the cursor, retry". Only terminal errors
(ExhaustedRetriesError, DeadlineExceededError, NoProviderSucceeded) cross a
provider boundary.
"""


class ResolutionError(Exception):
    """Base class for everything the resolution engine raises."""


class FetchFailure(ResolutionError):
    """A single attempt failed; the caller should move on to the next one."""


class TransportError(FetchFailure):
    """Network, DNS, or timeout failure (or a 5xx that survived transient retries)."""


class DecodeError(FetchFailure):
    """Response body was malformed or not the shape the provider expects."""


class APIError(FetchFailure):
    """Provider returned a structured error payload (rate limit, bad key, ...)."""

    def __init__(self, message: str, status: int | None = None):
        self.message = message
        self.status = status
        super().__init__(f"API error: {message}")


class EmptyResultError(FetchFailure):
    """Response was well-formed but held no usable image."""


class ExhaustedRetriesError(ResolutionError):
    """Rolling-date or coordinate budget ran out without finding an image."""

    def __init__(self, attempts: int, provider: str = "", message: str | None = None):
        self.attempts = attempts
        self.provider = provider
        if message is None:
            message = f"no images found after {attempts} attempts"
        super().__init__(f"{provider}: {message}" if provider else message)


class DeadlineExceededError(ResolutionError):
    """Overall resolution deadline passed before an image was found."""

    def __init__(self, attempts: int, deadline: float):
        self.attempts = attempts
        self.deadline = deadline
        super().__init__(
            f"resolution deadline of {deadline:g}s exceeded after {attempts} attempts"
        )


class NoProviderSucceeded(ResolutionError):
    """The selected provider failed; carries the provider name and cause."""

    def __init__(self, provider: str, cause: ResolutionError):
        self.provider = provider
        self.cause = cause
        super().__init__(f"Error getting image from {provider}: {cause}")


class UnknownProviderError(KeyError):
    """Requested provider name is not configured."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown provider '{self.name}' (available: {', '.join(self.available)})"


class WallpaperError(Exception):
    """Downloading or applying the wallpaper failed."""
