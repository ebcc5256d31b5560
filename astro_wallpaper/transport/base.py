"""Transport seam: the blocking request/response capability the engine depends on."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Response:
    """Raw HTTP response as seen by the resolution engine."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def content_type(self) -> str:
        """Lowercased media type without parameters (e.g. "image/png")."""
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value.split(";", 1)[0].strip().lower()
        return ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@runtime_checkable
class Transport(Protocol):
    """Anything that can fetch a URL and hand back a Response."""

    def fetch(self, url: str) -> Response:
        """
        Perform a blocking GET.

        Raises:
            TransportError: On network, DNS, or timeout failures
        """
        ...
