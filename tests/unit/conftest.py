"""Shared fixtures: a scripted Transport stub and a fixed "today"."""

import json
from collections.abc import Callable
from datetime import date

import pytest

from astro_wallpaper.transport import Response

TODAY = date(2024, 3, 7)


def json_response(data, status: int = 200) -> Response:
    return Response(
        status=status,
        headers={"Content-Type": "application/json; charset=utf-8"},
        body=json.dumps(data).encode(),
    )


def image_response(body: bytes = b"\x89PNG\r\n\x1a\n", content_type: str = "image/png") -> Response:
    return Response(status=200, headers={"Content-Type": content_type}, body=body)


class ScriptedTransport:
    """
    Transport stub driven by a responder callable.

    The responder receives the URL and returns a Response or raises.
    Every requested URL is recorded in order.
    """

    def __init__(self, responder: Callable[[str], Response]):
        self.responder = responder
        self.urls: list[str] = []

    def fetch(self, url: str) -> Response:
        self.urls.append(url)
        return self.responder(url)

    @classmethod
    def sequence(cls, *outcomes) -> "ScriptedTransport":
        """Replay outcomes in order; exceptions are raised, Responses returned."""
        remaining = list(outcomes)

        def responder(url: str) -> Response:
            outcome = remaining.pop(0)
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome

        return cls(responder)


@pytest.fixture
def today() -> Callable[[], date]:
    return lambda: TODAY


@pytest.fixture
def scripted():
    """The ScriptedTransport class (build with ScriptedTransport(...) or .sequence(...))."""
    return ScriptedTransport


@pytest.fixture
def responses():
    """Response builders: responses.json(data, status), responses.image(...)."""

    class _Builders:
        json = staticmethod(json_response)
        image = staticmethod(image_response)

    return _Builders
