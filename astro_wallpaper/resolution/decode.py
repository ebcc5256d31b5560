"""
Response decoding shared by every provider.

Turns a raw Response into either a RawImage (the endpoint served image bytes)
or parsed JSON, raising the fetch-level errors the retry loops consume.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from astro_wallpaper.errors import APIError, DecodeError
from astro_wallpaper.models import ApiErrorBody, RawImage
from astro_wallpaper.transport import Response, Transport

logger = logging.getLogger(__name__)


def api_error_message(data: Any) -> str:
    """Return the structured error message in a JSON body, or "" if there is none."""
    if not isinstance(data, dict):
        return ""
    try:
        return ApiErrorBody.model_validate(data).message
    except ValidationError:
        return ""


def decode_response(response: Response) -> RawImage | Any:
    """
    Decode a provider response.

    Args:
        response: Raw transport response

    Returns:
        RawImage for successful image/* responses, otherwise the parsed JSON

    Raises:
        APIError: Body is a structured error payload, or status >= 400
        DecodeError: Body is not valid JSON
    """
    if response.ok and response.content_type.startswith("image/"):
        return RawImage(content_type=response.content_type, size=len(response.body))

    try:
        data = json.loads(response.body)
    except ValueError as e:
        if not response.ok:
            raise APIError(f"HTTP {response.status}", status=response.status) from e
        raise DecodeError(f"Malformed JSON body ({response.content_type or 'no content type'}): {e}") from e

    if message := api_error_message(data):
        raise APIError(message, status=response.status)
    if not response.ok:
        raise APIError(f"HTTP {response.status}", status=response.status)
    return data


def fetch_and_decode(transport: Transport, url: str) -> RawImage | Any:
    """Fetch a URL and decode the body (see decode_response)."""
    return decode_response(transport.fetch(url))
