"""Image-resolution engine: response decoding and the rolling-date driver."""

from .decode import api_error_message, decode_response, fetch_and_decode
from .rolling import DATE_FORMAT, RetryState, RollingDateResolver, RollingDateSource

__all__ = [
    "api_error_message",
    "decode_response",
    "fetch_and_decode",
    "DATE_FORMAT",
    "RetryState",
    "RollingDateResolver",
    "RollingDateSource",
]
