"""
Stderr-only logging configuration.

Stdout carries the resolved URL (so the CLI stays pipeable); every log line
goes to stderr, either human-readable or as JSON lines.
"""

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any

_VERBOSITY_LEVELS = {
    "quiet": logging.WARNING,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}

_TEXT_FORMAT = "%(asctime)s  %(levelname)-7s  %(message)s"

_API_KEY_RE = re.compile(r"(api_key=)[^&\s]*")


def redact_api_key(url: str) -> str:
    """Mask the api_key query parameter before a URL is logged."""
    return _API_KEY_RE.sub(r"\1***", url)


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON line."""
        log_data: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            log_data["exc"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(verbosity: str = "normal", fmt: str = "text") -> None:
    """
    Configure root logging to stderr.

    Clears existing handlers so repeated calls (tests, CLI re-entry) don't stack.

    Args:
        verbosity: "quiet", "normal", or "verbose"
        fmt: "text" for human-readable lines, "json" for JSON lines
    """
    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_VERBOSITY_LEVELS.get(verbosity, logging.INFO))

    # httpx logs every request URL (api key included) at INFO
    for logger_name in ["httpx", "httpcore"]:
        logger = logging.getLogger(logger_name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
        logger.propagate = False
