"""Tests for stderr logging configuration."""

import json
import logging

import pytest

from astro_wallpaper.logging_config import JsonFormatter, configure_logging, redact_api_key


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestRedactApiKey:
    def test_redacts_key(self):
        url = "https://api.nasa.gov/EPIC/api/natural?api_key=abc123"
        assert redact_api_key(url) == "https://api.nasa.gov/EPIC/api/natural?api_key=***"

    def test_redacts_key_mid_query(self):
        url = "https://api.nasa.gov/planetary/earth/imagery?lon=1&api_key=SECRET&dim=0.2"
        assert redact_api_key(url) == "https://api.nasa.gov/planetary/earth/imagery?lon=1&api_key=***&dim=0.2"

    def test_no_key_untouched(self):
        assert redact_api_key("https://epic.gsfc.nasa.gov/a.png") == "https://epic.gsfc.nasa.gov/a.png"


class TestJsonFormatter:
    def test_fields(self):
        record = logging.LogRecord("astro_wallpaper.test", logging.INFO, __file__, 1, "hello %s", ("mars",), None)

        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "astro_wallpaper.test"
        assert data["msg"] == "hello mars"
        assert "ts" in data
        assert "exc" not in data

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            import sys

            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        data = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in data["exc"]


class TestConfigureLogging:
    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.WARNING), ("normal", logging.INFO), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, restore_root_logger, verbosity, level):
        configure_logging(verbosity)
        assert restore_root_logger.level == level

    def test_single_handler(self, restore_root_logger):
        configure_logging()
        configure_logging()
        assert len(restore_root_logger.handlers) == 1

    def test_json_format(self, restore_root_logger):
        configure_logging(fmt="json")
        assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)

    def test_httpx_quieted(self, restore_root_logger):
        configure_logging("verbose")
        httpx_logger = logging.getLogger("httpx")
        assert httpx_logger.level == logging.WARNING
        assert httpx_logger.propagate is False
