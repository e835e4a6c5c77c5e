"""
Tests for JSON structured logging
"""

import io
import json
import logging
import sys

import pytest

from geomcore.core.structured_logging import (
    ROOT_LOGGER_NAME,
    JsonFormatter,
    configure_logging,
)
from geomcore.core.domain.ordinates import Ordinates
from geomcore.sequences import CoordinateArraySequenceFactory


@pytest.fixture
def package_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestJsonFormatter:
    """Tests for JsonFormatter"""

    def test_payload(self) -> None:
        """Level, logger and message are always present"""
        record = logging.makeLogRecord(
            {"name": "geomcore.test", "levelname": "INFO", "msg": "hello %s", "args": ("world",)}
        )
        payload = json.loads(JsonFormatter().format(record))
        assert payload == {"level": "INFO", "logger": "geomcore.test", "msg": "hello world"}

    def test_extra_merged(self) -> None:
        """Fields under extra={"extra": {...}} are merged"""
        record = logging.makeLogRecord(
            {"name": "geomcore.test", "levelname": "DEBUG", "msg": "m", "extra": {"shape": [3, 0]}}
        )
        payload = json.loads(JsonFormatter().format(record))
        assert payload["shape"] == [3, 0]

    def test_non_json_values(self) -> None:
        """Values JSON cannot encode are written as strings"""
        record = logging.makeLogRecord(
            {"name": "geomcore.test", "levelname": "DEBUG", "msg": "m", "extra": {"mask": Ordinates.XYZ}}
        )
        payload = json.loads(JsonFormatter().format(record))
        assert isinstance(payload["mask"], (str, int))

    def test_exception(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.getLogger("geomcore.test").makeRecord(
                "geomcore.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        payload = json.loads(JsonFormatter().format(record))
        assert "RuntimeError: boom" in payload["exception"]


class TestConfigureLogging:
    """Tests for configure_logging"""

    def test_handler_added_once(self, package_logger: logging.Logger) -> None:
        stream = io.StringIO()
        configure_logging("debug", stream)
        configure_logging("info", stream)
        json_handlers = [
            h for h in package_logger.handlers if isinstance(h.formatter, JsonFormatter)
        ]
        assert len(json_handlers) == 1
        assert package_logger.level == logging.INFO

    def test_numeric_level(self, package_logger: logging.Logger) -> None:
        configure_logging(logging.ERROR, io.StringIO())
        assert package_logger.level == logging.ERROR

    def test_clamping_emits_json_line(self, package_logger: logging.Logger) -> None:
        """Factory clamping shows up as one JSON line"""
        stream = io.StringIO()
        configure_logging("DEBUG", stream)

        CoordinateArraySequenceFactory(Ordinates.XYZ).create(1, 4, 1)

        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        clamped = [p for p in lines if p["msg"] == "sequence shape clamped"]
        assert len(clamped) == 1
        assert clamped[0]["logger"] == "geomcore.sequences.factory"
        assert clamped[0]["requested"] == [4, 1]
        assert clamped[0]["created"] == [3, 0]
