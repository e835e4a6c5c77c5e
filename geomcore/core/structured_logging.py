"""
Structured Logging — JSON line output for the geomcore logger namespace

Modules log through `logging.getLogger(__name__)`. Structured fields go in
the `extra` mapping under the key "extra":

    logger.debug("sequence shape clamped", extra={"extra": {"dimension": 3}})

The formatter merges those fields into the JSON payload:

    {"level": "DEBUG", "logger": "geomcore.sequences.factory",
     "msg": "sequence shape clamped", "dimension": 3}

Nothing is emitted unless configure_logging is called or the host
application attaches its own handlers.
"""

import json
import logging
import sys
from typing import Final, TextIO

ROOT_LOGGER_NAME: Final[str] = "geomcore"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    level: int | str = "WARNING", stream: TextIO | None = None
) -> logging.Logger:
    """
    Attach a JSON stream handler to the geomcore logger.

    Calling it again only changes the level; the handler is added once.

    Args:
        level: Logging level name or number
        stream: Output stream (default: sys.stdout)

    Returns:
        The geomcore package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
