"""
CLI logging for the `wse_finance` package logger.

Records from every module logger (wse_finance.finance.irr, ...) end up on
one stderr handler, formatted either as console lines or as JSON objects
for machine-read batch runs. The root logger is left alone.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any, Optional

PACKAGE_LOGGER = "wse_finance"
CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """One JSON object per record: ts, level, logger, msg (+ exc)."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(
    json_format: bool = False,
    level: int = logging.WARNING,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    (Re)configure the package logger and return it. Safe to call more than
    once: the previous handler is replaced, not stacked.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    # own handler; do not duplicate through whatever the host app put on root
    logger.propagate = False
    return logger


__all__ = ["JSONFormatter", "setup_logging", "PACKAGE_LOGGER"]
