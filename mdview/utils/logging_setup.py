from __future__ import annotations

import logging
import sys

LOGGER_NAME = "mdview"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Configure the package logger with a single stderr handler.

    Safe to call more than once: the handler is only attached the first time.
    Unknown level names fall back to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(level)
    if not any(getattr(h, "_mdview", False) for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._mdview = True  # type: ignore[attr-defined]
        root_logger.addHandler(handler)
    return root_logger
