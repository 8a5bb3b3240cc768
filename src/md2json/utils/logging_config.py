"""Logging setup shared by the md2json CLI."""

from __future__ import annotations

import logging
import sys

from md2json.config import MD2JSON_LOG_FORMAT, MD2JSON_LOG_LEVEL

_ROOT_LOGGER_NAME = "md2json"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Send md2json log records to stderr at the given level.

    Calling this more than once replaces the previously installed handler
    instead of stacking a second one.
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_md2json_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(MD2JSON_LOG_FORMAT))
    handler._md2json_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level if level is not None else MD2JSON_LOG_LEVEL)
    return logger
