"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.

Level and output stream come from LOG_LEVEL and LOG_STREAM in config.py.
The handler installed here is named, so configuring twice (or after a test
runner has added its own handlers) never duplicates output.
"""

import logging
import sys

from config import LOG_LEVEL, LOG_STREAM

HANDLER_NAME = "dbconnect"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_STREAMS = {"stdout": sys.stdout, "stderr": sys.stderr}


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _configure_root() -> logging.Handler:
    """Attach the dbconnect handler to the root logger unless it is already there."""
    root = logging.getLogger()
    for handler in root.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler

    handler = logging.StreamHandler(_STREAMS.get(LOG_STREAM, sys.stdout))
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(_resolve_level(LOG_LEVEL))
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    _configure_root()
    return logging.getLogger(name)
