"""Logging helpers for the application.

Provides a convenience `get_logger` factory that attaches a shared stream
handler and, when `LOG_TO_FILE` is enabled, a rotating file handler.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from core.config import LOG_DIR, LOG_FILE, LOG_LEVEL, LOG_TO_FILE

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(_formatter)

_file_handler = None
if LOG_TO_FILE:
    os.makedirs(LOG_DIR, exist_ok=True)
    _file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
    _file_handler.setFormatter(_formatter)


def get_logger(name: str = __name__, level: int = LOG_LEVEL) -> logging.Logger:
    """Return a configured logger with stream (and optional file) handlers.

    Ensures a consistent logging setup across the application and avoids
    adding duplicate handlers when called multiple times.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        logger.addHandler(_stream_handler)
        if _file_handler is not None:
            logger.addHandler(_file_handler)
    return logger
