"""Environment-driven settings for the analytics service.

Values are read once at import time. Only ambient concerns (logging, CORS)
are configurable; the nutrition and activity constants live with the
services that use them.
"""

import logging
import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> list:
    raw = os.getenv(name, default)
    return [x.strip() for x in raw.split(",") if x.strip()]


LOG_LEVEL = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").strip().upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO

# File logging is opt-in so importing the engine never touches the filesystem.
LOG_TO_FILE = _env_bool("LOG_TO_FILE", False)
LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))
LOG_FILE = os.path.join(LOG_DIR, "app.log")

CORS_ALLOW_ORIGINS = _env_list("CORS_ALLOW_ORIGINS", "*")
