# safenet_core/config.py
import os
import logging

from .constants import DEFAULT_URL_SCHEME


def log_level() -> int:
    """Level for package loggers, from SAFE_LOG_LEVEL (name or number)."""
    raw = os.getenv("SAFE_LOG_LEVEL", "INFO").strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO


def log_file():
    return os.getenv("SAFE_LOG_FILE") or None


def url_scheme() -> str:
    return os.getenv("SAFE_URL_SCHEME", DEFAULT_URL_SCHEME).lower()
