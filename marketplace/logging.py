"""
Logging setup for the marketplace API.

One stdout handler on the root logger, level from LOG_LEVEL. The cart and
admin-gate loggers can be tuned on their own through CART_LOG_LEVEL and
AUTH_LOG_LEVEL, e.g. to trace cart mutations at DEBUG while the rest of
the app stays at INFO.

Usage:
    from marketplace.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Logger prefix -> env var that overrides its level
SUBSYSTEM_LEVEL_VARS = {
    "marketplace.cart": "CART_LOG_LEVEL",
    "marketplace.auth": "AUTH_LOG_LEVEL",
}

# CWE-117: values from requests must not forge log lines
_CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def _level_from_env(var: str) -> int | None:
    name = os.environ.get(var)
    if not name:
        return None
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def configure_logging() -> None:
    """Install the stdout handler (once) and apply levels from the environment."""
    root = logging.getLogger()

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        # Compact format on Vercel, timestamps locally
        is_production = os.environ.get("VERCEL") == "1"
        handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if is_production else LOG_FORMAT))
        root.addHandler(handler)

    root.setLevel(_level_from_env("LOG_LEVEL") or logging.INFO)

    for prefix, var in SUBSYSTEM_LEVEL_VARS.items():
        logging.getLogger(prefix).setLevel(_level_from_env(var) or logging.NOTSET)

    # Every Supabase call is an httpx request
    logging.getLogger("httpx").setLevel(logging.WARNING)


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _escape(value: object) -> str:
    return str(value).translate(_CONTROL_CHARS)


def sanitize_id_for_logging(id_value: str | None) -> str:
    """Escaped, first 8 chars only; "N/A" when empty."""
    if not id_value:
        return "N/A"
    return _escape(id_value)[:8]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Escaped and cut to max_length (with "..."); "N/A" when empty."""
    if not value:
        return "N/A"
    safe_value = _escape(value)
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "SUBSYSTEM_LEVEL_VARS",
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
