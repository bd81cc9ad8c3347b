"""Logging setup for kakao-transcript.

One stderr handler, ISO 8601 timestamps, pipe-separated fields.
"""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Marks the handler installed here so repeated setup calls reuse it and
# leave handlers added by other code alone.
_HANDLER_ATTR = "_kakao_transcript_handler"


def _find_handler(root: logging.Logger) -> logging.Handler | None:
    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            return handler
    return None


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger for CLI use.

    Safe to call more than once: a second call only changes the level.

    Args:
        level: A standard logging level name, case-insensitive
            (e.g. ``"debug"``, ``"INFO"``).

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    handler = _find_handler(root)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)

    handler.setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger called *name* (usually the caller's ``__name__``)."""
    return logging.getLogger(name)
