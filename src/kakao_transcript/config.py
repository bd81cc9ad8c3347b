"""Configuration loading for kakao-transcript.

Reads settings from environment variables (with .env support via python-dotenv)
and validates them.  Every setting is optional.
"""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from kakao_transcript.models.transcript import DEFAULT_TITLE


class ConfigError(Exception):
    """Raised when a configuration value is invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (default ``"INFO"``).
        encoding: Text encoding of exported transcripts (default
            ``"utf-8"``).
        default_title: Title used when an export's first line is blank.
    """

    log_level: str = "INFO"
    encoding: str = "utf-8"
    default_title: str = DEFAULT_TITLE


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the project root
    is picked up automatically.  Unset or blank variables fall back to the
    :class:`Settings` defaults.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``LOG_LEVEL`` is not a standard logging level or
            ``TRANSCRIPT_ENCODING`` is not a codec Python knows.  The error
            message names **all** invalid variables.
    """
    load_dotenv()

    values: dict[str, str] = {}
    invalid: list[str] = []

    log_level = os.environ.get("LOG_LEVEL", "").strip().upper()
    if log_level:
        if isinstance(logging.getLevelName(log_level), int):
            values["log_level"] = log_level
        else:
            invalid.append(f"LOG_LEVEL={log_level!r}")

    encoding = os.environ.get("TRANSCRIPT_ENCODING", "").strip()
    if encoding:
        try:
            codecs.lookup(encoding)
        except LookupError:
            invalid.append(f"TRANSCRIPT_ENCODING={encoding!r}")
        else:
            values["encoding"] = encoding

    default_title = os.environ.get("DEFAULT_TITLE", "").strip()
    if default_title:
        values["default_title"] = default_title

    if invalid:
        raise ConfigError(f"Invalid environment variables: {', '.join(invalid)}")

    return Settings(**values)
