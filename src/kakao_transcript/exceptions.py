"""Custom exceptions for kakao-transcript.

The parser itself never raises on bad input; these cover loading an export
from disk before there is any text to parse.
"""

from __future__ import annotations

from pathlib import Path


class KakaoTranscriptError(Exception):
    """Base class for all kakao-transcript errors."""


class IngestError(KakaoTranscriptError):
    """Raised when an export cannot be turned into transcript text.

    This covers missing paths, unsupported file types, corrupt zip
    archives, archives or folders without a ``.txt`` transcript, and text
    that cannot be decoded with the configured encoding.

    Attributes:
        path: The export path that failed to load.
    """

    def __init__(self, message: str, path: str | Path = "") -> None:
        super().__init__(message)
        self.path = str(path)
