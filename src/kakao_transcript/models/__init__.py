"""Data models for kakao-transcript."""

from __future__ import annotations

from kakao_transcript.models.transcript import (
    DEFAULT_TITLE,
    DateMarker,
    DisplayItem,
    Message,
    SystemNotice,
    TranscriptParseResult,
)

__all__ = [
    "DEFAULT_TITLE",
    "DateMarker",
    "DisplayItem",
    "Message",
    "SystemNotice",
    "TranscriptParseResult",
]
