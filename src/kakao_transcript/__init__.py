"""kakao-transcript: KakaoTalk chat export parser.

Turns the text transcript produced by KakaoTalk's "export chat" feature
into an ordered list of messages, date markers and system notices.
"""

from __future__ import annotations

from kakao_transcript.exceptions import IngestError, KakaoTranscriptError
from kakao_transcript.ingest import ExportBundle, load_and_parse, load_export
from kakao_transcript.models.transcript import (
    DEFAULT_TITLE,
    DateMarker,
    DisplayItem,
    Message,
    SystemNotice,
    TranscriptParseResult,
)
from kakao_transcript.parser import (
    DELETED_MESSAGE,
    extract_display_time,
    format_date_label,
    parse_transcript,
    parse_transcript_file,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TITLE",
    "DELETED_MESSAGE",
    "DateMarker",
    "DisplayItem",
    "ExportBundle",
    "IngestError",
    "KakaoTranscriptError",
    "Message",
    "SystemNotice",
    "TranscriptParseResult",
    "extract_display_time",
    "format_date_label",
    "load_and_parse",
    "load_export",
    "parse_transcript",
    "parse_transcript_file",
]
