"""Parser for KakaoTalk "export chat" text transcripts.

Turns the line-oriented export format into an ordered list of
:data:`~kakao_transcript.models.transcript.DisplayItem` values wrapped in a
:class:`~kakao_transcript.models.transcript.TranscriptParseResult`.

An export looks like::

    개발자 님과 카카오톡 대화
    저장한 날짜 : 2025년 10월 25일 오후 6:24

    2024년 1월 1일 오전 9:00
    2024년 1월 1일 오전 9:00, 개발자 : 안녕하세요
    두 번째 줄
    메시지가 삭제되었습니다.

The first three lines are a header block (title, save date, blank line).
Each body line is classified in order: deleted-message sentinel, date-only
header, message line, and finally continuation of the message in progress.
"""

from __future__ import annotations

import datetime
import itertools
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from kakao_transcript.models.transcript import (
    DEFAULT_TITLE,
    DateMarker,
    DisplayItem,
    Message,
    SystemNotice,
    TranscriptParseResult,
)

logger = logging.getLogger(__name__)

IdAllocator = Callable[[], int]

DELETED_MESSAGE = "메시지가 삭제되었습니다."

# Sunday first, matching the export's weekday numbering.
WEEKDAYS = ("일", "월", "화", "수", "목", "금", "토")

# Title line, save-date line, blank separator.
_HEADER_LINES = 3

# Exports saved by some desktop editors start with a UTF-8 byte-order mark.
_BOM = "\ufeff"

_DATE = r"\d{4}년 \d{1,2}월 \d{1,2}일"
_TIMESTAMP = rf"{_DATE} (?:오전|오후) \d{{1,2}}:\d{{2}}"

# 2024년 1월 1일 오전 9:00
_DATE_HEADER_RE = re.compile(rf"^({_DATE}) (?:오전|오후) \d{{1,2}}:\d{{2}}$", re.ASCII)

# 2024년 1월 1일 오전 9:00, Speaker : text
# Non-greedy speaker stops at the first " : "; the body may contain more.
_MESSAGE_RE = re.compile(rf"^({_TIMESTAMP}), (.+?) : (.*)$", re.ASCII)

_DATE_PREFIX_RE = re.compile(rf"^{_DATE}", re.ASCII)
_DATE_PARTS_RE = re.compile(r"(\d{4})년 (\d{1,2})월 (\d{1,2})일", re.ASCII)
_DISPLAY_TIME_RE = re.compile(r"(오전|오후)\s(\d{1,2}:\d{2})", re.ASCII)


def format_date_label(date_text: str) -> str:
    """Append the Korean weekday to a ``YYYY년 M월 D일`` date.

    Args:
        date_text: Date text as it appears in the export.

    Returns:
        ``"<date_text> <weekday>요일"``, or *date_text* unchanged when it
        does not contain a valid calendar date.
    """
    match = _DATE_PARTS_RE.search(date_text)
    if not match:
        return date_text

    year, month, day = (int(part) for part in match.groups())
    try:
        date = datetime.date(year, month, day)
    except ValueError:
        return date_text

    # isoweekday(): Monday=1 .. Sunday=7, so % 7 puts Sunday at index 0.
    return f"{date_text} {WEEKDAYS[date.isoweekday() % 7]}요일"


def extract_display_time(timestamp: str) -> str:
    """Return the ``"오전 9:00"`` part of a full timestamp, or ``""``."""
    match = _DISPLAY_TIME_RE.search(timestamp)
    return f"{match.group(1)} {match.group(2)}" if match else ""


@dataclass(frozen=True)
class _ParserState:
    """Everything the line classifier carries from one line to the next.

    Attributes:
        last_date: Label of the most recently emitted date marker.
        pending: Message still absorbing continuation lines.  ``None``
            after a deletion notice or a date header.
        last_item: Most recently emitted item, including *pending*.
    """

    last_date: str | None = None
    pending: Message | None = None
    last_item: DisplayItem | None = None


class _LineClassifier:
    """Single-pass state machine over transcript body lines.

    :meth:`step` maps ``(state, line)`` to ``(state, finished_items)``.
    A message is only finished once the next structural line arrives (or
    at :meth:`finish`), since following lines may still extend its body.
    """

    def __init__(self, next_id: IdAllocator) -> None:
        self._next_id = next_id
        self.speakers: dict[str, None] = {}

    def step(
        self,
        state: _ParserState,
        line: str,
        line_number: int,
    ) -> tuple[_ParserState, list[DisplayItem]]:
        if line == DELETED_MESSAGE:
            return self._deleted(state)

        header = _DATE_HEADER_RE.match(line)
        if header:
            return self._date_header(state, header.group(1))

        message = _MESSAGE_RE.match(line)
        if message:
            return self._message(state, *message.groups())

        if state.pending is not None:
            pending = replace(state.pending, body=f"{state.pending.body}\n{line}")
            return replace(state, pending=pending, last_item=pending), []

        logger.debug("Discarding line %d outside any message: %r", line_number, line)
        return state, []

    def finish(self, state: _ParserState) -> list[DisplayItem]:
        """Flush the message still in progress, if any."""
        return [state.pending] if state.pending is not None else []

    # -- rules ----------------------------------------------------------

    def _deleted(self, state: _ParserState) -> tuple[_ParserState, list[DisplayItem]]:
        emitted = self.finish(state)
        notice = SystemNotice(content=DELETED_MESSAGE, item_id=self._next_id())
        emitted.append(notice)
        return replace(state, pending=None, last_item=notice), emitted

    def _date_header(
        self, state: _ParserState, date_text: str
    ) -> tuple[_ParserState, list[DisplayItem]]:
        emitted = self.finish(state)
        state = replace(state, pending=None)

        label = format_date_label(date_text)
        if label != state.last_date:
            marker = DateMarker(date=label, item_id=self._next_id())
            emitted.append(marker)
            state = replace(state, last_date=label, last_item=marker)

        return state, emitted

    def _message(
        self,
        state: _ParserState,
        full_timestamp: str,
        speaker: str,
        body: str,
    ) -> tuple[_ParserState, list[DisplayItem]]:
        emitted = self.finish(state)
        speaker = speaker.strip()

        date_match = _DATE_PREFIX_RE.match(full_timestamp)
        if date_match:
            label = format_date_label(date_match.group(0))
            if label != state.last_date:
                marker = DateMarker(date=label, item_id=self._next_id())
                emitted.append(marker)
                state = replace(state, last_date=label, last_item=marker)

        timestamp = extract_display_time(full_timestamp)
        previous = state.last_item
        is_continuation = (
            isinstance(previous, Message)
            and previous.speaker == speaker
            and previous.timestamp == timestamp
        )

        pending = Message(
            speaker=speaker,
            body=body.strip(),
            timestamp=timestamp,
            is_continuation=is_continuation,
            item_id=self._next_id(),
        )
        self.speakers.setdefault(speaker, None)
        return replace(state, pending=pending, last_item=pending), emitted


def parse_transcript(
    text: str,
    source: str = "<string>",
    id_allocator: IdAllocator | None = None,
    default_title: str = DEFAULT_TITLE,
) -> TranscriptParseResult:
    """Parse a KakaoTalk export string into display items.

    Never raises on malformed input: lines that fit no rule are appended to
    the message in progress, or dropped when there is none.

    Args:
        text: The raw export text, ``\\n``-separated.
        source: Label for the transcript origin (e.g. a file path).
            Defaults to ``"<string>"``.
        id_allocator: Zero-argument callable handing out item ids.  Defaults
            to a fresh counter starting at 1, so ids follow emission order.
            Pass a shared allocator to keep ids unique across several parses.
        default_title: Title used when the first line is blank.

    Returns:
        A :class:`TranscriptParseResult` with items in transcript order,
        speakers in first-seen order, and the title.
    """
    lines = [line.strip() for line in text.removeprefix(_BOM).split("\n")]
    title = lines[0] or default_title

    body = lines[_HEADER_LINES:]
    if not any(body):
        logger.info("Empty transcript: %s", source)
        return TranscriptParseResult(title=title, source=source)

    classifier = _LineClassifier(id_allocator or itertools.count(1).__next__)
    state = _ParserState()
    items: list[DisplayItem] = []

    for line_number, line in enumerate(body, start=_HEADER_LINES + 1):
        if not line:
            continue
        state, emitted = classifier.step(state, line, line_number)
        items.extend(emitted)
    items.extend(classifier.finish(state))

    speakers = list(classifier.speakers)
    message_count = sum(1 for item in items if isinstance(item, Message))
    logger.info(
        "Parsed %s: %d item(s), %d message(s), %d speaker(s)",
        source,
        len(items),
        message_count,
        len(speakers),
    )

    return TranscriptParseResult(
        items=items,
        speakers=speakers,
        title=title,
        source=source,
    )


def parse_transcript_file(
    file_path: str | Path,
    encoding: str = "utf-8",
) -> TranscriptParseResult:
    """Parse an exported ``.txt`` transcript file.

    Args:
        file_path: Path to the transcript file.  Accepts both
            :class:`str` and :class:`~pathlib.Path`.
        encoding: Text encoding of the file.

    Returns:
        A :class:`TranscriptParseResult` with ``source`` set to the
        string representation of *file_path*.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Transcript file not found: {path}")

    text = path.read_text(encoding=encoding)
    return parse_transcript(text, source=str(path))
