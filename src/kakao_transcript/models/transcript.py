"""Display item models for parsed KakaoTalk chat exports.

These dataclasses represent the structured output of the transcript parser.
They are plain frozen stdlib dataclasses: the parser builds the whole item
list in one pass and hands it out as a snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

DEFAULT_TITLE = "카카오톡 대화"


@dataclass(frozen=True)
class Message:
    """A single chat message.

    Attributes:
        speaker: Speaker name, trimmed.
        body: Message text, which may be multi-line (joined with ``\\n``).
        timestamp: Display time such as ``"오전 9:00"``, or ``""`` when the
            full timestamp carried no recognisable time.
        is_continuation: ``True`` when the previous emitted item is a
            message from the same speaker with the same display time.
        item_id: Identity token used only for UI diffing.  Excluded from
            equality.
    """

    speaker: str
    body: str
    timestamp: str = ""
    is_continuation: bool = False
    item_id: int = field(default=0, compare=False)


@dataclass(frozen=True)
class DateMarker:
    """A day separator, e.g. ``"2024년 1월 1일 월요일"``."""

    date: str
    item_id: int = field(default=0, compare=False)


@dataclass(frozen=True)
class SystemNotice:
    """A notice line such as the deleted-message sentinel."""

    content: str
    item_id: int = field(default=0, compare=False)


DisplayItem = Union[Message, DateMarker, SystemNotice]


@dataclass(frozen=True)
class TranscriptParseResult:
    """Top-level return type from the transcript parser.

    The dataclass is frozen but ``items`` and ``speakers`` are plain lists.
    Every parse builds fresh lists and hands them to the caller, so editing
    them (e.g. after a user edits a message) never affects another result.

    Attributes:
        items: Display items, in transcript order.
        speakers: Unique speaker names, ordered by first appearance.
        title: First line of the export, or :data:`DEFAULT_TITLE`.
        source: File path of the parsed transcript, or ``"<string>"``
            when parsing from a string.
    """

    items: list[DisplayItem] = field(default_factory=list)
    speakers: list[str] = field(default_factory=list)
    title: str = DEFAULT_TITLE
    source: str = "<string>"

    @property
    def messages(self) -> list[Message]:
        """Only the :class:`Message` items, in order."""
        return [item for item in self.items if isinstance(item, Message)]
