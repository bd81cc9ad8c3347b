"""Console and JSON output for parsed transcripts.

:func:`format_parse_summary` renders a short banner-style report of a
:class:`~kakao_transcript.models.transcript.TranscriptParseResult`;
:func:`result_to_dict` converts one into plain JSON-ready data, tagging each
display item with its ``type``.
"""

from __future__ import annotations

import sys
from typing import Any

from kakao_transcript.ingest import ExportBundle
from kakao_transcript.models.transcript import (
    DateMarker,
    DisplayItem,
    Message,
    SystemNotice,
    TranscriptParseResult,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def item_to_dict(item: DisplayItem) -> dict[str, Any]:
    """Convert one display item to a ``type``-tagged dict.

    Raises:
        TypeError: If *item* is not one of the display item classes.
    """
    if isinstance(item, Message):
        return {
            "type": "message",
            "id": item.item_id,
            "speaker": item.speaker,
            "body": item.body,
            "timestamp": item.timestamp,
            "is_continuation": item.is_continuation,
        }
    if isinstance(item, DateMarker):
        return {"type": "date", "id": item.item_id, "date": item.date}
    if isinstance(item, SystemNotice):
        return {"type": "system", "id": item.item_id, "content": item.content}
    raise TypeError(f"Unknown display item: {type(item).__name__}")


def result_to_dict(
    result: TranscriptParseResult,
    bundle: ExportBundle | None = None,
) -> dict[str, Any]:
    """Convert a parse result into JSON-serialisable data.

    Args:
        result: The parse result to convert.
        bundle: The export the result came from.  When given, the names of
            its image attachments are listed under ``"assets"``.

    Returns:
        A dict with ``title``, ``source``, ``speakers`` and ``items`` keys
        (plus ``assets`` when *bundle* is given).
    """
    data: dict[str, Any] = {
        "title": result.title,
        "source": result.source,
        "speakers": list(result.speakers),
        "items": [item_to_dict(item) for item in result.items],
    }
    if bundle is not None:
        data["assets"] = sorted(bundle.assets)
    return data


def format_parse_summary(
    result: TranscriptParseResult,
    bundle: ExportBundle | None = None,
) -> str:
    """Render a parse result as a short multi-line report.

    Args:
        result: The parse result to summarise.
        bundle: Optional export bundle; adds the transcript file name and
            attachment count.

    Returns:
        A multi-line string ready for console display.
    """
    messages = sum(1 for item in result.items if isinstance(item, Message))
    dates = sum(1 for item in result.items if isinstance(item, DateMarker))
    notices = sum(1 for item in result.items if isinstance(item, SystemNotice))

    lines = [_SEPARATOR, f"  {result.title}", _SEPARATOR]
    lines.append(f"  Source: {result.source}")
    if bundle is not None:
        lines.append(f"  Transcript: {bundle.transcript_name}")
        lines.append(f"  Images: {len(bundle.assets)}")

    speakers = ", ".join(result.speakers) if result.speakers else "none"
    lines.append(f"  Speakers: {speakers}")
    lines.append("")
    lines.append(f"  Messages: {messages}")
    lines.append(f"  Date markers: {dates}")
    lines.append(f"  System notices: {notices}")

    if dates:
        first = next(i for i in result.items if isinstance(i, DateMarker))
        last = next(i for i in reversed(result.items) if isinstance(i, DateMarker))
        lines.append(f"  Span: {first.date} ~ {last.date}")

    lines.append(_SEPARATOR)
    return "\n".join(lines)


def print_parse_summary(
    result: TranscriptParseResult,
    bundle: ExportBundle | None = None,
) -> None:
    """Format and print a parse summary to stdout."""
    sys.stdout.write(format_parse_summary(result, bundle) + "\n")
