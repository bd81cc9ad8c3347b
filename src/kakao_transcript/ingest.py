"""Loading KakaoTalk exports from disk.

An export reaches us in one of three shapes:

- the bare ``.txt`` transcript,
- the ``.zip`` archive produced by "export chat", holding the transcript
  plus any attached images,
- a folder copied off the phone (``.../KakaoTalk/Chats/<room>/``).

:func:`load_export` normalises all three into an :class:`ExportBundle`;
:func:`load_and_parse` also runs the parser over the transcript text.
"""

from __future__ import annotations

import codecs
import re
import zipfile
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from kakao_transcript.exceptions import IngestError
from kakao_transcript.log import get_logger
from kakao_transcript.models.transcript import DEFAULT_TITLE, TranscriptParseResult
from kakao_transcript.parser import parse_transcript

logger = get_logger(__name__)

# File name the mobile app uses inside an exported chat folder.
PREFERRED_TRANSCRIPT_NAME = "KakaoTalkChats.txt"

_IMAGE_RE = re.compile(r"\.(jpg|jpeg|png|gif)$", re.IGNORECASE)


@dataclass(frozen=True)
class ExportBundle:
    """Transcript text plus the attachments that came with it.

    Attributes:
        text: Decoded transcript text.
        source: Path of the export that was loaded.
        transcript_name: Name of the transcript file (or archive member).
        assets: Image attachments keyed by base filename.
    """

    text: str
    source: str
    transcript_name: str
    assets: dict[str, bytes] = field(default_factory=dict)


def is_image_name(name: str) -> bool:
    """Return ``True`` for ``.jpg``/``.jpeg``/``.png``/``.gif`` names."""
    return bool(_IMAGE_RE.search(name))


def _decode(data: bytes, encoding: str, path: Path) -> str:
    # utf-8-sig drops a leading byte-order mark and otherwise decodes as utf-8.
    codec = "utf-8-sig" if codecs.lookup(encoding).name == "utf-8" else encoding
    try:
        return data.decode(codec)
    except UnicodeDecodeError as exc:
        raise IngestError(
            f"Cannot decode transcript as {encoding}: {path}", path=path
        ) from exc


def _load_text_file(path: Path, encoding: str) -> ExportBundle:
    text = _decode(path.read_bytes(), encoding, path)
    return ExportBundle(text=text, source=str(path), transcript_name=path.name)


def _load_zip(path: Path, encoding: str) -> ExportBundle:
    try:
        archive = zipfile.ZipFile(path)
    except zipfile.BadZipFile as exc:
        raise IngestError(f"Not a valid zip archive: {path}", path=path) from exc

    with archive:
        members = [info for info in archive.infolist() if not info.is_dir()]

        transcript = next((m for m in members if m.filename.endswith(".txt")), None)
        if transcript is None:
            raise IngestError(f"No .txt transcript found in archive: {path}", path=path)

        try:
            raw_text = archive.read(transcript)
            assets = {
                PurePosixPath(m.filename).name: archive.read(m)
                for m in members
                if is_image_name(m.filename)
            }
        except (zipfile.BadZipFile, NotImplementedError) as exc:
            raise IngestError(
                f"Corrupt or unsupported zip member in {path}: {exc}", path=path
            ) from exc

    text = _decode(raw_text, encoding, path)

    return ExportBundle(
        text=text,
        source=str(path),
        transcript_name=transcript.filename,
        assets=assets,
    )


def _load_directory(path: Path, encoding: str) -> ExportBundle:
    files = sorted(p for p in path.iterdir() if p.is_file())

    transcript = next((p for p in files if p.name == PREFERRED_TRANSCRIPT_NAME), None)
    if transcript is None:
        transcript = next((p for p in files if p.name.endswith(".txt")), None)
    if transcript is None:
        raise IngestError(f"No .txt transcript found in folder: {path}", path=path)

    text = _decode(transcript.read_bytes(), encoding, transcript)
    assets = {p.name: p.read_bytes() for p in files if is_image_name(p.name)}

    return ExportBundle(
        text=text,
        source=str(path),
        transcript_name=transcript.name,
        assets=assets,
    )


def load_export(path: str | Path, encoding: str = "utf-8") -> ExportBundle:
    """Load transcript text and image attachments from an export.

    Args:
        path: A ``.txt`` file, a ``.zip`` archive, or an export folder.
        encoding: Encoding of the transcript text.

    Returns:
        The loaded :class:`ExportBundle`.

    Raises:
        IngestError: If *path* does not exist, has an unsupported type, is
            a corrupt archive, contains no transcript, or cannot be decoded.
    """
    path = Path(path)

    if not path.exists():
        raise IngestError(f"Export not found: {path}", path=path)

    if path.is_dir():
        bundle = _load_directory(path, encoding)
    elif path.suffix.lower() == ".zip":
        bundle = _load_zip(path, encoding)
    elif path.suffix.lower() == ".txt":
        bundle = _load_text_file(path, encoding)
    else:
        raise IngestError(
            f"Unsupported export type (expected .txt, .zip or a folder): {path}",
            path=path,
        )

    logger.info(
        "Loaded transcript %s from %s with %d image(s)",
        bundle.transcript_name,
        bundle.source,
        len(bundle.assets),
    )
    return bundle


def load_and_parse(
    path: str | Path,
    encoding: str = "utf-8",
    default_title: str = DEFAULT_TITLE,
) -> tuple[ExportBundle, TranscriptParseResult]:
    """Load an export and parse its transcript.

    Raises:
        IngestError: See :func:`load_export`.
    """
    bundle = load_export(path, encoding=encoding)
    result = parse_transcript(
        bundle.text,
        source=bundle.source,
        default_title=default_title,
    )
    return bundle, result
