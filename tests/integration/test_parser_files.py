"""Integration tests for file-based transcript parsing.

These tests exercise :func:`~kakao_transcript.parser.parse_transcript_file`
and :func:`~kakao_transcript.ingest.load_and_parse` against the fixture
files in ``tests/fixtures/``, covering file I/O, zip packaging and the
full parse.
"""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from kakao_transcript.ingest import load_and_parse
from kakao_transcript.models.transcript import DateMarker, Message, SystemNotice
from kakao_transcript.parser import DELETED_MESSAGE, parse_transcript_file

# Resolve the fixtures directory relative to this test file.
_FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


class TestParserFiles:
    """Integration tests for parse_transcript_file against fixture files."""

    def test_parse_sample_chat(self) -> None:
        fixture = _FIXTURES / "sample_chat.txt"

        result = parse_transcript_file(fixture)

        assert result.title == "개발자 님과 카카오톡 대화"
        assert result.source == str(fixture)
        assert result.speakers == ["개발자", "테스터"]
        assert result.items == [
            DateMarker(date="2024년 10월 24일 목요일"),
            Message(
                speaker="개발자",
                body="상단 삼선 바를 누르고 기다리면 DM테마로 바뀝니다.",
                timestamp="오전 7:00",
            ),
            Message(speaker="테스터", body="ㄷㄷ", timestamp="오전 7:00"),
            Message(speaker="테스터", body="진짜요?", timestamp="오전 7:00", is_continuation=True),
            Message(
                speaker="개발자",
                body="상단 삼선 바를 다시 누르면 기본 테마로 돌아갑니다.",
                timestamp="오전 7:10",
            ),
            Message(speaker="테스터", body="ㅇㅋ", timestamp="오전 7:10"),
        ]

    def test_parse_multiline_chat(self) -> None:
        result = parse_transcript_file(_FIXTURES / "multiline_chat.txt")

        assert result.speakers == ["민지", "준호"]
        assert [type(item) for item in result.items] == [
            DateMarker,
            Message,
            Message,
            SystemNotice,
            DateMarker,
            Message,
            Message,
        ]
        first = result.items[1]
        assert isinstance(first, Message)
        assert first.body == "이번 주말 일정 정리해봤어\n1. 토요일 : 등산\n2. 일요일 : 브런치"
        assert result.items[3] == SystemNotice(content=DELETED_MESSAGE)
        assert result.items[4] == DateMarker(date="2024년 3월 3일 일요일")
        assert [m.is_continuation for m in result.messages] == [False, False, False, True]

    def test_ids_are_sequential(self) -> None:
        result = parse_transcript_file(_FIXTURES / "multiline_chat.txt")

        assert [item.item_id for item in result.items] == list(range(1, 8))

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Transcript file not found"):
            parse_transcript_file(tmp_path / "nope.txt")

    def test_accepts_str_path(self) -> None:
        result = parse_transcript_file(str(_FIXTURES / "sample_chat.txt"))

        assert len(result.messages) == 5


class TestZipExport:
    """The fixture packaged the way the app exports it."""

    def test_zip_matches_plain_file(self, tmp_path: Path) -> None:
        fixture = _FIXTURES / "multiline_chat.txt"
        archive = tmp_path / "Talk_2024.3.4.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.write(fixture, "KakaoTalkChats.txt")
            zf.writestr("20240302_201500.jpg", b"\xff\xd8\xff")

        bundle, result = load_and_parse(archive)

        assert result.items == parse_transcript_file(fixture).items
        assert result.source == str(archive)
        assert list(bundle.assets) == ["20240302_201500.jpg"]
