"""Shared fixtures for kakao-transcript tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

_ENV_VARS = ("LOG_LEVEL", "TRANSCRIPT_ENCODING", "DEFAULT_TITLE")

SAMPLE_EXPORT = (
    "개발자 님과 카카오톡 대화\n"
    "저장한 날짜 : 2025년 10월 25일 오후 6:24\n"
    "\n"
    "\n"
    "\n"
    "2024년 10월 24일 오전 7:00\n"
    "2024년 10월 24일 오전 7:00, 개발자 : 상단 삼선 바를 누르고 기다리면 DM테마로 바뀝니다.\n"
    "2024년 10월 24일 오전 7:00, 테스터 : ㄷㄷ\n"
    "\n"
    "2024년 10월 24일 오전 7:10\n"
    "2024년 10월 24일 오전 7:10, 개발자 : 상단 삼선 바를 다시 누르면 기본 테마로 돌아갑니다.\n"
    "2024년 10월 24일 오전 7:10, 테스터 : ㅇㅋ\n"
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all kakao-transcript environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("kakao_transcript.config.load_dotenv", lambda *_a, **_kw: None)
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def sample_export() -> str:
    """A small two-speaker export in the app's own demo format."""
    return SAMPLE_EXPORT


@pytest.fixture()
def sample_txt(tmp_path: Path, sample_export: str) -> Path:
    """The sample export written to ``KakaoTalkChats.txt``."""
    path = tmp_path / "KakaoTalkChats.txt"
    path.write_text(sample_export, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
