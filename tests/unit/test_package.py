"""Tests for kakao-transcript package structure and imports."""

from __future__ import annotations

import re
import subprocess
import sys


def test_package_is_importable() -> None:
    """``import kakao_transcript`` must succeed without errors."""
    import kakao_transcript  # noqa: F401


def test_package_version_is_semver() -> None:
    import kakao_transcript

    assert re.match(r"^\d+\.\d+\.\d+$", kakao_transcript.__version__)


def test_public_api_exported() -> None:
    import kakao_transcript

    for name in kakao_transcript.__all__:
        assert hasattr(kakao_transcript, name), name


def test_main_module_shows_help() -> None:
    """``python -m kakao_transcript --help`` must run and exit cleanly."""
    result = subprocess.run(
        [sys.executable, "-m", "kakao_transcript", "--help"],
        capture_output=True,
        text=True,
        timeout=10,
    )
    assert result.returncode == 0
    assert "usage" in result.stdout.lower()
    assert "Traceback" not in result.stderr
