"""Entry point for ``python -m kakao_transcript``.

Loads a KakaoTalk export (``.txt``, ``.zip`` or folder), parses it and
prints either a short summary or the full item list as JSON.  Uses stdlib
:mod:`argparse` for argument parsing.

Exit codes:
    0 -- Export parsed (including an empty transcript).
    1 -- An error occurred (export missing or unreadable, config error).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import json
import sys

from kakao_transcript.config import ConfigError, load_settings
from kakao_transcript.exceptions import IngestError
from kakao_transcript.ingest import load_and_parse
from kakao_transcript.log import setup_logging
from kakao_transcript.summary import print_parse_summary, result_to_dict


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="kakao-transcript",
        description="Parse an exported KakaoTalk chat into display items.",
    )
    parser.add_argument(
        "export_path",
        type=str,
        help="Path to the exported .txt file, .zip archive, or chat folder.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the parsed items as JSON instead of a summary.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the kakao-transcript CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        bundle, result = load_and_parse(
            args.export_path,
            encoding=settings.encoding,
            default_title=settings.default_title,
        )
    except (IngestError, PermissionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        payload = result_to_dict(result, bundle)
        sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2) + "\n")
    else:
        print_parse_summary(result, bundle)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
