"""One-shot attachment extraction from a raw RFC822 message."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from mail_attachments.application.use_cases.extract_attachments import (
    ExtractAndStoreUseCase,
    ExtractAttachmentsUseCase,
)
from mail_attachments.domain.errors import AttachmentWriteError, MessageParseError
from mail_attachments.domain.models import StoreOptions
from mail_attachments.infrastructure.settings import get_settings

EXIT_PARSE_ERROR = 1
EXIT_WRITE_ERROR = 2


def _read_message(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mail-attachments",
        description="Extract attachments from an RFC822 message",
    )
    parser.add_argument("message", help="Path to the raw message, or - for stdin")
    parser.add_argument("--list", action="store_true", help="List attachments instead of writing them")
    parser.add_argument(
        "--mime-type",
        dest="mime_types",
        action="append",
        default=[],
        help="Only keep this exact content type (repeatable)",
    )
    parser.add_argument("--directory", default=".", help="Destination directory (default: .)")
    parser.add_argument("--prefix", default="", help="Prefix for every written filename")
    parser.add_argument("--max-depth", type=int, default=None, help="Override the nested message depth limit")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=settings.log_level,
    )

    try:
        raw = _read_message(args.message)
    except OSError as e:
        logger.error(f"Cannot read {args.message}: {e}")
        return EXIT_PARSE_ERROR

    try:
        if args.list:
            attachments = ExtractAttachmentsUseCase(max_depth=args.max_depth).run(raw)
            for att in attachments:
                print(f"{att.name}\t{att.content_type or '-'}\t{att.size_bytes}")
            return 0

        options = StoreOptions(mime_types=args.mime_types, directory=args.directory, prefix=args.prefix)
        filenames = ExtractAndStoreUseCase(max_depth=args.max_depth).run(raw, options)
    except MessageParseError as e:
        logger.error(str(e))
        return EXIT_PARSE_ERROR
    except AttachmentWriteError as e:
        logger.error(str(e))
        return EXIT_WRITE_ERROR

    for filename in filenames:
        print(filename)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
