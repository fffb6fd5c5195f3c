"""Errors raised by attachment extraction and storage."""

from __future__ import annotations


class AttachmentError(Exception):
    """Base class for every error raised by this package."""


class MessageParseError(AttachmentError):
    """Raw input is not a well-formed message."""

    def __init__(self, message: str = "Failed to parse message") -> None:
        super().__init__(message)


class NestingTooDeepError(MessageParseError):
    """Nested messages exceed the configured depth limit."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Message nesting exceeds maximum depth of {max_depth}")


class AttachmentWriteError(AttachmentError):
    """Creating the destination directory or writing a file failed.

    The original ``OSError`` is kept on ``cause`` (and chained as
    ``__cause__`` by the raiser). Rollback failures never replace it.
    """

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"Failed to write to disk: {cause}")
