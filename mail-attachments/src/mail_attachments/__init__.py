"""Extract file attachments from RFC822 messages and store them on disk."""

from mail_attachments.application import (
    ExtractAndStoreUseCase,
    ExtractAttachmentsUseCase,
    extract,
    extract_and_store,
    filter_by_mime_type,
)
from mail_attachments.domain import (
    Attachment,
    AttachmentError,
    AttachmentWriteError,
    MessageParseError,
    NestingTooDeepError,
    StoreOptions,
)

__all__ = [
    "extract",
    "extract_and_store",
    "filter_by_mime_type",
    "ExtractAttachmentsUseCase",
    "ExtractAndStoreUseCase",
    "Attachment",
    "StoreOptions",
    "AttachmentError",
    "MessageParseError",
    "NestingTooDeepError",
    "AttachmentWriteError",
]
