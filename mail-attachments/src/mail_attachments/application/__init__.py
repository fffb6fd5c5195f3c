"""Application layer - extraction use cases and attachment filtering."""

from mail_attachments.application.mime_filter import filter_by_mime_type
from mail_attachments.application.use_cases.extract_attachments import (
    ExtractAndStoreUseCase,
    ExtractAttachmentsUseCase,
    extract,
    extract_and_store,
)

__all__ = [
    "ExtractAttachmentsUseCase",
    "ExtractAndStoreUseCase",
    "extract",
    "extract_and_store",
    "filter_by_mime_type",
]
