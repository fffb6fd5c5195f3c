"""Domain models and entities."""

from mail_attachments.domain.entities.attachment import UNTITLED, Attachment
from mail_attachments.domain.errors import (
    AttachmentError,
    AttachmentWriteError,
    MessageParseError,
    NestingTooDeepError,
)
from mail_attachments.domain.models import PartKind, StoreOptions

__all__ = [
    "Attachment",
    "UNTITLED",
    "PartKind",
    "StoreOptions",
    "AttachmentError",
    "MessageParseError",
    "NestingTooDeepError",
    "AttachmentWriteError",
]
