"""Infrastructure layer - MIME parsing, attachment storage, and configuration."""

from mail_attachments.infrastructure.attachments.disk_store import DiskAttachmentStore
from mail_attachments.infrastructure.attachments.store import AttachmentStore
from mail_attachments.infrastructure.email.mime_tree import MessagePart, parse_message
from mail_attachments.infrastructure.email.rfc822 import (
    DEFAULT_MAX_NESTING_DEPTH,
    extract_attachments,
)
from mail_attachments.infrastructure.settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Email parsing
    "MessagePart",
    "parse_message",
    "extract_attachments",
    "DEFAULT_MAX_NESTING_DEPTH",
    # Storage
    "AttachmentStore",
    "DiskAttachmentStore",
]
