"""Extract attachments from raw messages and optionally store them on disk."""

from __future__ import annotations

from typing import Optional, Union

from loguru import logger

from mail_attachments.application.mime_filter import filter_by_mime_type
from mail_attachments.domain.entities.attachment import Attachment
from mail_attachments.domain.models import StoreOptions
from mail_attachments.infrastructure.attachments.disk_store import DiskAttachmentStore
from mail_attachments.infrastructure.attachments.store import AttachmentStore
from mail_attachments.infrastructure.email.mime_tree import parse_message
from mail_attachments.infrastructure.email.rfc822 import extract_attachments
from mail_attachments.infrastructure.settings import get_settings

RawMessage = Union[bytes, str]


class ExtractAttachmentsUseCase:
    """Parse a raw message and return its attachments, nested messages flattened."""

    def __init__(self, max_depth: Optional[int] = None) -> None:
        """
        Args:
            max_depth: Deepest allowed chain of nested messages. Falls back
                       to the MAX_NESTING_DEPTH setting when omitted.
        """
        self.max_depth = get_settings().max_nesting_depth if max_depth is None else max_depth

    def run(self, raw_message: RawMessage) -> list[Attachment]:
        em = parse_message(raw_message, max_depth=self.max_depth)
        attachments = extract_attachments(em, max_depth=self.max_depth)
        logger.info(f"Extracted {len(attachments)} attachments")
        return attachments


class ExtractAndStoreUseCase:
    """Extract attachments, keep the allowed content types and write them to disk.

    Flow:
    1. Parse the raw message (MessageParseError on malformed input)
    2. Flatten attachments, unwrapping nested messages
    3. Filter by exact content type (empty allow-list keeps everything)
    4. Write the batch; any write failure rolls back the batch and
       raises AttachmentWriteError
    """

    def __init__(
        self,
        store: Optional[AttachmentStore] = None,
        max_depth: Optional[int] = None,
    ) -> None:
        self.store = store or DiskAttachmentStore()
        self.extractor = ExtractAttachmentsUseCase(max_depth=max_depth)

    def run(self, raw_message: RawMessage, options: Optional[StoreOptions] = None) -> list[str]:
        options = options or StoreOptions()

        attachments = self.extractor.run(raw_message)
        kept = filter_by_mime_type(attachments, options.mime_types)
        if len(kept) != len(attachments):
            logger.debug(
                f"Mime filter kept {len(kept)} of {len(attachments)} attachments "
                f"(allowed: {options.mime_types})"
            )

        return self.store.write_batch(kept, directory=options.directory, prefix=options.prefix)


def extract(raw_message: RawMessage, *, max_depth: Optional[int] = None) -> list[Attachment]:
    """Return every attachment of raw_message in document order."""
    return ExtractAttachmentsUseCase(max_depth=max_depth).run(raw_message)


def extract_and_store(
    raw_message: RawMessage,
    options: Optional[StoreOptions] = None,
    *,
    store: Optional[AttachmentStore] = None,
    max_depth: Optional[int] = None,
) -> list[str]:
    """Extract, filter and write attachments; returns the filenames written."""
    return ExtractAndStoreUseCase(store=store, max_depth=max_depth).run(raw_message, options)
