"""Content-type filtering of extracted attachments."""

from __future__ import annotations

from typing import Iterable, Sequence

from mail_attachments.domain.entities.attachment import Attachment


def filter_by_mime_type(attachments: Sequence[Attachment], mime_types: Iterable[str]) -> list[Attachment]:
    """Keep attachments whose content type exactly equals one of mime_types.

    An empty mime_types keeps everything. Matching is case-sensitive with
    no wildcards, and attachments without a content type never match.
    """
    allowed = set(mime_types)
    if not allowed:
        return list(attachments)

    return [
        att
        for att in attachments
        if att.content_type is not None and att.content_type in allowed
    ]
