from __future__ import annotations
from email.message import Message

from loguru import logger

from mail_attachments.domain.entities.attachment import Attachment
from mail_attachments.domain.errors import NestingTooDeepError
from mail_attachments.domain.models import PartKind
from mail_attachments.infrastructure.email.mime_tree import DEFAULT_MAX_NESTING_DEPTH, MessagePart


def extract_attachments(em: Message, max_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> list[Attachment]:
    """Flatten every leaf attachment of em, unwrapping nested messages.

    Depth-first in document order. Raises NestingTooDeepError when a nested
    message sits more than max_depth levels below em.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    out: list[Attachment] = []
    try:
        # LIFO work-list; children go on reversed so they pop in order
        stack: list[tuple[MessagePart, int]] = [(MessagePart(em), 0)]
        while stack:
            part, depth = stack.pop()

            if part.kind is PartKind.CONTAINER:
                stack.extend((child, depth) for child in reversed(part.children()))

            elif part.kind is PartKind.NESTED_MESSAGE:
                if depth + 1 > max_depth:
                    raise NestingTooDeepError(max_depth)
                logger.debug(f"Unwrapping nested message at depth {depth + 1}")
                stack.append((MessagePart(part.nested_message()), depth + 1))

            elif part.kind is PartKind.ATTACHMENT:
                att = part.to_attachment()
                logger.debug(f"Found attachment: {att.name} ({att.content_type}, {att.size_bytes} bytes)")
                out.append(att)
    except RecursionError as e:
        # transfer-encoded nested messages are reparsed during the walk
        raise NestingTooDeepError(max_depth) from e

    return out
