"""Read-only view over a parsed RFC822 message as a tree of parts."""

from __future__ import annotations

import base64
import binascii
import quopri
from email import policy
from email.message import Message
from email.parser import BytesParser
from typing import Optional, Union

from loguru import logger

from mail_attachments.domain.entities.attachment import UNTITLED, Attachment
from mail_attachments.domain.errors import MessageParseError, NestingTooDeepError
from mail_attachments.domain.models import PartKind

NESTED_MESSAGE_TYPES = ("message/rfc822", "message/global")
DEFAULT_MAX_NESTING_DEPTH = 32


def _has_headers(msg: Message) -> bool:
    return len(msg.keys()) > 0


def _parse_bytes(raw: bytes) -> Message:
    return BytesParser(policy=policy.default).parsebytes(raw)


def parse_message(raw: Union[bytes, str], max_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> Message:
    """Parse raw RFC822 bytes into a message.

    The stdlib parser never rejects input, so a message with no header at
    all is treated as malformed. A nested message chain too deep for the
    parser itself is reported as NestingTooDeepError with max_depth.
    """
    if isinstance(raw, str):
        try:
            raw = raw.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError as e:
            raise MessageParseError(f"Failed to parse message: {e}") from e
    if not raw:
        raise MessageParseError("Failed to parse message: empty input")

    try:
        em = _parse_bytes(raw)
    except RecursionError as e:
        raise NestingTooDeepError(max_depth) from e

    if not _has_headers(em):
        raise MessageParseError("Failed to parse message: no headers found")
    return em


class MessagePart:
    """One node of a parsed message, classified for attachment extraction."""

    def __init__(self, part: Message) -> None:
        self.part = part
        self._nested: Optional[Message] = None
        self._kind = self._classify()

    @property
    def kind(self) -> PartKind:
        return self._kind

    def _classify(self) -> PartKind:
        part = self.part
        ctype = part.get_content_type()

        if part.get_content_maintype() == "multipart":
            return PartKind.CONTAINER

        if ctype in NESTED_MESSAGE_TYPES:
            self._nested = self._find_nested_message()
            if self._nested is not None:
                return PartKind.NESTED_MESSAGE
            logger.debug(f"{ctype} part holds no well-formed message, keeping it as an attachment")
            return PartKind.ATTACHMENT

        # explicit attachments, named parts and any non-text inline content
        if (
            part.get_content_disposition() == "attachment"
            or part.get_filename()
            or part.get_content_maintype() != "text"
        ):
            return PartKind.ATTACHMENT

        return PartKind.OTHER

    def _find_nested_message(self) -> Optional[Message]:
        payload = self.part.get_payload()
        if not isinstance(payload, list) or not payload:
            return None

        inner = payload[0]
        if _has_headers(inner):
            return inner

        # Some clients transfer-encode message/rfc822 bodies, which the
        # parser then reads as a headerless message.
        cte = (self.part.get("Content-Transfer-Encoding") or "").strip().lower()
        body = inner.get_payload()
        if cte not in ("base64", "quoted-printable") or not isinstance(body, str):
            return None

        data = body.encode("ascii", errors="surrogateescape")
        try:
            decoded = base64.b64decode(data) if cte == "base64" else quopri.decodestring(data)
        except (binascii.Error, ValueError):
            return None

        reparsed = _parse_bytes(decoded) if decoded else None
        if reparsed is None or not _has_headers(reparsed):
            return None
        return reparsed

    def children(self) -> list[MessagePart]:
        payload = self.part.get_payload()
        if not isinstance(payload, list):
            return []
        return [MessagePart(sub) for sub in payload]

    def nested_message(self) -> Message:
        if self._nested is None:
            raise ValueError(f"Part of kind {self.kind.value} holds no nested message")
        return self._nested

    @property
    def attachment_name(self) -> str:
        # covers both Content-Disposition filename and Content-Type name
        return self.part.get_filename() or UNTITLED

    @property
    def content_type(self) -> Optional[str]:
        """Declared content type, or None when the part has no Content-Type header.

        Read from the raw header so a type without subtype is reported as
        declared instead of the parser's text/plain fallback.
        """
        header = self.part.get("Content-Type")
        if header is None:
            return None

        value = str(header).split(";", 1)[0].strip().lower()
        if not value:
            return None

        roottype, _, subtype = value.partition("/")
        roottype, subtype = roottype.strip(), subtype.strip()
        return f"{roottype}/{subtype}" if subtype else roottype

    @property
    def content_bytes(self) -> bytes:
        part = self.part
        if not part.is_multipart():
            return part.get_payload(decode=True) or b""

        # message/* parts that are not unwrapped keep their raw form
        chunks = []
        for sub in part.get_payload():
            if _has_headers(sub):
                chunks.append(sub.as_bytes())
            else:
                chunks.append(sub.get_payload(decode=True) or b"")
        return b"".join(chunks)

    def to_attachment(self) -> Attachment:
        return Attachment(
            name=self.attachment_name,
            content_type=self.content_type,
            content_bytes=self.content_bytes,
        )
