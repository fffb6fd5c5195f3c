from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

UNTITLED = "untitled"

@dataclass(frozen=True)
class Attachment:
    name: str
    content_type: Optional[str]

    # Decoded body, copied out of the parsed message tree
    content_bytes: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.content_bytes)
