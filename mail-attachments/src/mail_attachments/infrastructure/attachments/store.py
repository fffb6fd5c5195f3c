from __future__ import annotations
from pathlib import Path
from typing import Protocol, Sequence, Union
from mail_attachments.domain.entities.attachment import Attachment

class AttachmentStore(Protocol):
    def write_batch(
        self, attachments: Sequence[Attachment], *, directory: Union[str, Path], prefix: str
    ) -> list[str]: ...
