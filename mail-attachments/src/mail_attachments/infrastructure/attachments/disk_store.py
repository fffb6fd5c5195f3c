from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

from loguru import logger

from mail_attachments.domain.entities.attachment import Attachment
from mail_attachments.domain.errors import AttachmentWriteError


class DiskAttachmentStore:
    """Writes a batch of attachments to a local directory.

    A batch is all-or-nothing as far as reported errors go: on the first
    failed write every file written earlier in the same batch is removed.
    Files that existed before the batch and got overwritten are not restored.
    """

    def write_batch(
        self,
        attachments: Sequence[Attachment],
        *,
        directory: Union[str, Path] = ".",
        prefix: str = "",
    ) -> list[str]:
        dest = Path(directory)
        try:
            dest.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Could not create directory {dest}: {e}")
            raise AttachmentWriteError(e) from e

        root = dest.resolve()
        filenames: list[str] = []
        for att in attachments:
            filename = f"{prefix}{att.name}"
            try:
                self._target(root, filename).write_bytes(att.content_bytes)
            except OSError as e:
                logger.error(f"Failed to write {filename} to {dest}: {e}")
                self._rollback(dest, filenames)
                raise AttachmentWriteError(e) from e
            filenames.append(filename)

        logger.info(f"Wrote {len(filenames)} attachments to {dest}")
        return filenames

    @staticmethod
    def _target(root: Path, filename: str) -> Path:
        # names come from untrusted mail; absolute paths and .. must not leave root
        target = (root / filename).resolve()
        if not target.is_relative_to(root):
            raise PermissionError(f"{filename!r} resolves outside {root}")
        return target

    def _rollback(self, dest: Path, filenames: list[str]) -> None:
        # best-effort, the original write error is what gets reported
        for filename in filenames:
            try:
                (dest / filename).unlink()
            except OSError as e:
                logger.warning(f"Rollback could not remove {filename}: {e}")
        if filenames:
            logger.info(f"Rolled back {len(filenames)} files in {dest}")
