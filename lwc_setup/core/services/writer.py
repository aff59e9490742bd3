"""
Batching writer — queue file mutations, then apply them in one pass.

Queueing never touches the filesystem. ``flush()`` applies entries in
enqueue order, each on its own: an overwrite goes through a temp file
in the target directory and is renamed into place, an append opens the
file in append mode. The first failure propagates; entries already
applied stay applied and the rest stay queued.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path

from lwc_setup.core.models.plan import PendingWrite, WriteMode

logger = logging.getLogger(__name__)


class PendingWrites:
    """Ordered queue of pending file writes."""

    def __init__(self, writes: Sequence[PendingWrite] = ()):
        self._queue: list[PendingWrite] = list(writes)

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def pending(self) -> tuple[PendingWrite, ...]:
        return tuple(self._queue)

    def queue_write(self, path: Path | str, content: str, reason: str = "") -> None:
        """Queue replacing ``path`` with ``content``."""
        self._enqueue(path, content, "overwrite", reason)

    def queue_append(self, path: Path | str, content: str, reason: str = "") -> None:
        """Queue appending ``content`` to ``path`` (created if missing)."""
        self._enqueue(path, content, "append", reason)

    def clear(self) -> None:
        self._queue.clear()

    def flush(self) -> list[PendingWrite]:
        """Apply every queued write in order.

        Returns:
            The writes that were applied.

        Raises:
            OSError: From the first write that fails. Earlier writes are
                not rolled back; that write and later ones stay queued.
        """
        applied: list[PendingWrite] = []
        while self._queue:
            entry = self._queue[0]
            if entry.mode == "append":
                _append(entry.path, entry.content)
            else:
                _write_atomic(entry.path, entry.content)
            logger.debug("Flushed %s (%s, %d chars)", entry.path, entry.mode, len(entry.content))
            applied.append(self._queue.pop(0))
        return applied

    def _enqueue(self, path: Path | str, content: str, mode: WriteMode, reason: str) -> None:
        entry = PendingWrite(path=Path(path), content=content, mode=mode, reason=reason)
        self._queue.append(entry)
        logger.debug("Queued %s of %s", mode, entry.path)


def _write_atomic(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
        # mkstemp creates 0600; give the result the mode a plain write would
        if path.exists():
            shutil.copymode(path, tmp)
        else:
            os.chmod(tmp, 0o666 & ~_current_umask())
        tmp.replace(path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise


def _append(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8", newline="") as fh:
        fh.write(content)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
