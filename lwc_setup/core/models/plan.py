"""
Pending write model — one file mutation waiting in the writer's queue.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

WriteMode = Literal["overwrite", "append"]


class PendingWrite(BaseModel):
    """A file mutation waiting to be flushed.

    Attributes:
        path:    Absolute target path.
        content: Text to write or append.
        mode:    ``overwrite`` replaces the file, ``append`` extends it.
        reason:  Why this write was queued.
    """

    path: Path
    content: str
    mode: WriteMode = "overwrite"
    reason: str = ""
