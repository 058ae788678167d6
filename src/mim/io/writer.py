"""Save a buffer to disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mim.core.buffer import TextBuffer

log = logging.getLogger(__name__)

FILE_MODE = 0o644


def save(buffer: "TextBuffer", path: str | Path) -> int:
    """
    Write the buffer to ``path`` and return the number of bytes written.

    The file is opened (created with mode 0644 if missing), truncated to
    the exact new length and written with a single call. This is not
    atomic: an interrupted write can leave the file short. Raises OSError
    on any failure, including a short write; the buffer is left untouched.
    """
    path = Path(path)
    data = buffer.to_byte_stream()

    fd = os.open(path, os.O_RDWR | os.O_CREAT, FILE_MODE)
    try:
        os.ftruncate(fd, len(data))
        written = os.write(fd, data)
    finally:
        os.close(fd)

    if written != len(data):
        raise OSError(f"short write ({written} of {len(data)} bytes)")

    log.info("saved %s (%d bytes)", path, written)
    return written
