"""Load text files into a buffer."""

from __future__ import annotations

import logging
from pathlib import Path

from mim.core.buffer import TextBuffer
from mim.core.constants import TAB_STOP

log = logging.getLogger(__name__)


def split_lines(data: bytes) -> list[bytes]:
    """Split raw file content into rows.

    Each line loses its trailing ``\\n`` and any ``\\r`` before it. A final
    newline does not produce an extra empty row.
    """
    lines = data.split(b"\n")
    if lines and lines[-1] == b"":
        lines.pop()
    return [line.rstrip(b"\r") for line in lines]


def load(path: str | Path, tab_stop: int = TAB_STOP) -> TextBuffer:
    """
    Load a file from disk into a new TextBuffer.

    The content is kept as raw bytes, one row per line. Raises
    FileNotFoundError when the file does not exist; callers decide
    whether that means a new file.
    """
    path = Path(path)

    with open(path, 'rb') as f:
        data = f.read()

    buffer = TextBuffer(split_lines(data), filename=path, tab_stop=tab_stop)
    buffer.mark_clean()
    log.info("loaded %s (%d lines, %d bytes)", path, buffer.numrows, len(data))
    return buffer


def load_bytes(data: bytes, tab_stop: int = TAB_STOP) -> TextBuffer:
    """Build an unnamed buffer from raw bytes."""
    return TextBuffer(split_lines(data), tab_stop=tab_stop)
