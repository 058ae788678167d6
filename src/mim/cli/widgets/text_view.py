"""Text view widget drawing the visible slice of the buffer."""

from __future__ import annotations

from mim.cli.core.ansi_text import to_bytes, truncate, window
from mim.cli.widgets.base import BaseWidget, Rect
from mim.core.buffer import TextBuffer
from mim.core.constants import CLEAR_LINE, MIM_VERSION
from mim.core.viewport import Viewport


class TextViewWidget(BaseWidget):
    """Buffer rows clipped to the viewport, ``~`` past the end of the buffer.

    An empty buffer shows a welcome banner a third of the way down.
    """

    def __init__(self, buffer: TextBuffer, viewport: Viewport) -> None:
        self.buffer = buffer
        self.viewport = viewport

    def render(self, bounds: Rect) -> list[bytes]:
        lines: list[bytes] = []
        for y in range(bounds.height):
            filerow = self.viewport.rowoff + y
            row = self.buffer.row_at(filerow)
            if row is not None:
                line = window(row.render, self.viewport.coloff, bounds.width)
            elif self.buffer.numrows == 0 and y == bounds.height // 3:
                line = self._welcome(bounds.width)
            else:
                line = b"~"
            lines.append(line + CLEAR_LINE)
        return lines

    def _welcome(self, width: int) -> bytes:
        welcome = truncate(to_bytes(f"Mim editor -- version {MIM_VERSION}"), width)
        padding = (width - len(welcome)) // 2
        if padding:
            return b"~" + b" " * (padding - 1) + welcome
        return welcome
