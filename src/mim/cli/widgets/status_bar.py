"""Status bar widget showing file name, line count and cursor row."""

from __future__ import annotations

from mim.cli.core.ansi_text import justify, to_bytes
from mim.cli.widgets.base import BaseWidget, Rect
from mim.core.buffer import TextBuffer
from mim.core.constants import FILENAME_DISPLAY_MAX, INVERT_OFF, INVERT_ON
from mim.core.viewport import Viewport


class StatusBarWidget(BaseWidget):
    """Inverted-video bar with file state on the left, position on the right."""

    def __init__(self, buffer: TextBuffer, viewport: Viewport) -> None:
        self.buffer = buffer
        self.viewport = viewport

    def left_text(self) -> str:
        name = str(self.buffer.filename) if self.buffer.filename else "[No name]"
        modified = " (modified)" if self.buffer.is_modified else ""
        return f"{name[:FILENAME_DISPLAY_MAX]} - {self.buffer.numrows} lines{modified}"

    def right_text(self) -> str:
        return f"{self.viewport.cy + 1}/{self.buffer.numrows}"

    def render(self, bounds: Rect) -> list[bytes]:
        """Render the status bar, fitting within bounds.width."""
        line = justify(to_bytes(self.left_text()), to_bytes(self.right_text()), bounds.width)
        return [INVERT_ON + line + INVERT_OFF]
