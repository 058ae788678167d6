"""Viewport - cursor position and scroll offsets."""

from __future__ import annotations

from dataclasses import dataclass

from mim.core.buffer import TextBuffer


@dataclass
class Viewport:
    """Cursor (raw-buffer space) plus the visible window over the buffer.

    ``screenrows`` already excludes the status and message bars.
    """
    screenrows: int
    screencols: int
    cx: int = 0
    cy: int = 0
    rx: int = 0
    rowoff: int = 0
    coloff: int = 0

    def recompute_scroll(self, buffer: TextBuffer) -> None:
        """Bring the cursor into view. Call once per frame before painting."""
        row = buffer.row_at(self.cy)
        self.rx = row.cx_to_rx(self.cx) if row is not None else self.cx

        if self.cy < self.rowoff:
            self.rowoff = self.cy
        if self.cy >= self.rowoff + self.screenrows:
            self.rowoff = self.cy - self.screenrows + 1
        if self.rx < self.coloff:
            self.coloff = self.rx
        if self.rx >= self.coloff + self.screencols:
            self.coloff = self.rx - self.screencols + 1

    def clamp_cx(self, buffer: TextBuffer) -> None:
        """Keep ``cx`` within the current row."""
        self.cx = min(self.cx, buffer.row_len(self.cy))

    def move_to(self, cy: int, cx: int) -> None:
        self.cy = cy
        self.cx = cx

    def screen_position(self) -> tuple[int, int]:
        """1-indexed terminal (row, col) of the cursor."""
        return self.cy - self.rowoff + 1, self.rx - self.coloff + 1
