"""Frame composition and painting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mim.cli.core.ansi_text import cursor_position
from mim.cli.widgets.base import Rect, Widget
from mim.cli.widgets.message_bar import MessageBarWidget
from mim.cli.widgets.status_bar import StatusBarWidget
from mim.cli.widgets.text_view import TextViewWidget
from mim.core.buffer import TextBuffer
from mim.core.constants import CURSOR_HOME, HIDE_CURSOR, SHOW_CURSOR
from mim.core.status import StatusLine
from mim.core.viewport import Viewport

if TYPE_CHECKING:
    from mim.cli.core.terminal import TerminalSession


class Renderer:
    """Builds one full frame and writes it with a single call.

    Frame layout:
        +------------------------------------------+
        | text view (screenrows lines)             |
        +------------------------------------------+
        | status bar (inverted)                    |
        | message bar                              |
        +------------------------------------------+
    """

    def __init__(self, buffer: TextBuffer, viewport: Viewport, status: StatusLine) -> None:
        self.buffer = buffer
        self.viewport = viewport
        self.text_view: Widget = TextViewWidget(buffer, viewport)
        self.status_bar: Widget = StatusBarWidget(buffer, viewport)
        self.message_bar: Widget = MessageBarWidget(status)

    def compose(self) -> bytes:
        """Recompute scrolling and return the bytes of the next frame."""
        vp = self.viewport
        vp.recompute_scroll(self.buffer)

        out: list[bytes] = [HIDE_CURSOR, CURSOR_HOME]
        for line in self.text_view.render(Rect(0, 0, vp.screencols, vp.screenrows)):
            out.append(line + b"\r\n")
        for line in self.status_bar.render(Rect(0, vp.screenrows, vp.screencols, 1)):
            out.append(line + b"\r\n")
        out.extend(self.message_bar.render(Rect(0, vp.screenrows + 1, vp.screencols, 1)))
        out.append(cursor_position(*vp.screen_position()))
        out.append(SHOW_CURSOR)
        return b"".join(out)

    def paint(self, session: "TerminalSession") -> None:
        session.write(self.compose())
