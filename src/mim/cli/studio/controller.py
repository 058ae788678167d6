"""Key dispatch: turns decoded key events into buffer and cursor changes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional

from mim.cli.core.input import Key, KeyEvent
from mim.core.buffer import TextBuffer
from mim.core.config import EditorConfig
from mim.core.constants import (
    BACKSPACE,
    CTRL_H,
    CTRL_K,
    CTRL_Q,
    CTRL_S,
    ENTER,
    ESCAPE,
    TAB,
)
from mim.core.status import StatusLine
from mim.core.viewport import Viewport
from mim.io.writer import save

if TYPE_CHECKING:
    from mim.cli.core.terminal import TerminalSession
    from mim.cli.studio.renderer import Renderer

log = logging.getLogger(__name__)

ARROW_KEYS = (Key.ARROW_UP, Key.ARROW_DOWN, Key.ARROW_LEFT, Key.ARROW_RIGHT)
DELETE_BYTES = (BACKSPACE, CTRL_H)


class InputController:
    """Reads one key at a time and applies it.

    ``quit_confirmations_remaining`` counts how many more Ctrl-Q presses a
    dirty buffer absorbs before the editor actually quits. Any other key
    resets it.
    """

    def __init__(
        self,
        session: "TerminalSession",
        buffer: TextBuffer,
        viewport: Viewport,
        status: StatusLine,
        renderer: "Renderer",
        config: EditorConfig | None = None,
    ) -> None:
        self.session = session
        self.buffer = buffer
        self.viewport = viewport
        self.status = status
        self.renderer = renderer
        self.config = config or EditorConfig()
        self.quit_confirmations_remaining = self.config.quit_times

        self._byte_handlers: dict[int, Callable[[], None]] = {
            CTRL_S: self.save,
            CTRL_K: self.delete_line,
            ENTER: self.insert_newline,
            BACKSPACE: self.delete_char,
            CTRL_H: self.delete_char,
            TAB: lambda: self.insert_char(TAB),
        }
        self._key_handlers: dict[Key, Callable[[], None]] = {
            Key.DELETE: self.delete_forward,
            Key.HOME: self.move_home,
            Key.END: self.move_end,
            Key.PAGE_UP: lambda: self.page(Key.PAGE_UP),
            Key.PAGE_DOWN: lambda: self.page(Key.PAGE_DOWN),
        }

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def handle_next_key(self) -> bool:
        """Read and apply one key. Returns False once the editor should quit."""
        return self.handle_key(self.session.read_key())

    def handle_key(self, event: KeyEvent) -> bool:
        if event.is_ctrl(CTRL_Q):
            return self._confirm_quit()

        if event.key in ARROW_KEYS:
            self.move_cursor(event.key)
        elif event.key is not None:
            handler = self._key_handlers.get(event.key)
            if handler is not None:
                handler()
        elif event.byte in self._byte_handlers:
            self._byte_handlers[event.byte]()
        elif event.is_printable:
            self.insert_char(event.byte)

        self.quit_confirmations_remaining = self.config.quit_times
        return True

    def _confirm_quit(self) -> bool:
        if self.buffer.is_modified and self.quit_confirmations_remaining > 0:
            self.status.set(
                "WARNING!!! File has unsaved changes. Press Ctrl-Q %d more times to quit.",
                self.quit_confirmations_remaining,
            )
            self.quit_confirmations_remaining -= 1
            return True
        log.info("quit requested")
        self.session.clear()
        return False

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def insert_char(self, c: int) -> None:
        vp = self.viewport
        vp.move_to(*self.buffer.insert_char(vp.cy, vp.cx, c))

    def insert_newline(self) -> None:
        vp = self.viewport
        vp.move_to(*self.buffer.insert_newline(vp.cy, vp.cx))

    def delete_char(self) -> None:
        vp = self.viewport
        vp.move_to(*self.buffer.delete_char(vp.cy, vp.cx))

    def delete_forward(self) -> None:
        self.move_cursor(Key.ARROW_RIGHT)
        self.delete_char()

    def delete_line(self) -> None:
        vp = self.viewport
        cy, _ = self.buffer.delete_line(vp.cy)
        vp.move_to(cy, vp.cx)
        vp.clamp_cx(self.buffer)

    # -------------------------------------------------------------------------
    # Cursor movement
    # -------------------------------------------------------------------------

    def move_cursor(self, key: Key) -> None:
        vp = self.viewport
        row = self.buffer.row_at(vp.cy)

        if key == Key.ARROW_LEFT:
            if vp.cx > 0:
                vp.cx -= 1
            elif vp.cy > 0:
                vp.cy -= 1
                vp.cx = self.buffer.row_len(vp.cy)
        elif key == Key.ARROW_RIGHT:
            if row is not None and vp.cx < row.size:
                vp.cx += 1
            elif row is not None and vp.cx == row.size:
                vp.cy += 1
                vp.cx = 0
        elif key == Key.ARROW_UP:
            if vp.cy > 0:
                vp.cy -= 1
        elif key == Key.ARROW_DOWN:
            if vp.cy < self.buffer.numrows:
                vp.cy += 1

        vp.clamp_cx(self.buffer)

    def move_home(self) -> None:
        self.viewport.cx = 0

    def move_end(self) -> None:
        self.viewport.cx = self.buffer.row_len(self.viewport.cy)

    def page(self, key: Key) -> None:
        vp = self.viewport
        if key == Key.PAGE_UP:
            vp.cy = vp.rowoff
            step = Key.ARROW_UP
        else:
            vp.cy = min(vp.rowoff + vp.screenrows - 1, self.buffer.numrows)
            step = Key.ARROW_DOWN
        for _ in range(vp.screenrows):
            self.move_cursor(step)

    # -------------------------------------------------------------------------
    # Saving
    # -------------------------------------------------------------------------

    def save(self) -> None:
        target = self.buffer.filename
        if target is None:
            name = self.prompt("Save as: %s (ESC to cancel)")
            if name is None:
                self.status.set("Save aborted")
                return
            target = Path(name)

        try:
            written = save(self.buffer, target)
        except OSError as e:
            log.warning("save to %s failed: %s", target, e)
            self.status.set("Can't save! I/O error: %s", e.strerror or e)
            return

        self.buffer.filename = target
        self.buffer.mark_clean()
        self.status.set("%d bytes written to disk", written)

    def prompt(self, template: str) -> Optional[str]:
        """
        Collect a line of input in the message bar.

        ``template`` holds one ``%s`` for the text typed so far. Returns
        the text on Enter (when non-empty) or None when ESC cancels.
        """
        text = bytearray()
        while True:
            self.status.set(template, text.decode("utf-8", errors="replace"))
            self.renderer.paint(self.session)

            event = self.session.read_key()
            if event.key == Key.DELETE or event.byte in DELETE_BYTES:
                if text:
                    text.pop()
            elif event.is_ctrl(ESCAPE):
                self.status.clear()
                return None
            elif event.is_ctrl(ENTER):
                if text:
                    self.status.clear()
                    return text.decode("utf-8", errors="surrogateescape")
            elif event.is_printable:
                text.append(event.byte)
