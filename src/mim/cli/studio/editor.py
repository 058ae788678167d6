"""Interactive text editor application.

This module provides the EditorApp that owns all editor state and runs
the paint / read-key loop:
- TextBuffer: the document
- Viewport: cursor and scroll offsets
- StatusLine: transient message bar text
- Renderer: frame composition
- InputController: key dispatch
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from mim.cli.core.terminal import TerminalSession
from mim.cli.studio.controller import InputController
from mim.cli.studio.renderer import Renderer
from mim.core.buffer import TextBuffer
from mim.core.config import EditorConfig
from mim.core.status import StatusLine
from mim.core.viewport import Viewport
from mim.io.reader import load

log = logging.getLogger(__name__)

# Status bar + message bar
RESERVED_ROWS = 2


class EditorApp:
    """Full-screen text editor.

    Layout:
        +------------------------------------------+
        |                                          |
        |      Text view                           |
        |                                          |
        +------------------------------------------+
        | Status bar (file, lines, position)       |
        | Message bar                              |
        +------------------------------------------+

    Keyboard Controls:
        Ctrl-S: Save (prompts for a name if the buffer has none)
        Ctrl-Q: Quit (repeat to confirm when there are unsaved changes)
        Ctrl-K: Delete the current line
        Arrows / Home / End / Page Up / Page Down: Move cursor
        Backspace / Ctrl-H / Delete: Delete characters
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        config: EditorConfig | None = None,
        session: TerminalSession | None = None,
    ) -> None:
        """Initialize the editor.

        Args:
            path: Optional file path to load on startup
            config: Editor settings (defaults when omitted)
            session: Terminal session (stdin/stdout when omitted)
        """
        self.config = config or EditorConfig()
        self.session = session or TerminalSession()
        self.status = StatusLine(self.config.message_timeout)
        self.buffer = self._open(path)
        self.viewport = Viewport(screenrows=0, screencols=0)
        self.renderer = Renderer(self.buffer, self.viewport, self.status)
        self.controller = InputController(
            self.session,
            self.buffer,
            self.viewport,
            self.status,
            self.renderer,
            self.config,
        )
        self.running = False

    def _open(self, path: Optional[Path]) -> TextBuffer:
        """Load ``path``, or start an empty buffer when it is None or missing.

        Other read errors propagate to the caller.
        """
        if path is None:
            return TextBuffer(tab_stop=self.config.tab_stop)
        try:
            return load(path, tab_stop=self.config.tab_stop)
        except FileNotFoundError:
            log.info("%s does not exist, starting a new file", path)
            self.status.set("New file: %s", path)
            return TextBuffer(filename=path, tab_stop=self.config.tab_stop)

    def resize(self) -> None:
        """Size the viewport from the terminal, minus the two bars."""
        size = self.session.window_size()
        self.viewport.screenrows = max(1, size.rows - RESERVED_ROWS)
        self.viewport.screencols = size.cols
        log.debug("window %dx%d", size.rows, size.cols)

    # -------------------------------------------------------------------------
    # Main Loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Run the editor main loop until the user quits."""
        self.running = True

        with self.session.raw_mode():
            self.resize()
            if not self.status.message.text:
                self.status.set("HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-K = delete line")

            while self.running:
                self.renderer.paint(self.session)
                self.running = self.controller.handle_next_key()


def run_editor(path: Optional[Path] = None, config: EditorConfig | None = None) -> None:
    """Launch the editor application.

    Args:
        path: Optional file path to open
        config: Editor settings
    """
    app = EditorApp(path, config)
    app.run()


if __name__ == "__main__":
    file_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    run_editor(file_path)
