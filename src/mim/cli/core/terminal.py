"""Low-level terminal operations - raw mode, key reads, window size."""

from __future__ import annotations

import logging
import os
import re
import select
import signal
import termios
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, NoReturn

from mim.cli.core.input import KeyEvent, decode_key
from mim.core.constants import (
    CLEAR_SCREEN,
    CURSOR_FAR_CORNER,
    CURSOR_HOME,
    CURSOR_POSITION_REQUEST,
)

log = logging.getLogger(__name__)

STDIN_FILENO = 0
STDOUT_FILENO = 1
READ_TIMEOUT = 0.1
_CURSOR_REPORT = re.compile(rb'\x1b\[(\d+);(\d+)R')
_GUARDED_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


class TerminalError(Exception):
    """Fatal terminal failure: the session cannot continue."""

    def __init__(self, message: str, error: BaseException | None = None) -> None:
        self.message = message
        self.error = error
        detail = _error_text(error)
        super().__init__(f"{message}: {detail}" if detail else message)


def _error_text(error: BaseException | None) -> str:
    if error is None:
        return ""
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    if isinstance(error, termios.error) and len(error.args) > 1:
        return str(error.args[1])
    return str(error)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


def parse_cursor_report(reply: bytes) -> TerminalSize | None:
    """Parse an ``ESC [ rows ; cols R`` cursor position report."""
    match = _CURSOR_REPORT.search(reply)
    if match is None:
        return None
    return TerminalSize(int(match.group(1)), int(match.group(2)))


class TerminalSession:
    """Raw-mode session over a pair of file descriptors.

    Owns the saved terminal attributes for the lifetime of ``raw_mode()``
    and restores them on every way out of it.
    """

    def __init__(self, fd_in: int = STDIN_FILENO, fd_out: int = STDOUT_FILENO) -> None:
        self.fd_in = fd_in
        self.fd_out = fd_out
        self._orig_attrs: list | None = None
        self._orig_handlers: dict[int, object] = {}

    @property
    def is_raw(self) -> bool:
        return self._orig_attrs is not None

    # -------------------------------------------------------------------------
    # Raw mode
    # -------------------------------------------------------------------------

    def enable_raw_mode(self) -> None:
        try:
            self._orig_attrs = termios.tcgetattr(self.fd_in)
        except termios.error as e:
            raise TerminalError("tcgetattr", e) from e

        raw = termios.tcgetattr(self.fd_in)
        raw[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, raw)
        except termios.error as e:
            self._orig_attrs = None
            raise TerminalError("tcsetattr", e) from e
        log.debug("raw mode enabled on fd %d", self.fd_in)

    def disable_raw_mode(self) -> None:
        """Restore the saved attributes. Safe to call more than once."""
        if self._orig_attrs is None:
            return
        attrs, self._orig_attrs = self._orig_attrs, None
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, attrs)
        except termios.error as e:
            raise TerminalError("tcsetattr", e) from e
        log.debug("raw mode disabled on fd %d", self.fd_in)

    @contextmanager
    def raw_mode(self) -> Iterator["TerminalSession"]:
        """Hold raw mode for the duration of the block.

        SIGTERM and SIGHUP are turned into SystemExit while inside so the
        block unwinds and the terminal is restored.
        """
        self.enable_raw_mode()
        self._install_signal_guard()
        try:
            yield self
        finally:
            self._remove_signal_guard()
            self.disable_raw_mode()

    def _install_signal_guard(self) -> None:
        def on_signal(signum: int, _frame: object) -> None:
            log.info("terminating on signal %d", signum)
            raise SystemExit(128 + signum)

        for sig in _GUARDED_SIGNALS:
            try:
                previous = signal.signal(sig, on_signal)
            except ValueError:
                # Not on the main thread; signals cannot be guarded here.
                break
            self._orig_handlers[sig] = previous

    def _remove_signal_guard(self) -> None:
        for sig, handler in self._orig_handlers.items():
            # None means the handler was installed outside Python.
            signal.signal(sig, signal.SIG_DFL if handler is None else handler)
        self._orig_handlers.clear()

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def write(self, data: bytes) -> None:
        """Write ``data`` to the terminal in one call."""
        try:
            os.write(self.fd_out, data)
        except OSError as e:
            self.fatal("write", e)

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write(CLEAR_SCREEN + CURSOR_HOME)

    def fatal(self, message: str, error: BaseException | None = None) -> NoReturn:
        """Clear the screen, restore the terminal and abort the session."""
        log.error("fatal: %s (%s)", message, _error_text(error))
        try:
            os.write(self.fd_out, CLEAR_SCREEN + CURSOR_HOME)
        except OSError:
            log.debug("could not clear screen on fatal path")
        self._remove_signal_guard()
        try:
            self.disable_raw_mode()
        except TerminalError:
            log.debug("could not restore terminal on fatal path")
        raise TerminalError(message, error)

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def read_byte(self, timeout: float = READ_TIMEOUT) -> int | None:
        """Read one byte, or None if nothing arrived within ``timeout``."""
        try:
            ready, _, _ = select.select([self.fd_in], [], [], timeout)
            if not ready:
                return None
            data = os.read(self.fd_in, 1)
        except BlockingIOError:
            return None
        except OSError as e:
            self.fatal("read", e)
        return data[0] if data else None

    def read_key(self) -> KeyEvent:
        """Block until a key arrives and decode it."""
        while True:
            c = self.read_byte()
            if c is not None:
                return decode_key(c, self.read_byte)

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def window_size(self) -> TerminalSize:
        return WindowGeometry(self).query()


class WindowGeometry:
    """Determines the terminal's row and column count."""

    def __init__(self, session: TerminalSession) -> None:
        self.session = session

    def query(self) -> TerminalSize:
        try:
            size = os.get_terminal_size(self.session.fd_out)
        except OSError:
            log.debug("terminal size ioctl unavailable, probing cursor")
        else:
            if size.columns > 0:
                return TerminalSize(size.lines, size.columns)

        probed = self.probe_cursor()
        if probed is None:
            self.session.fatal("getWindowSize")
        return probed

    def probe_cursor(self) -> TerminalSize | None:
        """Push the cursor to the far corner and ask where it ended up."""
        try:
            os.write(self.session.fd_out, CURSOR_FAR_CORNER + CURSOR_POSITION_REQUEST)
        except OSError:
            return None

        reply = bytearray()
        while len(reply) < 32:
            c = self.session.read_byte()
            if c is None:
                break
            reply.append(c)
            if c == ord('R'):
                break
        return parse_cursor_report(bytes(reply))
