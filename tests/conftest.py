"""Pytest configuration: terminal doubles and editor factories."""

import os
import pty
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Union

import pytest

from mim.cli.core.input import Key, KeyEvent
from mim.cli.core.terminal import TerminalSession, TerminalSize
from mim.cli.studio.controller import InputController
from mim.cli.studio.renderer import Renderer
from mim.core.buffer import TextBuffer
from mim.core.config import EditorConfig
from mim.core.status import StatusLine
from mim.core.viewport import Viewport

KeyInput = Union[str, int, Key, KeyEvent]


class ScriptExhausted(Exception):
    """Raised when a test asks for more keys than it scripted."""


def keys(*items: KeyInput) -> list[KeyEvent]:
    """
    Build key events from strings (one event per byte), byte values and
    named keys.
    """
    events: list[KeyEvent] = []
    for item in items:
        if isinstance(item, KeyEvent):
            events.append(item)
        elif isinstance(item, Key):
            events.append(KeyEvent(key=item))
        elif isinstance(item, int):
            events.append(KeyEvent(byte=item, raw=bytes([item])))
        else:
            for b in item.encode():
                events.append(KeyEvent(byte=b, raw=bytes([b])))
    return events


class ScriptedSession:
    """Stands in for TerminalSession: replays scripted keys, records output."""

    def __init__(self, events: Iterable[KeyEvent] = (), size: TerminalSize = TerminalSize(24, 80)) -> None:
        self.events = list(events)
        self.size = size
        self.output = bytearray()
        self.raw_entered = 0
        self.raw_exited = 0

    def feed(self, *items: KeyInput) -> None:
        self.events.extend(keys(*items))

    def read_key(self) -> KeyEvent:
        if not self.events:
            raise ScriptExhausted("no more scripted keys")
        return self.events.pop(0)

    def write(self, data: bytes) -> None:
        self.output.extend(data)

    def clear(self) -> None:
        self.write(b"\x1b[2J\x1b[H")

    def window_size(self) -> TerminalSize:
        return self.size

    @contextmanager
    def raw_mode(self) -> Iterator["ScriptedSession"]:
        self.raw_entered += 1
        try:
            yield self
        finally:
            self.raw_exited += 1


class Editor:
    """Bundle of wired-up editor parts for controller tests."""

    def __init__(self, session: ScriptedSession, buffer: TextBuffer, viewport: Viewport,
                 status: StatusLine, controller: InputController) -> None:
        self.session = session
        self.buffer = buffer
        self.viewport = viewport
        self.status = status
        self.controller = controller

    def press(self, *items: KeyInput) -> list[bool]:
        """Apply each key in turn, returning the keep-running results."""
        return [self.controller.handle_key(event) for event in keys(*items)]

    @property
    def lines(self) -> list[bytes]:
        return self.buffer.lines()

    @property
    def cursor(self) -> tuple[int, int]:
        return self.viewport.cy, self.viewport.cx


@pytest.fixture
def make_editor() -> Callable[..., Editor]:
    """Factory for a controller over an in-memory buffer and scripted session."""

    def factory(
        lines: Iterable[bytes] = (),
        filename: Optional[Path] = None,
        quit_times: int = 1,
        screenrows: int = 10,
        screencols: int = 40,
    ) -> Editor:
        config = EditorConfig(quit_times=quit_times)
        session = ScriptedSession()
        buffer = TextBuffer(lines, filename=filename, tab_stop=config.tab_stop)
        viewport = Viewport(screenrows=screenrows, screencols=screencols)
        status = StatusLine(config.message_timeout)
        renderer = Renderer(buffer, viewport, status)
        controller = InputController(session, buffer, viewport, status, renderer, config)
        return Editor(session, buffer, viewport, status, controller)

    return factory


@pytest.fixture
def pipe_session() -> Iterator[tuple[TerminalSession, int, int]]:
    """
    A TerminalSession reading from and writing to pipes.

    Yields (session, input_writer_fd, output_reader_fd).
    """
    in_r, in_w = os.pipe()
    out_r, out_w = os.pipe()
    session = TerminalSession(fd_in=in_r, fd_out=out_w)
    try:
        yield session, in_w, out_r
    finally:
        for fd in (in_r, in_w, out_r, out_w):
            os.close(fd)


def drain(fd: int) -> bytes:
    """Read everything currently buffered in a pipe."""
    os.set_blocking(fd, False)
    chunks = []
    try:
        while True:
            chunk = os.read(fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
    except BlockingIOError:
        pass
    return b"".join(chunks)


@pytest.fixture
def pty_session() -> Iterator[TerminalSession]:
    """A TerminalSession on the slave side of a pseudo-terminal."""
    master, slave = pty.openpty()
    try:
        yield TerminalSession(fd_in=slave, fd_out=slave)
    finally:
        os.close(slave)
        os.close(master)
