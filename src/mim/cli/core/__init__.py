"""Core TUI infrastructure - terminal I/O and input decoding."""

from mim.cli.core.terminal import (
    TerminalError,
    TerminalSession,
    TerminalSize,
    WindowGeometry,
)
from mim.cli.core.input import Key, KeyEvent, decode_key

__all__ = [
    "TerminalError",
    "TerminalSession",
    "TerminalSize",
    "WindowGeometry",
    "Key",
    "KeyEvent",
    "decode_key",
]
