"""Keyboard input decoding with event abstraction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from mim.core.constants import ESCAPE


class Key(Enum):
    """Named key constants."""
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    HOME = auto()
    END = auto()
    DELETE = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key: either a named key or a literal byte."""
    key: Optional[Key] = None  # Named key if recognized
    byte: Optional[int] = None  # Literal byte otherwise
    raw: bytes = b""  # Bytes consumed from the input

    @property
    def is_byte(self) -> bool:
        return self.byte is not None and self.key is None

    @property
    def is_printable(self) -> bool:
        return self.is_byte and 32 <= self.byte < 127

    def is_ctrl(self, code: int) -> bool:
        return self.is_byte and self.byte == code


# Sequences after ESC [ (final letter)
CSI_SEQUENCES: dict[int, Key] = {
    ord('A'): Key.ARROW_UP,
    ord('B'): Key.ARROW_DOWN,
    ord('C'): Key.ARROW_RIGHT,
    ord('D'): Key.ARROW_LEFT,
    ord('H'): Key.HOME,
    ord('F'): Key.END,
}

# Sequences after ESC [ <digit> ~
CSI_TILDE_SEQUENCES: dict[int, Key] = {
    ord('1'): Key.HOME,
    ord('7'): Key.HOME,
    ord('2'): Key.END,
    ord('8'): Key.END,
    ord('3'): Key.DELETE,
    ord('5'): Key.PAGE_UP,
    ord('6'): Key.PAGE_DOWN,
}

# Sequences after ESC O
SS3_SEQUENCES: dict[int, Key] = {
    ord('H'): Key.HOME,
    ord('F'): Key.END,
}


def decode_key(first: int, read_byte: Callable[[], Optional[int]]) -> KeyEvent:
    """
    Decode one key event starting at ``first``.

    ``read_byte`` returns the next input byte or None on timeout. Anything
    that is not a complete known sequence decodes as a plain ESC.
    """
    if first != ESCAPE:
        return KeyEvent(byte=first, raw=bytes([first]))

    escape = KeyEvent(byte=ESCAPE, raw=bytes([ESCAPE]))

    seq0 = read_byte()
    if seq0 is None:
        return escape
    seq1 = read_byte()
    if seq1 is None:
        return escape
    raw = bytes([ESCAPE, seq0, seq1])

    if seq0 == ord('['):
        if ord('0') <= seq1 <= ord('9'):
            seq2 = read_byte()
            if seq2 is None:
                return escape
            raw += bytes([seq2])
            if seq2 == ord('~') and seq1 in CSI_TILDE_SEQUENCES:
                return KeyEvent(key=CSI_TILDE_SEQUENCES[seq1], raw=raw)
            return escape
        if seq1 in CSI_SEQUENCES:
            return KeyEvent(key=CSI_SEQUENCES[seq1], raw=raw)
    elif seq0 == ord('O'):
        if seq1 in SS3_SEQUENCES:
            return KeyEvent(key=SS3_SEQUENCES[seq1], raw=raw)

    return escape
