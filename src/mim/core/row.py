"""Row - one line of text with its tab-expanded render projection."""

from __future__ import annotations

from mim.core.constants import TAB, TAB_STOP


def expand_tabs(chars: bytes, tab_stop: int = TAB_STOP) -> bytes:
    """Project raw bytes into display cells.

    Every non-tab byte takes one cell. A tab emits at least one space and
    then pads until the render column is a multiple of ``tab_stop``.
    """
    out = bytearray()
    for byte in chars:
        if byte == TAB:
            out.append(0x20)
            while len(out) % tab_stop:
                out.append(0x20)
        else:
            out.append(byte)
    return bytes(out)


class Row:
    """A single buffer row.

    ``chars`` holds the raw bytes as stored on disk, ``render`` the bytes
    actually drawn on screen. ``render`` is rebuilt after every mutation
    of ``chars``, so the pair is always consistent.
    """

    __slots__ = ("chars", "render", "tab_stop")

    def __init__(self, chars: bytes = b"", tab_stop: int = TAB_STOP) -> None:
        self.chars = bytearray(chars)
        self.tab_stop = tab_stop
        self.render = b""
        self.update()

    def __repr__(self) -> str:
        return f"Row({bytes(self.chars)!r})"

    @property
    def size(self) -> int:
        return len(self.chars)

    @property
    def rsize(self) -> int:
        return len(self.render)

    def update(self) -> None:
        """Recompute ``render`` from ``chars``."""
        self.render = expand_tabs(self.chars, self.tab_stop)

    def cx_to_rx(self, cx: int) -> int:
        """Map a raw column to its render column."""
        rx = 0
        for byte in self.chars[:cx]:
            if byte == TAB:
                rx += (self.tab_stop - 1) - (rx % self.tab_stop)
            rx += 1
        return rx

    def insert_char(self, at: int, c: int) -> None:
        if at < 0 or at > self.size:
            at = self.size
        self.chars.insert(at, c)
        self.update()

    def append(self, data: bytes) -> None:
        self.chars.extend(data)
        self.update()

    def delete_char(self, at: int) -> None:
        if at < 0 or at >= self.size:
            return
        del self.chars[at]
        self.update()

    def truncate(self, at: int) -> bytes:
        """Cut the row at ``at`` and return the removed suffix."""
        suffix = bytes(self.chars[at:])
        del self.chars[at:]
        self.update()
        return suffix
