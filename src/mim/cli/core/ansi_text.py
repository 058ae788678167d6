"""Byte-level text helpers for building terminal output.

Every byte counts as one display cell.
"""

from __future__ import annotations

from mim.core.constants import CSI


def cursor_position(row: int, col: int) -> bytes:
    """Escape sequence moving the cursor to (row, col), 1-indexed."""
    return CSI + f"{row};{col}H".encode("ascii")


def truncate(s: bytes, max_width: int) -> bytes:
    """Cut ``s`` to at most ``max_width`` cells."""
    if max_width <= 0:
        return b""
    return s[:max_width]


def window(s: bytes, start: int, width: int) -> bytes:
    """The ``width`` cells of ``s`` starting at ``start`` (possibly empty)."""
    if start >= len(s) or width <= 0:
        return b""
    return s[max(start, 0):start + width]


def pad_to_width(s: bytes, width: int, char: bytes = b' ') -> bytes:
    """Pad string with char to reach exactly width cells."""
    if len(s) >= width:
        return s
    return s + char * (width - len(s))


def justify(left: bytes, right: bytes, width: int) -> bytes:
    """
    Lay out ``left`` and ``right`` on one line of ``width`` cells.

    ``left`` is truncated to the width; ``right`` is only placed when it
    fits exactly in the remaining space, otherwise the line is space
    padded.
    """
    left = truncate(left, width)
    remaining = width - len(left)
    if len(right) <= remaining:
        return left + b' ' * (remaining - len(right)) + right
    return pad_to_width(left, width)


def to_bytes(text: str) -> bytes:
    """Encode UI text; undecodable characters become '?'."""
    return text.encode("utf-8", errors="replace")
