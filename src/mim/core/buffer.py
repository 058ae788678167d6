"""TextBuffer - ordered rows of raw bytes with edit operations.

Editing primitives take the cursor position they act on and return the
cursor position that results, leaving cursor ownership to the viewport.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from mim.core.constants import TAB_STOP
from mim.core.row import Row


class TextBuffer:
    """In-memory document.

    Attributes:
        rows: Rows in document order
        dirty: Modification counter, > 0 means unsaved changes
        filename: Path the buffer was loaded from or saved to, if any
    """

    def __init__(
        self,
        lines: Iterable[bytes] = (),
        filename: Path | None = None,
        tab_stop: int = TAB_STOP,
    ) -> None:
        self.tab_stop = tab_stop
        self.rows: list[Row] = [Row(line, tab_stop) for line in lines]
        self.dirty = 0
        self.filename = filename

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    @property
    def numrows(self) -> int:
        return len(self.rows)

    @property
    def is_modified(self) -> bool:
        return self.dirty > 0

    def row_at(self, cy: int) -> Row | None:
        """Row ``cy`` or None for the virtual row past the end."""
        if 0 <= cy < len(self.rows):
            return self.rows[cy]
        return None

    def row_len(self, cy: int) -> int:
        row = self.row_at(cy)
        return row.size if row is not None else 0

    def lines(self) -> list[bytes]:
        """Raw content of every row."""
        return [bytes(row.chars) for row in self.rows]

    # -------------------------------------------------------------------------
    # Row operations
    # -------------------------------------------------------------------------

    def insert_row(self, at: int, data: bytes = b"") -> Row:
        if at < 0 or at > len(self.rows):
            raise IndexError(f"row index {at} out of range 0..{len(self.rows)}")
        row = Row(data, self.tab_stop)
        self.rows.insert(at, row)
        self.dirty += 1
        return row

    def delete_row(self, at: int) -> None:
        if at < 0 or at >= len(self.rows):
            raise IndexError(f"row index {at} out of range 0..{len(self.rows) - 1}")
        del self.rows[at]
        self.dirty += 1

    # -------------------------------------------------------------------------
    # Editing primitives
    # -------------------------------------------------------------------------

    def insert_char(self, cy: int, cx: int, c: int) -> tuple[int, int]:
        if cy == len(self.rows):
            self.insert_row(len(self.rows))
        row = self.rows[cy]
        cx = min(max(cx, 0), row.size)
        row.insert_char(cx, c)
        self.dirty += 1
        return cy, cx + 1

    def insert_newline(self, cy: int, cx: int) -> tuple[int, int]:
        if cx == 0:
            self.insert_row(cy)
        else:
            suffix = self.rows[cy].truncate(cx)
            self.insert_row(cy + 1, suffix)
        return cy + 1, 0

    def delete_char(self, cy: int, cx: int) -> tuple[int, int]:
        if cy == len(self.rows):
            return cy, cx
        if cx == 0 and cy == 0:
            return cy, cx

        row = self.rows[cy]
        if cx > 0:
            row.delete_char(cx - 1)
            self.dirty += 1
            return cy, cx - 1

        prev = self.rows[cy - 1]
        prev_len = prev.size
        prev.append(bytes(row.chars))
        self.delete_row(cy)
        return cy - 1, prev_len

    def delete_line(self, cy: int) -> tuple[int, int]:
        if cy < len(self.rows):
            self.delete_row(cy)
        return min(cy, len(self.rows)), 0

    # -------------------------------------------------------------------------
    # Persistence helpers
    # -------------------------------------------------------------------------

    def to_byte_stream(self) -> bytes:
        """Every row followed by a newline, in document order."""
        return b"".join(bytes(row.chars) + b"\n" for row in self.rows)

    def mark_clean(self) -> None:
        self.dirty = 0
