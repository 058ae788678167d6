"""Core editor data structures: rows, buffer, viewport, status."""

from mim.core.buffer import TextBuffer
from mim.core.config import EditorConfig
from mim.core.row import Row
from mim.core.status import StatusLine, StatusMessage
from mim.core.viewport import Viewport

__all__ = [
    "TextBuffer",
    "EditorConfig",
    "Row",
    "StatusLine",
    "StatusMessage",
    "Viewport",
]
