"""
mim: a minimal full-screen terminal text editor

Quick Start:
    $ mim notes.txt

Library use:
    >>> import mim
    >>> buf = mim.load("notes.txt")
    >>> buf.insert_char(0, 0, ord("#"))
    (0, 1)
    >>> mim.save(buf, "notes.txt")

Features:
    - Raw-mode terminal session restored on every exit path
    - ANSI escape sequence decoding for arrows, Home/End, Delete, Page keys
    - Byte-oriented row buffer with tab-aware rendering
    - Single-write frame painting with status and message bars
"""

import logging

__version__ = "0.1.0"

from mim.core.buffer import TextBuffer
from mim.core.config import EditorConfig
from mim.core.row import Row
from mim.core.viewport import Viewport

from mim.io.reader import load
from mim.io.writer import save

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "TextBuffer",
    "EditorConfig",
    "Row",
    "Viewport",
    # I/O
    "load",
    "save",
]
