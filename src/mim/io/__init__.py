"""File I/O for text buffers."""

from mim.io.reader import load
from mim.io.writer import save

__all__ = ["load", "save"]
