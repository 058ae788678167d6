"""Base widget protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass
class Rect:
    """Rectangle bounds for widget positioning."""
    x: int
    y: int
    width: int
    height: int


@runtime_checkable
class Widget(Protocol):
    """Protocol for TUI widgets."""

    def render(self, bounds: Rect) -> list[bytes]:
        """Render widget content as list of lines."""
        ...


class BaseWidget(ABC):
    """Base class with common widget functionality."""

    @abstractmethod
    def render(self, bounds: Rect) -> list[bytes]:
        """Subclasses must implement rendering.

        Lines carry no line terminator; the renderer joins them.
        """
        pass
