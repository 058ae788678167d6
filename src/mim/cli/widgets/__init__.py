"""Reusable TUI widgets."""

from mim.cli.widgets.base import Widget, Rect
from mim.cli.widgets.message_bar import MessageBarWidget
from mim.cli.widgets.status_bar import StatusBarWidget
from mim.cli.widgets.text_view import TextViewWidget

__all__ = [
    "Widget",
    "Rect",
    "MessageBarWidget",
    "StatusBarWidget",
    "TextViewWidget",
]
