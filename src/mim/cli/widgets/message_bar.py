"""Message bar widget for transient status messages."""

from __future__ import annotations

from mim.cli.core.ansi_text import to_bytes, truncate
from mim.cli.widgets.base import BaseWidget, Rect
from mim.core.constants import CLEAR_LINE
from mim.core.status import StatusLine


class MessageBarWidget(BaseWidget):
    """Bottom line: cleared every frame, then the current message if fresh."""

    def __init__(self, status: StatusLine) -> None:
        self.status = status

    def render(self, bounds: Rect) -> list[bytes]:
        text = to_bytes(self.status.visible_text())
        return [CLEAR_LINE + truncate(text, bounds.width)]
