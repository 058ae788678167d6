"""Transient status messages shown in the message bar."""

from __future__ import annotations

import time
from dataclasses import dataclass

from mim.core.constants import MESSAGE_TIMEOUT, STATUS_MSG_MAX


@dataclass(frozen=True)
class StatusMessage:
    """Message text stamped with its creation time."""
    text: str = ""
    timestamp: float = 0.0

    def is_visible(self, now: float, timeout: float = MESSAGE_TIMEOUT) -> bool:
        return bool(self.text) and now - self.timestamp < timeout


class StatusLine:
    """Holds the current status message.

    Every ``set`` call replaces the previous message wholesale.
    """

    def __init__(self, timeout: float = MESSAGE_TIMEOUT) -> None:
        self.timeout = timeout
        self.message = StatusMessage()

    def set(self, fmt: str, *args: object) -> StatusMessage:
        text = fmt % args if args else fmt
        self.message = StatusMessage(text[:STATUS_MSG_MAX], time.time())
        return self.message

    def clear(self) -> None:
        self.message = StatusMessage()

    def visible_text(self, now: float | None = None) -> str:
        """Current text, or an empty string once it has expired."""
        if now is None:
            now = time.time()
        if self.message.is_visible(now, self.timeout):
            return self.message.text
        return ""
