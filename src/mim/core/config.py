"""Editor configuration."""

from __future__ import annotations

from dataclasses import dataclass

from mim.core.constants import MESSAGE_TIMEOUT, QUIT_TIMES, TAB_STOP


@dataclass(frozen=True)
class EditorConfig:
    """Tunable editor settings.

    Built once by the CLI from its options (and their environment
    variable fallbacks) and handed to the editor explicitly.
    """
    tab_stop: int = TAB_STOP
    quit_times: int = QUIT_TIMES
    message_timeout: float = MESSAGE_TIMEOUT

    def __post_init__(self) -> None:
        if self.tab_stop < 1:
            raise ValueError(f"tab_stop must be at least 1, got {self.tab_stop}")
        if self.quit_times < 0:
            raise ValueError(f"quit_times must not be negative, got {self.quit_times}")
