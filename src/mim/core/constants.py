"""Shared constants for the editor."""

MIM_VERSION = "0.1.0"

# Editor defaults
TAB_STOP = 4
QUIT_TIMES = 1
MESSAGE_TIMEOUT = 5.0
STATUS_MSG_MAX = 79
FILENAME_DISPLAY_MAX = 20

# ANSI escape sequences (output)
ESC = b"\x1b"
CSI = ESC + b"["
CLEAR_SCREEN = CSI + b"2J"
CURSOR_HOME = CSI + b"H"
CLEAR_LINE = CSI + b"K"
HIDE_CURSOR = CSI + b"?25l"
SHOW_CURSOR = CSI + b"?25h"
INVERT_ON = CSI + b"7m"
INVERT_OFF = CSI + b"m"
CURSOR_FAR_CORNER = CSI + b"999C" + CSI + b"998B"
CURSOR_POSITION_REQUEST = CSI + b"6n"


def ctrl(ch: str) -> int:
    """Byte value produced by Ctrl + the given letter."""
    return ord(ch.upper()) & 0x1F


# Control bytes (input)
TAB = 9
ENTER = 13
ESCAPE = 27
BACKSPACE = 127

CTRL_H = ctrl("h")
CTRL_K = ctrl("k")
CTRL_L = ctrl("l")
CTRL_Q = ctrl("q")
CTRL_S = ctrl("s")
