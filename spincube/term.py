"""ANSI escape sequences for cursor control and colour."""

from __future__ import annotations

import sys
from typing import TextIO

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
ITALIC = "\x1b[3m"
UNDERLINE = "\x1b[4m"

FG_BLACK = "\x1b[30m"
FG_RED = "\x1b[31m"
FG_GREEN = "\x1b[32m"
FG_YELLOW = "\x1b[33m"
FG_BLUE = "\x1b[34m"
FG_MAGENTA = "\x1b[35m"
FG_CYAN = "\x1b[36m"
FG_WHITE = "\x1b[37m"

FG_BRIGHT_BLACK = "\x1b[90m"
FG_BRIGHT_RED = "\x1b[91m"
FG_BRIGHT_GREEN = "\x1b[92m"
FG_BRIGHT_YELLOW = "\x1b[93m"
FG_BRIGHT_BLUE = "\x1b[94m"
FG_BRIGHT_MAGENTA = "\x1b[95m"
FG_BRIGHT_CYAN = "\x1b[96m"
FG_BRIGHT_WHITE = "\x1b[97m"

BG_BLACK = "\x1b[40m"
BG_RED = "\x1b[41m"
BG_GREEN = "\x1b[42m"
BG_YELLOW = "\x1b[43m"
BG_BLUE = "\x1b[44m"
BG_MAGENTA = "\x1b[45m"
BG_CYAN = "\x1b[46m"
BG_WHITE = "\x1b[47m"

BG_BRIGHT_BLACK = "\x1b[100m"
BG_BRIGHT_RED = "\x1b[101m"
BG_BRIGHT_GREEN = "\x1b[102m"
BG_BRIGHT_YELLOW = "\x1b[103m"
BG_BRIGHT_BLUE = "\x1b[104m"
BG_BRIGHT_MAGENTA = "\x1b[105m"
BG_BRIGHT_CYAN = "\x1b[106m"
BG_BRIGHT_WHITE = "\x1b[107m"

CLEAR = "\x1b[H\x1b[2J"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


def pos_code(x: int, y: int) -> str:
    """Return the sequence that moves the cursor to column ``x``, row ``y``."""
    return f"\x1b[{y};{x}H"


def _emit(code: str, stream: TextIO | None) -> None:
    out = sys.stdout if stream is None else stream
    out.write(code)
    out.flush()


def clear_terminal(stream: TextIO | None = None) -> None:
    """Home the cursor and clear the screen."""
    _emit(CLEAR, stream)


def hide_cursor(stream: TextIO | None = None) -> None:
    """Hide the terminal cursor."""
    _emit(HIDE_CURSOR, stream)


def show_cursor(stream: TextIO | None = None) -> None:
    """Show the terminal cursor."""
    _emit(SHOW_CURSOR, stream)