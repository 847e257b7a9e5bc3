"""A bordered drawing area that buffers output until rendered."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from spincube.term import FG_BRIGHT_BLUE, RESET, pos_code

_HORIZONTAL = "─"
_VERTICAL = "│"
_TOP_LEFT = "╭"
_TOP_RIGHT = "╮"
_BOTTOM_LEFT = "╰"
_BOTTOM_RIGHT = "╯"


@dataclass
class Window:
    """A screen region with a pending output buffer."""

    x: int
    y: int
    width: int
    height: int
    _parts: list[str] = field(default_factory=list, repr=False)

    def write(self, text: str) -> None:
        """Append ``text`` to the pending output."""
        self._parts.append(text)

    def render(self, stream: TextIO | None = None) -> None:
        """Write the pending output to ``stream`` (stdout by default) and clear it."""
        out = sys.stdout if stream is None else stream
        out.write("".join(self._parts))
        out.flush()
        self._parts.clear()


def create_window(x: int, y: int, width: int, height: int) -> Window:
    """Create a window whose buffer already holds its rounded border."""
    window = Window(x, y, width, height)
    window.write(FG_BRIGHT_BLUE)
    right = x + width + 1
    bottom = y + height + 1
    for cur_x in range(x - 1, right):
        window.write(pos_code(cur_x, y - 1) + _HORIZONTAL)
        window.write(pos_code(cur_x, bottom) + _HORIZONTAL)
    for cur_y in range(y - 1, bottom + 1):
        window.write(pos_code(x - 1, cur_y) + _VERTICAL)
        window.write(pos_code(right, cur_y) + _VERTICAL)
    window.write(pos_code(x - 1, y - 1) + _TOP_LEFT)
    window.write(pos_code(right, y - 1) + _TOP_RIGHT)
    window.write(pos_code(right, bottom) + _BOTTOM_RIGHT)
    window.write(pos_code(x - 1, bottom) + _BOTTOM_LEFT)
    window.write(RESET)
    return window


__all__ = ["Window", "create_window"]