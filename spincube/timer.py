"""Rolling average of recent frame times."""

from __future__ import annotations

import math
from collections import deque

from spincube.term import FG_BRIGHT_GREEN, RESET, pos_code
from spincube.window import Window

_CAPACITY = 100
_BLANK = " " * 31


class FrameTimer:
    """Keeps the last hundred frame times in milliseconds."""

    def __init__(self) -> None:
        self._times: deque[float] = deque(maxlen=_CAPACITY)

    def add(self, seconds: float) -> None:
        """Record a frame that took ``seconds``, at microsecond resolution."""
        micros = math.trunc(round(seconds * 1e9) / 1000)
        self._times.append(micros / 1000.0)

    def average(self) -> float:
        """Return the mean of the recorded times in milliseconds, or 0."""
        if not self._times:
            return 0.0
        return sum(self._times) / len(self._times)

    def draw(self, window: Window) -> None:
        """Queue the average frame time just below ``window``."""
        position = pos_code(window.x, window.y + window.height + 2)
        window.write(position)
        window.write(_BLANK)
        window.write(position)
        window.write(f"Avg frame time: {FG_BRIGHT_GREEN}{self.average():.1f}ms{RESET}")