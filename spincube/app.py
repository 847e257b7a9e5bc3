"""Terminal front end that animates the spinning cube."""

from __future__ import annotations

import argparse
import os
import queue
import sys
import threading
import time
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, TextIO

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - non-POSIX platforms
    termios = None
    tty = None

from spincube.cube import Cube
from spincube.term import clear_terminal, hide_cursor, show_cursor
from spincube.timer import FrameTimer
from spincube.vector import Vec3
from spincube.window import create_window

PADDING_X = 50
PADDING_Y = 10
ROTATION_SPEED = 1.5
SIDE_LENGTH = 45
FRAME_RATE = 60


class _Event(Enum):
    QUIT = "quit"
    PAUSE = "pause"


def _read_keys(stdin: TextIO, events: queue.Queue[_Event]) -> None:
    while True:
        try:
            key = stdin.read(1)
        except (OSError, ValueError):
            return
        if not key:
            return
        if key == "q":
            events.put(_Event.QUIT)
            return
        if key == "p":
            events.put(_Event.PAUSE)


def run(stdin: TextIO, stdout: TextIO, width: int, height: int) -> None:
    """Animate the cube on ``stdout`` until ``q`` is read from ``stdin`` or Ctrl-C.

    ``p`` pauses and resumes the rotation.
    """
    clear_terminal(stdout)
    hide_cursor(stdout)
    events: queue.Queue[_Event] = queue.Queue()
    threading.Thread(target=_read_keys, args=(stdin, events), daemon=True).start()

    window = create_window(
        PADDING_X,
        PADDING_Y,
        width - (PADDING_X * 2 - 1),
        height - (PADDING_Y * 2 - 1),
    )
    window.render(stdout)

    cube = Cube(SIDE_LENGTH)
    cube.origin = Vec3(width / 2, height / 2, 50)
    frame_timer = FrameTimer()

    target_frame = 1.0 / FRAME_RATE
    last_frame = time.perf_counter()
    rotation = 0.5
    animate = True
    try:
        while True:
            try:
                event = events.get_nowait()
            except queue.Empty:
                event = None
            if event is _Event.QUIT:
                break
            if event is _Event.PAUSE:
                animate = not animate
                continue

            frame_start = time.perf_counter()
            delta = frame_start - last_frame
            last_frame = frame_start

            cube.rotation = Vec3(rotation * 0.3, -rotation, 0.5)
            cube.draw(window, height / 2)
            window.render(stdout)

            frame_timer.draw(window)
            frame_timer.add(time.perf_counter() - frame_start)

            if animate:
                rotation += delta * ROTATION_SPEED
            remaining = target_frame - (time.perf_counter() - frame_start)
            if remaining > 0:
                time.sleep(remaining)
    except KeyboardInterrupt:
        pass
    finally:
        clear_terminal(stdout)
        show_cursor(stdout)


@contextmanager
def _raw_mode(stream: TextIO) -> Iterator[None]:
    if termios is None:
        yield
        return
    fd = stream.fileno()
    try:
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
    except termios.error as exc:
        raise OSError(f"cannot put input into raw mode: {exc}") from exc
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def main(argv: list[str] | None = None) -> int:
    """Run the spinning cube in the current terminal."""
    parser = argparse.ArgumentParser(
        prog="spincube",
        description="Spin a shaded cube in the terminal. Press p to pause, q to quit.",
    )
    parser.parse_args(argv)

    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError) as exc:
        print(f"spincube: cannot get terminal size: {exc}", file=sys.stderr)
        return 1

    try:
        with _raw_mode(sys.stdin):
            run(sys.stdin, sys.stdout, size.columns, size.lines)
    except (OSError, ValueError) as exc:
        print(f"spincube: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())