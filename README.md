# spincube

spincube draws a rotating cube in your terminal. The cube is lit, so each face
has its own shade. The faces are filled with the letters `C`, `U`, `B`, `E` in
24-bit colour. A rounded blue border surrounds the drawing area. Below the
border a line shows the average time taken to draw a frame, over the last 100
frames.

## Installation

```
pip install .
```

The package needs nothing outside the standard library. It requires Python 3.10
or later. You also need a POSIX terminal that understands ANSI escape codes and
true colour.

## Usage

```
spincube
```

The command accepts no options except `-h`/`--help`.

While it runs:

- `p` pauses the rotation. Press it again to start the rotation again.
- `q` quits. The terminal is cleared and the cursor is shown again.

The program puts the terminal into raw mode while it runs and restores the
previous mode on exit. It aims for 60 frames per second.

If the terminal size cannot be read, or the input cannot be put into raw mode,
the command prints an error to standard error and exits with status 1.

## What it does not do

The drawing area is sized once, from the terminal size at start-up. The
program does not react when the terminal is resized. The cube's size, speed
and padding are fixed values in `spincube.app` (`SIDE_LENGTH`,
`ROTATION_SPEED`, `PADDING_X`, `PADDING_Y`, `FRAME_RATE`). No command-line
option changes them.

## Library use

You can also use the parts on their own:

```python
import io

from spincube.cube import Cube
from spincube.vector import Vec3
from spincube.window import create_window

window = create_window(10, 5, 60, 30)
cube = Cube(20)
cube.origin = Vec3(40, 20, 50)
cube.rotation = Vec3(0.3, -1.0, 0.5)
cube.draw(window, 20)

out = io.StringIO()
window.render(out)  # writes the border and the cube as escape sequences
```

- `spincube.vector` holds the vector maths: the immutable `Vec3` and `Vec2`,
  plus `point_in_triangle` and `rotate_euler`.
- `spincube.term` builds the ANSI colour constants and the `pos_code` cursor
  sequence. It also provides `clear_terminal`, `hide_cursor` and
  `show_cursor`, which write to a given stream or to stdout.
- `spincube.window` provides `Window` and `create_window`. A window buffers its
  output and writes it with `render`.
- `spincube.cube` provides `Cube`, with `points`, `visible_faces`,
  `brightness` and `draw`, and the `brightness_to_char` helper.
- `spincube.timer.FrameTimer` keeps a rolling average over the last 100 frame
  times. `draw` queues that average below a window.
- `spincube.app.run(stdin, stdout, width, height)` runs the animation loop on
  any pair of streams. `spincube.app.main` is the `spincube` command.

## Running the tests

```
pip install .[test]
pytest
```