import io
import re

from spincube.term import clear_terminal, hide_cursor, pos_code, show_cursor


def test_pos_code_row_then_column():
    assert pos_code(3, 7) == "\x1b[7;3H"


def test_pos_code_parses_back():
    for x, y in [(0, 0), (12, 40), (-1, 5)]:
        match = re.fullmatch(r"\x1b\[(-?\d+);(-?\d+)H", pos_code(x, y))
        assert match is not None
        assert (int(match.group(2)), int(match.group(1))) == (x, y)


def test_clear_terminal_writes_sequence():
    out = io.StringIO()
    clear_terminal(out)
    assert out.getvalue() == "\033[H\033[2J"


def test_hide_cursor_writes_sequence():
    out = io.StringIO()
    hide_cursor(out)
    assert out.getvalue() == "\033[?25l"


def test_show_cursor_writes_sequence():
    out = io.StringIO()
    show_cursor(out)
    assert out.getvalue() == "\033[?25h"