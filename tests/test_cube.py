import io
import math
import re

import pytest

from spincube.cube import (
    AMBIENT_INTENSITY,
    FACE_VERTEX_INDICES,
    TEXTURE,
    Cube,
    brightness_to_char,
)
from spincube.vector import Vec3
from spincube.window import Window

_OPPOSITE_PAIRS = ((0, 1), (2, 3), (4, 5))
_ROTATIONS = [
    Vec3(0, 0, 0),
    Vec3(0.3, -1.0, 0.5),
    Vec3(1.2, 0.7, -0.4),
    Vec3(-2.0, 3.1, 0.5),
    Vec3(0.15, -0.5, 0.5),
]


def _distance(a, b):
    return math.sqrt((a - b).dot(a - b))


def _cube(side, origin=Vec3(), rotation=Vec3()):
    cube = Cube(side)
    cube.origin = origin
    cube.rotation = rotation
    return cube


def _cells(text):
    parts = re.split(r"\x1b\[(-?\d+);(-?\d+)H", text)
    cells = {}
    for index in range(1, len(parts), 3):
        y, x, content = int(parts[index]), int(parts[index + 1]), parts[index + 2]
        cells[(x, y)] = content
    return cells


def test_brightness_to_char_full_brightness():
    assert brightness_to_char(1.0, 0) == "\x1b[38;2;205;245;255mC\x1b[0m"


def test_brightness_to_char_texture_wraps():
    assert brightness_to_char(0.5, 5) == brightness_to_char(0.5, 1)
    assert brightness_to_char(0.5, 5).endswith(TEXTURE[1] + "\x1b[0m")


@pytest.mark.parametrize("index", range(8))
def test_texture_letter_follows_index(index):
    assert brightness_to_char(0.7, index).endswith(TEXTURE[index % 4] + "\x1b[0m")


@pytest.mark.parametrize("rotation", _ROTATIONS)
def test_corners_stay_at_half_diagonal(rotation):
    origin = Vec3(10, -4, 50)
    cube = _cube(6, origin, rotation)
    for point in cube.points():
        assert _distance(point, origin) == pytest.approx(3 * math.sqrt(3))


@pytest.mark.parametrize("rotation", _ROTATIONS)
def test_face_edges_have_side_length(rotation):
    cube = _cube(8, Vec3(1, 2, 3), rotation)
    points = cube.points()
    for a, b, c, d in FACE_VERTEX_INDICES:
        for start, end in ((a, b), (b, c), (c, d), (d, a)):
            assert _distance(points[start], points[end]) == pytest.approx(8)


def test_unrotated_points_are_axis_aligned():
    origin = Vec3(5, 5, 5)
    points = _cube(4, origin).points()
    assert points[0] == Vec3(origin.x - 2, origin.y - 2, origin.z - 2)
    assert points[6] == Vec3(origin.x + 2, origin.y + 2, origin.z + 2)


def test_unrotated_cube_shows_only_back_face():
    assert _cube(10).visible_faces() == (False, True, False, False, False, False)


@pytest.mark.parametrize("rotation", _ROTATIONS)
def test_opposite_faces_never_both_visible(rotation):
    visible = _cube(10, Vec3(0, 0, 50), rotation).visible_faces()
    assert len(visible) == 6
    for first, second in _OPPOSITE_PAIRS:
        assert not (visible[first] and visible[second])
    assert 1 <= sum(visible) <= 3


def test_face_turned_from_light_gets_ambient_only():
    assert _cube(10).brightness(0) == pytest.approx(AMBIENT_INTENSITY)


@pytest.mark.parametrize("rotation", _ROTATIONS)
def test_brightness_in_range(rotation):
    cube = _cube(10, Vec3(3, 3, 3), rotation)
    for index in range(6):
        assert AMBIENT_INTENSITY <= cube.brightness(index) <= 1.0


def test_lit_face_brighter_than_ambient():
    assert _cube(10).brightness(1) > AMBIENT_INTENSITY


def test_draw_fills_centre_and_leaves_corners_blank():
    cube = _cube(10, Vec3(20, 20, 50), Vec3(0, 0, math.pi / 4))
    window = Window(0, 0, 40, 40)
    cube.draw(window, 20)
    out = io.StringIO()
    window.render(out)
    cells = _cells(out.getvalue())

    assert cells[(20, 20)].startswith("\x1b[38;2;")
    assert " " in cells.values()
    for (x, _), content in cells.items():
        if content != " ":
            assert content.endswith(TEXTURE[x % 4] + "\x1b[0m")


def test_draw_covers_bounding_box_once():
    cube = _cube(10, Vec3(20, 20, 50), Vec3(0.3, -1.0, 0.5))
    window = Window(0, 0, 40, 40)
    cube.draw(window, 20)
    out = io.StringIO()
    window.render(out)
    text = out.getvalue()
    cells = _cells(text)
    xs = {x for x, _ in cells}
    ys = {y for _, y in cells}
    assert len(cells) == len(xs) * len(ys)
    assert len(re.findall(r"\x1b\[-?\d+;-?\d+H", text)) == len(cells)


def test_draw_flattens_vertically():
    cube = _cube(20, Vec3(30, 30, 50))
    window = Window(0, 0, 60, 60)
    cube.draw(window, 30)
    out = io.StringIO()
    window.render(out)
    cells = _cells(out.getvalue())
    xs = {x for x, _ in cells}
    ys = {y for _, y in cells}
    assert len(ys) < len(xs)