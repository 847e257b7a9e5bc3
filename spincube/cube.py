"""A shaded, rotatable cube rasterised into terminal cells."""

from __future__ import annotations

import math

from spincube.term import RESET, pos_code
from spincube.vector import Vec2, Vec3, point_in_triangle, rotate_euler
from spincube.window import Window

LIGHT_DIR = Vec3(1, -1, 1).normalize()
AMBIENT_INTENSITY = 0.3

# Terminal cells are roughly twice as tall as they are wide.
PIXEL_ASPECT = 0.45

FACE_VERTEX_INDICES: tuple[tuple[int, int, int, int], ...] = (
    (0, 1, 2, 3),  # front
    (4, 5, 6, 7),  # back
    (4, 7, 1, 0),  # left
    (3, 2, 6, 5),  # right
    (4, 0, 3, 5),  # top
    (1, 7, 6, 2),  # bottom
)

TEXTURE = ("C", "U", "B", "E")

_VIEW = Vec3(0, 0, -1)


def brightness_to_char(brightness: float, texture_index: int) -> str:
    """Return the texture letter for ``texture_index`` coloured by ``brightness``."""
    letter = TEXTURE[texture_index % len(TEXTURE)]
    level = int(brightness * 255)
    return f"\x1b[38;2;{level - 50};{level - 10};{level}m{letter}{RESET}"


def _face_normal(points: tuple[Vec3, ...], face: tuple[int, int, int, int]) -> Vec3:
    first, second, third, _ = face
    edge1 = points[second] - points[first]
    edge2 = points[third] - points[first]
    return edge1.cross(edge2)


class Cube:
    """An axis-aligned cube around ``origin``, turned by the Euler angles in ``rotation``."""

    def __init__(self, side_length: float) -> None:
        self.side_length = float(side_length)
        self.origin = Vec3()
        self.rotation = Vec3()

    def points(self) -> tuple[Vec3, ...]:
        """Return the eight rotated corners in the order the faces refer to."""
        d = self.side_length / 2
        o = self.origin
        corners = (
            Vec3(o.x - d, o.y - d, o.z - d),
            Vec3(o.x - d, o.y + d, o.z - d),
            Vec3(o.x + d, o.y + d, o.z - d),
            Vec3(o.x + d, o.y - d, o.z - d),
            Vec3(o.x - d, o.y - d, o.z + d),
            Vec3(o.x + d, o.y - d, o.z + d),
            Vec3(o.x + d, o.y + d, o.z + d),
            Vec3(o.x - d, o.y + d, o.z + d),
        )
        return tuple(rotate_euler(p, o, self.rotation) for p in corners)

    def visible_faces(self) -> tuple[bool, ...]:
        """Return, for each face, whether it faces the viewer."""
        points = self.points()
        return tuple(_face_normal(points, face).dot(_VIEW) < 0 for face in FACE_VERTEX_INDICES)

    def brightness(self, face_index: int) -> float:
        """Return the lit brightness of a face, between 0 and 1."""
        normal = _face_normal(self.points(), FACE_VERTEX_INDICES[face_index]).normalize()
        diffuse = max(normal.dot(LIGHT_DIR), 0.0)
        value = AMBIENT_INTENSITY + diffuse * (1.0 - AMBIENT_INTENSITY)
        return min(1.0, max(0.0, value))

    def draw(self, window: Window, y_scale_origin: float) -> None:
        """Queue every cell of the cube's screen bounding box into ``window``."""
        projected = [
            Vec2(p.x, y_scale_origin + (p.y - y_scale_origin) * PIXEL_ASPECT)
            for p in self.points()
        ]
        min_x = min(math.floor(p.x) for p in projected)
        max_x = max(math.ceil(p.x) for p in projected)
        min_y = min(math.floor(p.y) for p in projected)
        max_y = max(math.ceil(p.y) for p in projected)

        visible = self.visible_faces()
        shaded = [
            (face, self.brightness(index))
            for index, face in enumerate(FACE_VERTEX_INDICES)
            if visible[index]
        ]

        for x in range(min_x, max_x + 1):
            for y in range(min_y, max_y + 1):
                window.write(pos_code(x, y))
                cell = Vec2(float(x), float(y))
                hit = False
                for (a, b, c, d), brightness in shaded:
                    if point_in_triangle(
                        cell, projected[a], projected[c], projected[d]
                    ) or point_in_triangle(cell, projected[a], projected[b], projected[c]):
                        window.write(brightness_to_char(brightness, x))
                        hit = True
                if not hit:
                    window.write(" ")


__all__ = [
    "AMBIENT_INTENSITY",
    "Cube",
    "FACE_VERTEX_INDICES",
    "LIGHT_DIR",
    "TEXTURE",
    "brightness_to_char",
]