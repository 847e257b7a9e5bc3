"""Small 2D/3D vector helpers used for projecting and shading the cube."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product ``self x other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self) -> Vec3:
        """Return a unit vector pointing the same way."""
        length = math.sqrt(self.dot(self))
        if length == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec3(self.x / length, self.y / length, self.z / length)

    def dot(self, other: Vec3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z


@dataclass(frozen=True)
class Vec2:
    """An immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0


def point_in_triangle(p: Vec2, a: Vec2, b: Vec2, c: Vec2) -> bool:
    """Return True if ``p`` lies inside or on the edge of triangle ``abc``.

    Uses barycentric coordinates, so the winding of the triangle does not
    matter. A degenerate (zero-area) triangle contains no points.
    """
    double_area = (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)
    if double_area == 0:
        return False
    s = (a.y * c.x - a.x * c.y + (c.y - a.y) * p.x + (a.x - c.x) * p.y) / double_area
    t = (a.x * b.y - a.y * b.x + (a.y - b.y) * p.x + (b.x - a.x) * p.y) / double_area
    u = 1 - s - t
    return s >= 0 and t >= 0 and u >= 0


def _rotate_x(p: Vec3, angle: float) -> Vec3:
    s, c = math.sin(angle), math.cos(angle)
    return Vec3(p.x, c * p.y - s * p.z, s * p.y + c * p.z)


def _rotate_y(p: Vec3, angle: float) -> Vec3:
    s, c = math.sin(angle), math.cos(angle)
    return Vec3(c * p.x + s * p.z, p.y, -s * p.x + c * p.z)


def _rotate_z(p: Vec3, angle: float) -> Vec3:
    s, c = math.sin(angle), math.cos(angle)
    return Vec3(c * p.x - s * p.y, s * p.x + c * p.y, p.z)


def rotate_euler(p: Vec3, origin: Vec3, rotation: Vec3) -> Vec3:
    """Rotate ``p`` about ``origin`` by the X, then Y, then Z angles of ``rotation``."""
    rotated = _rotate_x(p - origin, rotation.x)
    rotated = _rotate_y(rotated, rotation.y)
    rotated = _rotate_z(rotated, rotation.z)
    return Vec3(rotated.x + origin.x, rotated.y + origin.y, rotated.z + origin.z)