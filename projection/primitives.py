"""Polygon builders for common wireframe shapes."""
from __future__ import annotations

from typing import List, Sequence

from .polygons import Point3, Polygon3D
from .vector import Vector3


def _face(points: Sequence[Point3]) -> Polygon3D:
    return Polygon3D.from_points(points)


def make_cube(position: Vector3, size: Vector3) -> List[Polygon3D]:
    """Build a box centred on ``position`` with full extents ``size``.

    Returns six polygons: the front face (nearest along x), the back face, and
    four 2-vertex edges joining each front corner to the matching back corner.
    """

    if size.x <= 0.0 or size.y <= 0.0 or size.z <= 0.0:
        raise ValueError(f"Cube size must be positive on every axis, got {size!r}")

    hx, hy, hz = size.x / 2.0, size.y / 2.0, size.z / 2.0
    near_x = position.x - hx
    far_x = position.x + hx
    corners = [
        (position.y - hy, position.z - hz),  # bottom left
        (position.y - hy, position.z + hz),  # top left
        (position.y + hy, position.z + hz),  # top right
        (position.y + hy, position.z - hz),  # bottom right
    ]

    front = _face([(near_x, y, z) for y, z in corners])
    back = _face([(far_x, y, z) for y, z in corners])
    edges = [_face([(near_x, y, z), (far_x, y, z)]) for y, z in corners]
    return [front, back, *edges]


def make_demo_panels() -> List[Polygon3D]:
    """Two facing panels joined by three side quads."""

    return [
        _face([(100, -200, -200), (100, -200, 200), (100, 200, 200), (100, 200, -200)]),
        _face([(200, -200, -200), (200, -200, 200), (200, 200, 200), (200, 200, -200)]),
        _face([(100, -200, -200), (200, -200, -200), (200, -200, 200), (100, -200, 200)]),
        _face([(100, -200, 200), (100, 200, 200), (200, 200, 200), (200, -200, 200)]),
        _face([(200, 200, 200), (100, 200, 200), (100, 200, -200), (200, 200, -200)]),
    ]
