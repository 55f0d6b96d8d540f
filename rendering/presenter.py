"""Maps projected image-plane polygons onto a pixel drawing surface."""
from __future__ import annotations

from typing import Sequence

from projection.display import Display
from projection.polygons import Polygon2D
from projection.vector import Vector2

from .surface import DrawingSurface


def normalize(point: Vector2, width: float, height: float) -> Vector2:
    """Shift the optical center to the viewport middle and flip y to point down."""

    return Vector2(point.x + width / 2.0, -point.y + height / 2.0)


class WireframePresenter:
    """Strokes every projected polygon as a closed loop in one path."""

    def draw(
        self,
        surface: DrawingSurface,
        display: Display,
        polygons: Sequence[Polygon2D],
    ) -> None:
        width, height = display.width, display.height
        surface.clear(width, height)
        surface.begin_path()
        for polygon in polygons:
            first = normalize(polygon.vertices[0], width, height)
            surface.move_to(first.x, first.y)
            for vertex in polygon.vertices[1:]:
                point = normalize(vertex, width, height)
                surface.line_to(point.x, point.y)
            surface.line_to(first.x, first.y)
        surface.stroke()
