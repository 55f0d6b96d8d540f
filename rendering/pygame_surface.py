"""Software drawing surface backed by a ``pygame.Surface``."""
from __future__ import annotations

from typing import List, Optional, Tuple

import pygame

Point = Tuple[float, float]
Color = Tuple[int, int, int]

BACKGROUND_RGB: Color = (5, 5, 13)
LINE_RGB: Color = (166, 217, 255)
# pygame rasterizes with C ints; points near the camera can project far past that.
PIXEL_LIMIT = 32767.0


def clip_segment(start: Point, end: Point, limit: float = PIXEL_LIMIT) -> Optional[Tuple[Point, Point]]:
    """Liang-Barsky clip of a segment to the square ``[-limit, limit]``.

    Returns ``None`` when the segment lies entirely outside. The clipped
    segment keeps the direction of the original one.
    """

    x0, y0 = start
    dx = end[0] - x0
    dy = end[1] - y0
    t_enter, t_exit = 0.0, 1.0
    for p, q in (
        (-dx, x0 + limit),
        (dx, limit - x0),
        (-dy, y0 + limit),
        (dy, limit - y0),
    ):
        if p == 0.0:
            if q < 0.0:
                return None
            continue
        t = q / p
        if p < 0.0:
            if t > t_exit:
                return None
            t_enter = max(t_enter, t)
        else:
            if t < t_enter:
                return None
            t_exit = min(t_exit, t)
    return (
        (x0 + t_enter * dx, y0 + t_enter * dy),
        (x0 + t_exit * dx, y0 + t_exit * dy),
    )


class PygameLineSurface:
    """Collects subpaths and strokes each segment with ``pygame.draw.line``."""

    def __init__(
        self,
        target: pygame.Surface,
        *,
        line_color: Color = LINE_RGB,
        background_color: Color = BACKGROUND_RGB,
        line_width: int = 1,
    ) -> None:
        self.target = target
        self.line_color = line_color
        self.background_color = background_color
        self.line_width = line_width
        self._subpaths: List[List[Point]] = []

    def retarget(self, target: pygame.Surface) -> None:
        """Draw onto a new surface, e.g. after the window was resized."""

        self.target = target

    def clear(self, width: float, height: float) -> None:
        self.target.fill(self.background_color, pygame.Rect(0, 0, int(width), int(height)))

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self._subpaths.append([(x, y)])
            return
        self._subpaths[-1].append((x, y))

    def stroke(self) -> None:
        for points in self._subpaths:
            for start, end in zip(points, points[1:]):
                clipped = clip_segment(start, end)
                if clipped is None:
                    continue
                pygame.draw.line(
                    self.target, self.line_color, clipped[0], clipped[1], self.line_width
                )
