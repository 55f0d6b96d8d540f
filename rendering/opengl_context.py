"""OpenGL context helpers and the GL line drawing surface."""
from __future__ import annotations

from typing import List, Tuple

from OpenGL import GL as gl

Point = Tuple[float, float]

BACKGROUND_COLOR = (0.02, 0.02, 0.05, 1.0)
LINE_COLOR = (0.65, 0.85, 1.0, 1.0)


def initialize_gl(surface_size: Tuple[int, int]) -> None:
    """Configure OpenGL state for 2D line rendering with a top-left origin."""
    width, height = surface_size
    gl.glViewport(0, 0, width, height)
    gl.glClearColor(*BACKGROUND_COLOR)

    gl.glMatrixMode(gl.GL_PROJECTION)
    gl.glLoadIdentity()
    gl.glOrtho(0, width, height, 0, -1, 1)

    gl.glMatrixMode(gl.GL_MODELVIEW)
    gl.glLoadIdentity()

    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
    gl.glLineWidth(1.5)


def resize_viewport(surface_size: Tuple[int, int]) -> None:
    """Update viewport and projection when the window changes size."""
    initialize_gl(surface_size)


class GLLineSurface:
    """Drawing surface that strokes each subpath as a ``GL_LINE_STRIP``."""

    def __init__(self, color: Tuple[float, float, float, float] = LINE_COLOR) -> None:
        self.color = color
        self._subpaths: List[List[Point]] = []

    def clear(self, width: float, height: float) -> None:
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)

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
        gl.glColor4f(*self.color)
        for points in self._subpaths:
            if len(points) < 2:
                continue
            gl.glBegin(gl.GL_LINE_STRIP)
            for x, y in points:
                gl.glVertex2f(x, y)
            gl.glEnd()
