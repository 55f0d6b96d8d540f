"""Drawing surface capability the engine strokes polylines onto."""
from __future__ import annotations

from typing import Protocol


class DrawingSurface(Protocol):
    """Path-based 2D line drawing, in pixel coordinates with y growing downward."""

    def clear(self, width: float, height: float) -> None:
        ...

    def begin_path(self) -> None:
        ...

    def move_to(self, x: float, y: float) -> None:
        ...

    def line_to(self, x: float, y: float) -> None:
        ...

    def stroke(self) -> None:
        ...
