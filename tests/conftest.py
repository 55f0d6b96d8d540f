from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from typing import Any, List, Tuple  # noqa: E402

import pytest  # noqa: E402


class RecordingSurface:
    """Drawing surface that records every call in order."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def clear(self, width: float, height: float) -> None:
        self.calls.append(("clear", width, height))

    def begin_path(self) -> None:
        self.calls.append(("begin_path",))

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append(("line_to", x, y))

    def stroke(self) -> None:
        self.calls.append(("stroke",))

    def redraw_count(self) -> int:
        return sum(1 for call in self.calls if call[0] == "stroke")

    def last_frame(self) -> List[Tuple[Any, ...]]:
        """Calls since the most recent ``clear``."""

        for index in range(len(self.calls) - 1, -1, -1):
            if self.calls[index][0] == "clear":
                return self.calls[index:]
        return []

    def points(self) -> List[Tuple[float, float]]:
        return [(call[1], call[2]) for call in self.last_frame() if call[0] in ("move_to", "line_to")]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
