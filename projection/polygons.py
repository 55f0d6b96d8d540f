"""Polygon value types and the ordered scene store."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from .vector import Vector2, Vector3

Point3 = Tuple[float, float, float]

MIN_VERTICES = 2


@dataclass(frozen=True)
class Polygon3D:
    """Ordered vertices drawn as a closed loop back to the first vertex."""

    vertices: Tuple[Vector3, ...]

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        if len(vertices) < MIN_VERTICES:
            raise ValueError(
                f"A polygon needs at least {MIN_VERTICES} vertices, got {len(vertices)}"
            )
        for index, vertex in enumerate(vertices):
            if not isinstance(vertex, Vector3):
                raise TypeError(f"Vertex {index} is not a Vector3: {vertex!r}")
            if not vertex.is_finite():
                raise ValueError(f"Vertex {index} has a non-finite coordinate: {vertex!r}")
        object.__setattr__(self, "vertices", vertices)

    @classmethod
    def from_points(cls, points: Iterable[Point3]) -> "Polygon3D":
        return cls(tuple(Vector3(float(x), float(y), float(z)) for x, y, z in points))

    def __len__(self) -> int:
        return len(self.vertices)


@dataclass(frozen=True)
class Polygon2D:
    """Projected image-plane vertices, index-aligned with the source polygon."""

    vertices: Tuple[Vector2, ...]

    def __len__(self) -> int:
        return len(self.vertices)


class Scene:
    """Append-only list of polygons; insertion order is draw order."""

    def __init__(self, polygons: Sequence[Polygon3D] = ()) -> None:
        self._polygons: List[Polygon3D] = []
        for polygon in polygons:
            self.add(polygon)

    def add(self, polygon: Polygon3D) -> None:
        if not isinstance(polygon, Polygon3D):
            raise TypeError(f"Scene only stores Polygon3D values, got {type(polygon).__name__}")
        self._polygons.append(polygon)

    @property
    def polygons(self) -> Tuple[Polygon3D, ...]:
        return tuple(self._polygons)

    def __len__(self) -> int:
        return len(self._polygons)

    def __iter__(self) -> Iterator[Polygon3D]:
        return iter(tuple(self._polygons))
