"""Point types and principal-axis rotations for the projection core."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Literal, Tuple

import numpy as np

Axis = Literal["x", "y", "z"]


@dataclass(frozen=True)
class Vector3:
    """A point or free vector in world space."""

    x: float
    y: float
    z: float

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def as_array(self) -> np.ndarray:
        return np.array((self.x, self.y, self.z), dtype=np.float64)

    @classmethod
    def from_array(cls, values: np.ndarray) -> "Vector3":
        return cls(float(values[0]), float(values[1]), float(values[2]))


@dataclass(frozen=True)
class Vector2:
    """A point on the image plane, origin at the optical center, y up."""

    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Vector3(0.0, 0.0, 0.0)


def subtract(p1: Vector3, p2: Vector3) -> Vector3:
    return Vector3(p1.x - p2.x, p1.y - p2.y, p1.z - p2.z)


def distance(p1: Vector3, p2: Vector3) -> float:
    """Euclidean distance between two points."""

    return subtract(p1, p2).magnitude()


def _rotation_x(rad: float) -> np.ndarray:
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array(((1.0, 0.0, 0.0), (0.0, c, -s), (0.0, s, c)), dtype=np.float64)


def _rotation_y(rad: float) -> np.ndarray:
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array(((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c)), dtype=np.float64)


def _rotation_z(rad: float) -> np.ndarray:
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array(((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0)), dtype=np.float64)


_ROTATIONS: Dict[Axis, Callable[[float], np.ndarray]] = {
    "x": _rotation_x,
    "y": _rotation_y,
    "z": _rotation_z,
}


def rotation_matrix(axis: Axis, angle_degrees: float) -> np.ndarray:
    """Return the right-handed 3x3 rotation about ``axis``."""

    try:
        builder = _ROTATIONS[axis]
    except KeyError as exc:
        raise ValueError(f"Unknown rotation axis: {axis!r}") from exc
    return builder(math.radians(angle_degrees))


def rotate(v: Vector3, axis: Axis, angle_degrees: float) -> Vector3:
    """Rotate ``v`` around a principal axis by ``angle_degrees``."""

    return Vector3.from_array(rotation_matrix(axis, angle_degrees) @ v.as_array())
