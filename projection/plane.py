"""Plane coefficients and signed point-to-plane distances."""
from __future__ import annotations

import math
from dataclasses import dataclass

from .vector import Vector3, subtract


@dataclass(frozen=True)
class PlaneCoefficients:
    """Plane ``a*x + b*y + c*z - d = 0``."""

    a: float
    b: float
    c: float
    d: float

    @property
    def normal(self) -> Vector3:
        return Vector3(self.a, self.b, self.c)


def plane_through(normal: Vector3, point: Vector3) -> PlaneCoefficients:
    """Plane with ``normal`` passing through ``point``."""

    a, b, c = normal.x, normal.y, normal.z
    if a == 0.0 and b == 0.0 and c == 0.0:
        raise ValueError("Plane normal must be non-zero")
    return PlaneCoefficients(a=a, b=b, c=c, d=a * point.x + b * point.y + c * point.z)


def plane_through_points(first: Vector3, second: Vector3, third: Vector3) -> PlaneCoefficients:
    """Plane containing three points, normal oriented by ``(B-A) x (C-A)``."""

    ba = subtract(second, first)
    ca = subtract(third, first)
    normal = Vector3(
        ba.y * ca.z - ba.z * ca.y,
        ba.z * ca.x - ba.x * ca.z,
        ba.x * ca.y - ba.y * ca.x,
    )
    if normal.magnitude() == 0.0:
        raise ValueError("Points are collinear; no unique plane passes through them")
    return plane_through(normal, first)


def signed_distance(p: Vector3, plane: PlaneCoefficients) -> float:
    """Distance from ``p`` to ``plane``, positive on the side the normal points to.

    The projector reads depth and lateral offsets from the sign, so this is
    never an absolute value.
    """

    numerator = plane.a * p.x + plane.b * p.y + plane.c * p.z - plane.d
    denominator = math.sqrt(plane.a * plane.a + plane.b * plane.b + plane.c * plane.c)
    return numerator / denominator
