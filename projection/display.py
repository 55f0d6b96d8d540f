"""Camera and viewport state shared by the projector and the presenter."""
from __future__ import annotations

import math
from dataclasses import dataclass

from .vector import ORIGIN, Vector3, rotate

DEFAULT_FOCAL_RATIO = 0.375
FULL_TURN = 360.0


def wrap_degrees(angle: float) -> float:
    """Fold ``angle`` into ``[0, 360)``."""

    wrapped = angle % FULL_TURN
    # Tiny negative inputs round up to exactly 360.0 under float modulo.
    if wrapped >= FULL_TURN:
        return 0.0
    return wrapped


def require_finite(name: str, *values: float) -> None:
    for value in values:
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")


def validate_focal_length(value: float) -> float:
    require_finite("focal_length", value)
    if value <= 0.0:
        raise ValueError(f"focal_length must stay strictly positive, got {value!r}")
    return float(value)


def validate_viewport(width: float, height: float) -> None:
    require_finite("viewport size", width, height)
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must have a positive size, got {width}x{height}")


@dataclass
class Display:
    """Mutable camera orientation, position, focal length and viewport size.

    Angles are in degrees and always kept in ``[0, 360)``. Width and height are
    only read by the presentation layer.
    """

    width: float
    height: float
    focal_length: float
    center: Vector3 = ORIGIN
    roll_angle: float = 0.0
    pitch_angle: float = 0.0
    yaw_angle: float = 0.0

    def __post_init__(self) -> None:
        validate_viewport(self.width, self.height)
        self.focal_length = validate_focal_length(self.focal_length)
        require_finite("camera angles", self.roll_angle, self.pitch_angle, self.yaw_angle)
        if not self.center.is_finite():
            raise ValueError(f"Camera center must be finite, got {self.center!r}")
        self.roll_angle = wrap_degrees(self.roll_angle)
        self.pitch_angle = wrap_degrees(self.pitch_angle)
        self.yaw_angle = wrap_degrees(self.yaw_angle)

    @classmethod
    def for_viewport(cls, width: float, height: float) -> "Display":
        validate_viewport(width, height)
        return cls(width=width, height=height, focal_length=width * DEFAULT_FOCAL_RATIO)

    def camera_to_world(self, delta: Vector3) -> Vector3:
        """Express a camera-local offset in world axes (roll, then pitch, then yaw)."""

        rotated = rotate(delta, "x", self.roll_angle)
        rotated = rotate(rotated, "y", self.pitch_angle)
        return rotate(rotated, "z", self.yaw_angle)

    def set_angles(self, roll: float, pitch: float, yaw: float) -> None:
        require_finite("camera angles", roll, pitch, yaw)
        self.roll_angle = wrap_degrees(roll)
        self.pitch_angle = wrap_degrees(pitch)
        self.yaw_angle = wrap_degrees(yaw)
