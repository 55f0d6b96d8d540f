"""Viewer settings and command line parsing."""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

SCENES = ("cube", "panels")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class ViewerConfig:
    width: int = 800
    height: int = 800
    focal_length: Optional[float] = None  # None derives it from the width
    move_speed: float = 240.0  # world units per second
    roll_speed: float = 90.0  # degrees per second
    mouse_sensitivity: float = 0.25  # degrees per pixel dragged
    focal_step: float = 10.0  # per mouse wheel notch
    software: bool = False
    scene: str = "cube"
    log_level: str = "INFO"
    fps: int = 60

    @classmethod
    def from_args(cls, argv: Optional[Sequence[str]] = None) -> "ViewerConfig":
        defaults = cls()
        parser = argparse.ArgumentParser(
            description="Wireplane wireframe viewer",
            epilog=(
                "controls: W/S forward/back, A/D sideways, arrows or Space/Shift up/down, "
                "Q/E roll, drag to look around, wheel for focal length, R to reset"
            ),
        )
        parser.add_argument("--width", type=_positive_int, default=defaults.width)
        parser.add_argument("--height", type=_positive_int, default=defaults.height)
        parser.add_argument(
            "--focal-length",
            type=_positive_float,
            default=defaults.focal_length,
            help="Initial focal length (default: 0.375 x width)",
        )
        parser.add_argument("--move-speed", type=_positive_float, default=defaults.move_speed)
        parser.add_argument("--roll-speed", type=_positive_float, default=defaults.roll_speed)
        parser.add_argument(
            "--mouse-sensitivity", type=_positive_float, default=defaults.mouse_sensitivity
        )
        parser.add_argument("--focal-step", type=_positive_float, default=defaults.focal_step)
        parser.add_argument(
            "--software",
            action="store_true",
            help="Draw with pygame instead of OpenGL",
        )
        parser.add_argument("--scene", choices=SCENES, default=defaults.scene)
        parser.add_argument(
            "--log-level",
            choices=LOG_LEVELS,
            default=defaults.log_level,
            type=str.upper,
        )
        parser.add_argument("--fps", type=_positive_int, default=defaults.fps)
        args = parser.parse_args(argv)
        return cls(
            width=args.width,
            height=args.height,
            focal_length=args.focal_length,
            move_speed=args.move_speed,
            roll_speed=args.roll_speed,
            mouse_sensitivity=args.mouse_sensitivity,
            focal_step=args.focal_step,
            software=args.software,
            scene=args.scene,
            log_level=args.log_level,
            fps=args.fps,
        )


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a number, got {text!r}") from exc
    if not value > 0.0 or value == float("inf"):
        raise argparse.ArgumentTypeError(f"expected a positive finite number, got {text}")
    return value
