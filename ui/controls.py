"""Translate pygame input into camera changes on the rendering engine."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from projection.engine import RenderingEngine
from projection.vector import Vector3

logger = logging.getLogger(__name__)

Vec2 = Tuple[float, float]

FORWARD_KEYS = (pygame.K_w,)
BACKWARD_KEYS = (pygame.K_s,)
LEFT_KEYS = (pygame.K_a,)
RIGHT_KEYS = (pygame.K_d,)
UP_KEYS = (pygame.K_UP, pygame.K_SPACE)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_LSHIFT)
ROLL_LEFT_KEYS = (pygame.K_q,)
ROLL_RIGHT_KEYS = (pygame.K_e,)


def _axis(keys, negative, positive) -> float:
    value = 0.0
    if any(keys[key] for key in positive):
        value += 1.0
    if any(keys[key] for key in negative):
        value -= 1.0
    return value


@dataclass
class LookDragState:
    """Tracks the left-button drag used to look around."""

    dragging: bool = False
    last_screen: Vec2 = (0.0, 0.0)

    def begin(self, screen_pos: Vec2) -> None:
        self.dragging = True
        self.last_screen = screen_pos

    def finish(self) -> None:
        self.dragging = False


class CameraControls:
    """Keyboard, mouse and wheel bindings for first-person navigation."""

    def __init__(
        self,
        engine: RenderingEngine,
        *,
        move_speed: float = 240.0,
        roll_speed: float = 90.0,
        mouse_sensitivity: float = 0.25,
        focal_step: float = 10.0,
        initial_focal_length: Optional[float] = None,
    ) -> None:
        self.engine = engine
        self.move_speed = move_speed
        self.roll_speed = roll_speed
        self.mouse_sensitivity = mouse_sensitivity
        self.focal_step = focal_step
        self.initial_focal_length = (
            initial_focal_length
            if initial_focal_length is not None
            else engine.display.focal_length
        )
        self.drag = LookDragState()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply a single pygame event; returns ``True`` when it changed the camera."""

        if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self.reset()
            return True
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.drag.begin(event.pos)
            return False
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.drag.finish()
            return False
        if event.type == pygame.MOUSEMOTION and self.drag.dragging:
            dx = event.pos[0] - self.drag.last_screen[0]
            dy = event.pos[1] - self.drag.last_screen[1]
            self.drag.last_screen = event.pos
            if dx == 0 and dy == 0:
                return False
            self.engine.change_camera_angles(
                0.0,
                dy * self.mouse_sensitivity,
                dx * self.mouse_sensitivity,
            )
            return True
        if event.type == pygame.MOUSEWHEEL:
            return self.zoom(event.y)
        return False

    def zoom(self, notches: float) -> bool:
        try:
            self.engine.change_focal_length(notches * self.focal_step)
        except ValueError as exc:
            logger.warning("Ignoring focal length change: %s", exc)
            return False
        return True

    def apply_held_keys(self, keys, dt: float) -> bool:
        """Move and roll continuously while keys are held; ``keys`` is indexed by key code."""

        changed = False
        direction = [
            _axis(keys, BACKWARD_KEYS, FORWARD_KEYS),
            _axis(keys, LEFT_KEYS, RIGHT_KEYS),
            _axis(keys, DOWN_KEYS, UP_KEYS),
        ]
        magnitude = math.sqrt(sum(component * component for component in direction))
        if magnitude > 0.0 and dt > 0.0:
            step = self.move_speed * dt / magnitude
            self.engine.move_camera(
                Vector3(direction[0] * step, direction[1] * step, direction[2] * step)
            )
            changed = True

        roll = _axis(keys, ROLL_LEFT_KEYS, ROLL_RIGHT_KEYS)
        if roll != 0.0 and dt > 0.0:
            self.engine.change_camera_angles(roll * self.roll_speed * dt, 0.0, 0.0)
            changed = True
        return changed

    def reset(self) -> None:
        """Return to the origin, level orientation and the starting focal length."""

        self.engine.set_camera_angles(0.0, 0.0, 0.0)
        center = self.engine.display.center
        self.engine.move_camera(Vector3(-center.x, -center.y, -center.z))
        self.engine.set_focal_length(self.initial_focal_length)
        logger.info("Camera reset")
