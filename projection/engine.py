"""Host-facing rendering engine: owns the camera, the scene and the redraw cycle."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from rendering.presenter import WireframePresenter
from rendering.surface import DrawingSurface

from .display import (
    Display,
    require_finite,
    validate_focal_length,
    validate_viewport,
    wrap_degrees,
)
from .polygons import Polygon2D, Polygon3D, Scene
from .projector import project_polygons
from .vector import Vector3

logger = logging.getLogger(__name__)


class RenderingEngine:
    """Re-projects and redraws the whole scene after every mutation.

    Mutators validate their input before touching any state, so a rejected call
    leaves the camera, the scene and the last drawn frame as they were.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        width: float,
        height: float,
        *,
        focal_length: Optional[float] = None,
        presenter: Optional[WireframePresenter] = None,
    ) -> None:
        display = Display.for_viewport(width, height)
        if focal_length is not None:
            display.focal_length = validate_focal_length(focal_length)
        self._surface = surface
        self._presenter = presenter or WireframePresenter()
        self._display = display
        self._scene = Scene()
        self._projected: List[Polygon2D] = []
        logger.info(
            "Rendering engine ready: viewport %sx%s, focal length %s",
            width,
            height,
            display.focal_length,
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def display(self) -> Display:
        """A copy of the current camera state."""

        return replace(self._display)

    @property
    def polygons(self) -> Tuple[Polygon3D, ...]:
        return self._scene.polygons

    @property
    def projected(self) -> Tuple[Polygon2D, ...]:
        """Image-plane polygons from the most recent redraw."""

        return tuple(self._projected)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def add_polygon(self, polygon: Polygon3D) -> None:
        self._scene.add(polygon)
        self.render_scene()

    def move_camera(self, delta: Vector3) -> None:
        """Move the camera by ``delta`` expressed in its own local axes."""

        if not delta.is_finite():
            raise ValueError(f"Camera movement must be finite, got {delta!r}")
        center = self._display.center + self._display.camera_to_world(delta)
        if not center.is_finite():
            raise ValueError(f"Camera movement would leave finite space: {center!r}")
        self._display.center = center
        self.render_scene()

    def change_camera_angles(self, delta_roll: float, delta_pitch: float, delta_yaw: float) -> None:
        require_finite("angle deltas", delta_roll, delta_pitch, delta_yaw)
        display = self._display
        display.roll_angle = wrap_degrees(display.roll_angle + delta_roll)
        display.pitch_angle = wrap_degrees(display.pitch_angle + delta_pitch)
        display.yaw_angle = wrap_degrees(display.yaw_angle + delta_yaw)
        self.render_scene()

    def set_camera_angles(self, roll: float, pitch: float, yaw: float) -> None:
        self._display.set_angles(roll, pitch, yaw)
        self.render_scene()

    def change_focal_length(self, delta: float) -> None:
        """Adjust the focal length; results that are not strictly positive are rejected."""

        require_finite("focal length delta", delta)
        self._display.focal_length = validate_focal_length(self._display.focal_length + delta)
        self.render_scene()

    def set_focal_length(self, value: float) -> None:
        self._display.focal_length = validate_focal_length(value)
        self.render_scene()

    def resize(self, width: float, height: float) -> None:
        validate_viewport(width, height)
        self._display.width = width
        self._display.height = height
        self.render_scene()

    # ------------------------------------------------------------------
    # Redraw cycle
    # ------------------------------------------------------------------
    def render_scene(self) -> None:
        self._projected = project_polygons(self._display, self._scene.polygons)
        logger.debug("Projected %d polygons", len(self._projected))
        self._presenter.draw(self._surface, self._display, self._projected)
