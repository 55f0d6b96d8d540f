"""Perspective projection through three camera-aligned planes.

Each vertex is located in the camera frame by its signed distances to three
planes anchored at the camera center: one whose normal is the viewing
direction (depth) and two lateral ones. The lateral distances are then
perspective-divided by the depth.

Every plane normal is rotated by a different pair of camera angles:

* yz-plane normal ``(1, 0, 0)``: pitch around y, then yaw around z (depth)
* xz-plane normal ``(0, 1, 0)``: roll around x, then yaw around z
* xy-plane normal ``(0, 0, 1)``: roll around x, then pitch around y

Changing these pairs or their order changes the rendered image.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

from .display import Display
from .plane import PlaneCoefficients, plane_through, signed_distance
from .polygons import Polygon2D, Polygon3D
from .vector import Vector2, Vector3, rotate

logger = logging.getLogger(__name__)

YZ_NORMAL = Vector3(1.0, 0.0, 0.0)
XZ_NORMAL = Vector3(0.0, 1.0, 0.0)
XY_NORMAL = Vector3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class CameraPlanes:
    depth: PlaneCoefficients
    horizontal: PlaneCoefficients
    vertical: PlaneCoefficients


def camera_planes(display: Display) -> CameraPlanes:
    depth_normal = rotate(rotate(YZ_NORMAL, "y", display.pitch_angle), "z", display.yaw_angle)
    horizontal_normal = rotate(rotate(XZ_NORMAL, "x", display.roll_angle), "z", display.yaw_angle)
    vertical_normal = rotate(rotate(XY_NORMAL, "x", display.roll_angle), "y", display.pitch_angle)
    return CameraPlanes(
        depth=plane_through(depth_normal, display.center),
        horizontal=plane_through(horizontal_normal, display.center),
        vertical=plane_through(vertical_normal, display.center),
    )


def project_vertex(vertex: Vector3, planes: CameraPlanes, focal_length: float) -> Vector2:
    """Project one vertex onto the image plane.

    A vertex with zero depth cannot be perspective-divided. It is emitted as
    its raw lateral distances instead, which leaves a visible jump for points
    crossing the camera's lateral plane but keeps the output finite. The same
    fallback covers a quotient that overflows for a vanishingly small depth.
    """

    depth = signed_distance(vertex, planes.depth)
    lateral_x = signed_distance(vertex, planes.horizontal)
    lateral_y = signed_distance(vertex, planes.vertical)

    if depth != 0.0:
        screen_x = focal_length * lateral_x / depth
        screen_y = focal_length * lateral_y / depth
        if math.isfinite(screen_x) and math.isfinite(screen_y):
            return Vector2(screen_x, screen_y)

    logger.debug("Vertex %r has degenerate depth %r; emitting lateral distances", vertex, depth)
    return Vector2(lateral_x, lateral_y)


def project_polygon(polygon: Polygon3D, planes: CameraPlanes, focal_length: float) -> Polygon2D:
    return Polygon2D(
        tuple(project_vertex(vertex, planes, focal_length) for vertex in polygon.vertices)
    )


def project_polygons(display: Display, polygons: Sequence[Polygon3D]) -> List[Polygon2D]:
    """Project every polygon against the current camera, preserving order."""

    planes = camera_planes(display)
    return [project_polygon(polygon, planes, display.focal_length) for polygon in polygons]
