"""Status line describing the camera, shown in the window caption."""
from __future__ import annotations

from projection.display import Display

TITLE = "Wireplane"


def format_status(display: Display, polygon_count: int) -> str:
    center = display.center
    return (
        f"{TITLE} | pos ({center.x:.0f}, {center.y:.0f}, {center.z:.0f})"
        f" | roll {display.roll_angle:.0f} pitch {display.pitch_angle:.0f}"
        f" yaw {display.yaw_angle:.0f}"
        f" | f {display.focal_length:.0f}"
        f" | polygons {polygon_count}"
    )
