"""Entry point for the Wireplane wireframe viewer."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import pygame

from config import ViewerConfig
from projection.engine import RenderingEngine
from projection.polygons import Polygon3D
from projection.primitives import make_cube, make_demo_panels
from projection.vector import Vector3
from rendering.opengl_context import GLLineSurface, initialize_gl, resize_viewport
from rendering.pygame_surface import PygameLineSurface
from ui.controls import CameraControls
from ui.hud import format_status

logger = logging.getLogger(__name__)


def build_scene(name: str, width: float) -> List[Polygon3D]:
    if name == "panels":
        return make_demo_panels()
    # Sized so the default 800x800 window shows the cube at the center.
    size = width / 8.0
    return make_cube(Vector3(size * 3.0, 0.0, 0.0), Vector3(size, size, size))


def _open_window(config: ViewerConfig, size: Tuple[int, int]) -> pygame.Surface:
    flags = pygame.RESIZABLE
    if not config.software:
        flags |= pygame.OPENGL | pygame.DOUBLEBUF
    return pygame.display.set_mode(size, flags)


def run(argv: Optional[Sequence[str]] = None) -> None:
    config = ViewerConfig.from_args(argv)
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    window = _open_window(config, (config.width, config.height))
    if config.software:
        surface = PygameLineSurface(window)
    else:
        initialize_gl((config.width, config.height))
        surface = GLLineSurface()

    engine = RenderingEngine(
        surface, config.width, config.height, focal_length=config.focal_length
    )
    controls = CameraControls(
        engine,
        move_speed=config.move_speed,
        roll_speed=config.roll_speed,
        mouse_sensitivity=config.mouse_sensitivity,
        focal_step=config.focal_step,
    )
    engine.render_scene()
    for polygon in build_scene(config.scene, config.width):
        engine.add_polygon(polygon)
    logger.info("Loaded %s scene with %d polygons", config.scene, len(engine.polygons))

    clock = pygame.time.Clock()
    running = True
    dirty = True
    while running:
        dt = clock.tick(config.fps) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                window = _open_window(config, event.size)
                if config.software:
                    surface.retarget(window)
                else:
                    resize_viewport(event.size)
                engine.resize(event.size[0], event.size[1])
                dirty = True
            elif controls.handle_event(event):
                dirty = True

        if controls.apply_held_keys(pygame.key.get_pressed(), dt):
            dirty = True

        if dirty:
            pygame.display.set_caption(format_status(engine.display, len(engine.polygons)))
            pygame.display.flip()
            dirty = False

    pygame.quit()


if __name__ == "__main__":
    run()
