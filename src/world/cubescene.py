"""Scene that owns the cube, the camera and the drag/key controller.

Each input event is applied by the controller and, when it asks for it,
followed immediately by a full redraw. There is no frame clock.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional

from config import (
    CAMERA_START,
    CUBE_CENTER,
    CUBE_SIZE,
    FOV,
    HEIGHT,
    HUD_COLOR,
    LOG_TIMINGS,
    SHOW_HUD,
    VIEWDISTANCE,
    WIDTH,
)

from core.drawable import DrawingSink, draw_wireframe
from core.input import InputEvent
from core.point3 import Point3
from core.scene import Scene
from core.wireframe import RenderResult, WireframeCube

from camera import Camera, CubeController

logger = logging.getLogger(__name__)


class CubeScene(Scene):
    def __init__(
        self,
        sink: DrawingSink,
        text=None,
        *,
        cube: Optional[WireframeCube] = None,
        camera: Optional[Camera] = None,
        width: int = WIDTH,
        height: int = HEIGHT,
        fov: float = FOV,
        view_distance: float = VIEWDISTANCE,
        show_hud: bool = SHOW_HUD,
    ) -> None:
        super().__init__(camera=camera or Camera(position=CAMERA_START))
        self.sink = sink
        self.text = text
        self.cube = cube or WireframeCube(Point3(*CUBE_CENTER), CUBE_SIZE)
        self.controller = CubeController(self.cube, self.camera)
        self.width = width
        self.height = height
        self.fov = fov
        self.view_distance = view_distance
        self.show_hud = show_hud
        self.last_result: Optional[RenderResult] = None

    def handle_event(self, event: InputEvent) -> bool:
        return self.controller.handle(event)

    def project(self) -> RenderResult:
        return self.cube.render(
            self.width, self.height, self.fov, self.view_distance, self.camera.position
        )

    def hud_lines(self) -> List[str]:
        cam = self.camera.position
        c = self.cube.center()
        lines = [
            f"camera  x {cam.x:+.0f}  y {cam.y:+.0f}  z {cam.z:+.0f}",
            f"cube    x {c.x:+.2f}  y {c.y:+.2f}  z {c.z:+.2f}",
        ]
        if self.controller.is_dragging:
            lines.append("dragging")
        return lines

    def render(self) -> RenderResult:
        start = time.perf_counter()
        result = self.project()
        if not result.is_finite():
            logger.warning(
                "Projection produced non-finite points (camera at %s)",
                tuple(self.camera.position),
            )
        draw_wireframe(self.sink, result, self.width, self.height)

        if self.show_hud and self.text is not None:
            self.text.begin()
            y = 8
            for i, line in enumerate(self.hud_lines()):
                _, h = self.text.draw_text(line, 8, y, HUD_COLOR, key=f"hud{i}")
                y += h + 2
            self.text.end()

        self.last_result = result
        if LOG_TIMINGS:
            logger.debug("Redraw took %.6f seconds", time.perf_counter() - start)
        return result
