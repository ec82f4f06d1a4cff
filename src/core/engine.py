"""Window setup and the event-driven main loop.

Separates concerns:
- Engine: sets up the window and picks the drawing back end.
- Scene: owns the cube, camera and input handling.

Nothing redraws on a timer. The loop blocks until input arrives, hands each
event to the scene, and redraws synchronously whenever the scene asks.
"""

from __future__ import annotations

import logging

import pygame

from config import HEIGHT, RENDERER, VSYNC, WIDTH
from core.input import KeyPress, PygameInputSource, Quit
from world.cubescene import CubeScene

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self, renderer: str = RENDERER):
        pygame.init()
        pygame.display.set_caption("Wireframe Cube")
        self.renderer = renderer

        flags = pygame.DOUBLEBUF
        if renderer == "gl":
            flags |= pygame.OPENGL
        try:
            # vsync: 1 to enable, 0 to disable
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame builds reject the vsync kwarg, or vsync was
            # requested but is unavailable on this driver.
            logger.info("vsync unavailable; opening window without it")
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT), flags)

        if renderer == "gl":
            # Deferred so the software back end never needs libGL
            from render.gl_sink import GLSink
            from ui.text_renderer import TextRenderer

            sink = GLSink()
            text = TextRenderer(WIDTH, HEIGHT)
        else:
            from render.surface_sink import SurfaceSink
            from ui.surface_text import SurfaceTextRenderer

            sink = SurfaceSink(self.screen)
            text = SurfaceTextRenderer(self.screen)
        logger.info("Window %dx%d using %s back end", WIDTH, HEIGHT, renderer)

        self.scene = CubeScene(sink, text)
        self.input = PygameInputSource(WIDTH, HEIGHT)

    # ------------------------------------------------------------------
    def dispatch(self, events) -> bool:
        """Handle events in order, redrawing after each one that asks.

        Returns False once a quit request is seen.
        """
        for event in events:
            if isinstance(event, Quit):
                return False
            if isinstance(event, KeyPress) and event.key == "escape":
                return False
            if self.scene.handle_event(event):
                self.render()
        return True

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.scene.render()
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        self.render()
        running = True
        while running:
            running = self.dispatch(self.input.wait())
        pygame.quit()
        logger.info("Engine stopped")
