"""CubeController: turns drag gestures and key presses into scene changes.

Horizontal drag spins the cube about Y, vertical drag about X (sign flipped
so dragging up tips the top away). Arrow keys and W/S translate the camera
one step along an axis; they never rotate the cube.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from config import CAMERA_STEP, DRAG_SENSITIVITY
from core.input import DragEnd, DragMove, DragStart, InputEvent, KeyPress

logger = logging.getLogger(__name__)

# key -> (dx, dy, dz) in camera steps
KEY_MOVES: Dict[str, Tuple[int, int, int]] = {
    "up": (0, -1, 0),
    "down": (0, 1, 0),
    "left": (-1, 0, 0),
    "right": (1, 0, 0),
    "w": (0, 0, 1),
    "s": (0, 0, -1),
}


class CubeController:
    def __init__(
        self,
        cube,
        camera,
        *,
        sensitivity: float = DRAG_SENSITIVITY,
        step: float = CAMERA_STEP,
    ):
        self.cube = cube
        self.camera = camera
        self.sensitivity = float(sensitivity)
        self.step = float(step)
        self.is_dragging = False
        self.previous_x = 0.0
        self.previous_y = 0.0

    def on_drag_start(self, x: float, y: float) -> bool:
        self.is_dragging = True
        self.previous_x = x
        self.previous_y = y
        return False

    def on_drag_move(self, x: float, y: float) -> bool:
        if not self.is_dragging:
            return False
        dx = x - self.previous_x
        dy = y - self.previous_y
        self.previous_x = x
        self.previous_y = y
        self.cube.rotate_around_y(dx * self.sensitivity)
        self.cube.rotate_around_x(-dy * self.sensitivity)
        logger.debug("Drag delta (%s, %s) rotated cube", dx, dy)
        return True

    def on_drag_end(self) -> bool:
        self.is_dragging = False
        return False

    def on_key(self, key: str) -> bool:
        move = KEY_MOVES.get(key)
        if move is not None:
            dx, dy, dz = move
            self.camera.move(dx * self.step, dy * self.step, dz * self.step)
        # every key press redraws, mapped or not
        return True

    def handle(self, event: InputEvent) -> bool:
        """Apply ``event``; return True when the scene needs a redraw."""
        if isinstance(event, DragStart):
            return self.on_drag_start(event.x, event.y)
        if isinstance(event, DragMove):
            return self.on_drag_move(event.x, event.y)
        if isinstance(event, DragEnd):
            return self.on_drag_end()
        if isinstance(event, KeyPress):
            return self.on_key(event.key)
        return False
