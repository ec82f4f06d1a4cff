import logging

from pygame.math import Vector3

from core.point3 import Point3

logger = logging.getLogger(__name__)


class Camera:
    """Translate-only camera; the projection never rotates the view."""

    def __init__(self, position=None):
        # keep external API types the same as the rest of pygame (Vector3)
        self.position = Vector3(position) if position is not None else Vector3(0, 0, -10)

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def z(self) -> float:
        return self.position.z

    def move(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Vector3:
        self.position += Vector3(dx, dy, dz)
        logger.debug("Camera moved to (%.1f, %.1f, %.1f)", *self.position)
        return self.position

    def snapshot(self) -> Point3:
        """Immutable copy of the current position."""
        return Point3(self.position.x, self.position.y, self.position.z)
