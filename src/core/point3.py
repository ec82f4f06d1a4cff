"""Immutable 3D point used by the wireframe pipeline.

Every transform returns a new Point3; nothing here mutates in place. Angles
are given in degrees and converted to radians per call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Protocol

import numpy as np


class HasXYZ(Protocol):
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Point3:
    x: float
    y: float
    z: float

    # ------------------------------------------------------------------
    def rotate_around_x(self, angle_degrees: float) -> "Point3":
        rad = math.radians(angle_degrees)
        cos = math.cos(rad)
        sin = math.sin(rad)
        y = self.y * cos - self.z * sin
        z = self.y * sin + self.z * cos
        return Point3(self.x, y, z)

    def rotate_around_y(self, angle_degrees: float) -> "Point3":
        rad = math.radians(angle_degrees)
        cos = math.cos(rad)
        sin = math.sin(rad)
        x = self.x * cos + self.z * sin
        z = self.z * cos - self.x * sin
        return Point3(x, self.y, z)

    def rotate_around_z(self, angle_degrees: float) -> "Point3":
        rad = math.radians(angle_degrees)
        cos = math.cos(rad)
        sin = math.sin(rad)
        x = self.x * cos - self.y * sin
        y = self.x * sin + self.y * cos
        return Point3(x, y, self.z)

    # ------------------------------------------------------------------
    def project(
        self,
        view_width: float,
        view_height: float,
        field_of_view: float,
        view_distance: float,
        camera: HasXYZ,
    ) -> "Point3":
        """Project from world space to screen space.

        The returned point carries screen x/y and the camera-space depth in
        ``z`` (post-translation, pre-projection). When ``view_distance + z``
        is zero the division follows IEEE rules, so the result holds inf/nan
        instead of raising.
        """
        x = self.x - camera.x
        y = self.y - camera.y
        z = self.z - camera.z

        with np.errstate(divide="ignore", invalid="ignore"):
            factor = np.float64(field_of_view) / np.float64(view_distance + z)
            px = np.float64(x) * factor + view_width / 2
            py = -np.float64(y) * factor + view_height / 2
        return Point3(float(px), float(py), z)

    # ------------------------------------------------------------------
    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def as_array(self) -> np.ndarray:
        return np.array((self.x, self.y, self.z), dtype=np.float64)

    def __sub__(self, other: HasXYZ) -> "Point3":
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
