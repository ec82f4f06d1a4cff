from .camera import Camera
from .cameracontroller import CubeController

__all__ = [
    "Camera",
    "CubeController",
]
