from dataclasses import dataclass
from typing import Optional

from core.input import InputEvent


@dataclass
class Scene:
    # Camera is optional so non-3D scenes don't need one
    camera: Optional[object] = None

    # Return True when the event changed something worth redrawing
    def handle_event(self, event: InputEvent) -> bool:
        return False

    # Scenes own their full render pipeline
    def render(self) -> None:  # pragma: no cover - visual
        pass
