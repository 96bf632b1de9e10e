"""The view onto the diagram."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .vectors import Vec2
from .xmlserial import auto_deserialize, auto_serialize


@dataclass
class CameraData:
    """The persisted part of a camera."""

    position: Vec2 = Vec2(0.0, 0.0)
    zoom: float = 1.0


@dataclass
class Camera:
    """Maps between screen and world coordinates, with panning state."""

    data: CameraData = field(default_factory=CameraData)
    panning: bool = False
    pan_start: Vec2 = Vec2(0.0, 0.0)
    mouse_start: Vec2 = Vec2(0.0, 0.0)

    def screen_to_world(self, screen_pos: Vec2) -> Vec2:
        return screen_pos / self.data.zoom + self.data.position

    def world_to_screen(self, world_pos: Vec2) -> Vec2:
        return (world_pos - self.data.position) * self.data.zoom

    def zoom_at(self, screen_pos: Vec2, factor: float) -> None:
        """Scale the zoom while keeping the world point under ``screen_pos`` fixed."""
        before = self.screen_to_world(screen_pos)
        self.data.zoom *= factor
        after = self.screen_to_world(screen_pos)
        self.data.position = self.data.position + (before - after)

    def xml_serialize(self, node: ET.Element) -> None:
        auto_serialize(self.data, node)

    def xml_deserialize(self, node: ET.Element) -> None:
        auto_deserialize(self.data, node)