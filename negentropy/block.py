"""Diagram blocks."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum

from .vectors import Vec2, Vec4
from .xmlserial import auto_deserialize, auto_serialize


class BlockType(Enum):
    """The kind of flowchart element a block represents."""

    START = "Start"
    PROCESS = "Process"
    DECISION = "Decision"
    END = "End"


@dataclass
class BlockData:
    """The persisted part of a block."""

    position: Vec2 = Vec2(0.0, 0.0)
    size: Vec2 = Vec2(120.0, 60.0)
    label: str = ""
    type: BlockType = BlockType.PROCESS
    color: Vec4 = Vec4(0.35, 0.47, 0.78, 1.0)


@dataclass
class Block:
    """A block on the diagram, with its transient dragging state."""

    data: BlockData = field(default_factory=BlockData)
    dragging: bool = False
    drag_offset: Vec2 = Vec2(0.0, 0.0)

    def rect(self) -> Vec4:
        """Position and size as ``(x, y, width, height)``."""
        return Vec4(self.data.position.x, self.data.position.y, self.data.size.x, self.data.size.y)

    def contains(self, point: Vec2) -> bool:
        """Whether ``point`` lies inside the half-open rectangle of the block."""
        pos, size = self.data.position, self.data.size
        return pos.x <= point.x < pos.x + size.x and pos.y <= point.y < pos.y + size.y

    def xml_serialize(self, node: ET.Element) -> None:
        auto_serialize(self.data, node)

    def xml_deserialize(self, node: ET.Element) -> None:
        auto_deserialize(self.data, node)