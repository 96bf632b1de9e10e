"""The diagram document: its blocks and camera, loaded from and saved to XML."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET

from .block import Block
from .camera import Camera

log = logging.getLogger(__name__)


class DiagramLoadError(Exception):
    """A diagram file could not be read or parsed."""


def _first_child(parent: ET.Element, tag: str) -> ET.Element | None:
    return next((node for node in parent if node.tag == tag), None)


class DiagramData:
    """The blocks and camera of one diagram."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.blocks: list[Block] = []
        self.camera = Camera()
        if path is not None:
            try:
                self.load(path)
            except DiagramLoadError as exc:
                log.error("%s", exc)

    def load(self, file_path: str | os.PathLike[str]) -> None:
        """Replace the blocks, and update the camera, from the file at ``file_path``.

        Raises DiagramLoadError if the file cannot be read or parsed; the
        current contents are then left untouched.
        """
        try:
            root = ET.parse(file_path).getroot()
        except (OSError, ET.ParseError) as exc:
            raise DiagramLoadError(f"Error loading file {os.fspath(file_path)!r}: {exc}") from exc

        self.blocks.clear()
        if root.tag != "diagram":
            return

        camera_node = _first_child(root, "camera")
        if camera_node is not None:
            self.camera.xml_deserialize(camera_node)

        blocks_node = _first_child(root, "blocks")
        if blocks_node is None:
            return
        for block_node in blocks_node:
            if block_node.tag != "block":
                continue
            block = Block()
            block.xml_deserialize(block_node)
            self.blocks.append(block)

    def save(self, file_path: str | os.PathLike[str]) -> None:
        """Write the camera and blocks to ``file_path`` as XML."""
        diagram = ET.Element("diagram")
        self.camera.xml_serialize(ET.SubElement(diagram, "camera"))
        blocks_node = ET.SubElement(diagram, "blocks")
        for block in self.blocks:
            block.xml_serialize(ET.SubElement(blocks_node, "block"))

        tree = ET.ElementTree(diagram)
        ET.indent(tree, space="\t")
        tree.write(file_path, encoding="utf-8", xml_declaration=True)