"""Mouse interaction with the diagram: panning, zooming and dragging blocks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from .block import Block
from .camera import Camera
from .vectors import Vec2

ZOOM_IN_FACTOR = 1.1
ZOOM_OUT_FACTOR = 0.9


class MouseButton(IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


@dataclass(frozen=True)
class MouseButtonDown:
    button: int
    x: float
    y: float


@dataclass(frozen=True)
class MouseButtonUp:
    button: int
    x: float
    y: float


@dataclass(frozen=True)
class MouseMotion:
    x: float
    y: float


@dataclass(frozen=True)
class MouseWheel:
    """A wheel turn; ``y`` is the scroll amount, ``mouse_x``/``mouse_y`` the pointer."""

    y: float
    mouse_x: float
    mouse_y: float


Event = Union[MouseButtonDown, MouseButtonUp, MouseMotion, MouseWheel]


def handle_event(event: object, camera: Camera, blocks: list[Block]) -> None:
    """Apply ``event`` to ``camera`` and ``blocks``; other events are ignored."""
    if isinstance(event, MouseButtonDown):
        _button_down(event, camera, blocks)
    elif isinstance(event, MouseButtonUp):
        _button_up(event, camera, blocks)
    elif isinstance(event, MouseMotion):
        _motion(event, camera, blocks)
    elif isinstance(event, MouseWheel):
        factor = ZOOM_IN_FACTOR if event.y > 0 else ZOOM_OUT_FACTOR
        camera.zoom_at(Vec2(float(event.mouse_x), float(event.mouse_y)), factor)


def _button_down(event: MouseButtonDown, camera: Camera, blocks: list[Block]) -> None:
    screen = Vec2(float(event.x), float(event.y))
    if event.button == MouseButton.MIDDLE:
        camera.panning = True
        camera.pan_start = camera.data.position
        camera.mouse_start = screen
    if event.button == MouseButton.LEFT:
        world = camera.screen_to_world(screen)
        hit = next(
            (i for i in reversed(range(len(blocks))) if blocks[i].contains(world)),
            None,
        )
        if hit is not None:
            block = blocks[hit]
            block.dragging = True
            block.drag_offset = world - block.data.position
            blocks.append(blocks.pop(hit))


def _button_up(event: MouseButtonUp, camera: Camera, blocks: list[Block]) -> None:
    if event.button == MouseButton.MIDDLE:
        camera.panning = False
    if event.button == MouseButton.LEFT:
        for block in blocks:
            block.dragging = False


def _motion(event: MouseMotion, camera: Camera, blocks: list[Block]) -> None:
    current = Vec2(float(event.x), float(event.y))
    if camera.panning:
        delta = current - camera.mouse_start
        camera.data.position = camera.pan_start - delta / camera.data.zoom
    world = camera.screen_to_world(current)
    for block in blocks:
        if block.dragging:
            block.data.position = world - block.drag_offset