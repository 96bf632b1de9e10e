"""Drawing the grid and the blocks onto a pygame surface."""

from __future__ import annotations

import math
from typing import Iterable

import pygame

from .block import Block
from .camera import Camera
from .vectors import Vec4

GRID_STEP = 50
BACKGROUND = (30, 30, 30, 255)
GRID_COLOR = (50, 50, 50, 255)
OUTLINE_COLOR = (255, 255, 255, 255)

Line = tuple[tuple[int, int], tuple[int, int]]


def _c_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return int(math.fmod(a, b))


def grid_lines(camera: Camera, width: int, height: int) -> list[Line]:
    """Vertical then horizontal grid lines covering a ``width`` x ``height`` view."""
    zoom = camera.data.zoom
    scaled_step = GRID_STEP * zoom
    step = int(scaled_step)
    if step <= 0:
        raise ValueError(f"zoom {zoom} is too small to draw the grid")
    offset_x = -_c_mod(int(camera.data.position.x * zoom), step)
    offset_y = -_c_mod(int(camera.data.position.y * zoom), step)

    lines: list[Line] = []
    x = float(offset_x)
    while x < width:
        lines.append(((int(x), 0), (int(x), height)))
        x += scaled_step
    y = float(offset_y)
    while y < height:
        lines.append(((0, int(y)), (width, int(y))))
        y += scaled_step
    return lines


def block_color(color: Vec4) -> tuple[int, int, int, int]:
    """An RGBA float colour in [0, 1] as 8-bit channels."""
    return tuple(min(255, max(0, int(channel * 255.0))) for channel in color)  # type: ignore[return-value]


class Renderer:
    """Draws a diagram onto ``surface``."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def clear(self) -> None:
        self.surface.fill(BACKGROUND)

    def draw_grid(self, camera: Camera) -> None:
        width, height = self.surface.get_size()
        for start, end in grid_lines(camera, width, height):
            pygame.draw.line(self.surface, GRID_COLOR, start, end)

    def draw_blocks(self, blocks: Iterable[Block], camera: Camera) -> None:
        zoom = camera.data.zoom
        for block in blocks:
            screen = camera.world_to_screen(block.data.position)
            rect = pygame.Rect(
                int(screen.x),
                int(screen.y),
                max(0, int(block.data.size.x * zoom)),
                max(0, int(block.data.size.y * zoom)),
            )
            if rect.width == 0 or rect.height == 0:
                continue
            fill = block_color(block.data.color)
            if fill[3] == 255:
                pygame.draw.rect(self.surface, fill, rect)
            else:
                overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
                overlay.fill(fill)
                self.surface.blit(overlay, rect.topleft)
            pygame.draw.rect(self.surface, OUTLINE_COLOR, rect, 1)

    def present(self) -> None:
        """Show the frame if the surface is the display surface."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()