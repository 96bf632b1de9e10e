import pygame
import pytest

from negentropy.block import Block, BlockData
from negentropy.camera import Camera, CameraData
from negentropy.renderer import Renderer, block_color, grid_lines
from negentropy.vectors import Vec2, Vec4


def test_grid_lines_default_camera():
    lines = grid_lines(Camera(), 100, 100)
    assert lines == [
        ((0, 0), (0, 100)),
        ((50, 0), (50, 100)),
        ((0, 0), (100, 0)),
        ((0, 50), (100, 50)),
    ]


def test_grid_lines_spacing_follows_zoom():
    camera = Camera(CameraData(position=Vec2(13.0, 27.0), zoom=2.0))
    lines = grid_lines(camera, 400, 300)
    vertical = [start[0] for start, end in lines if start[0] == end[0] and start[1] == 0]
    gaps = {b - a for a, b in zip(vertical, vertical[1:])}
    assert gaps == {100}
    assert vertical[0] <= 0
    assert vertical[-1] < 400


def test_grid_lines_cover_view():
    camera = Camera(CameraData(position=Vec2(-37.0, 81.0), zoom=0.75))
    lines = grid_lines(camera, 320, 240)
    for (x1, y1), (x2, y2) in lines:
        assert (x1 == x2 and (y1, y2) == (0, 240)) or (y1 == y2 and (x1, x2) == (0, 320))
        assert x1 < 320 and y1 < 240


def test_grid_lines_reject_tiny_zoom():
    with pytest.raises(ValueError):
        grid_lines(Camera(CameraData(zoom=0.001)), 100, 100)


def test_block_color_extremes_and_clamping():
    assert block_color(Vec4(1.0, 0.0, 1.0, 1.0)) == (255, 0, 255, 255)
    assert block_color(Vec4(2.0, -1.0, 0.0, 1.0)) == (255, 0, 0, 255)


def test_clear_fills_background():
    surface = pygame.Surface((20, 20))
    Renderer(surface).clear()
    assert tuple(surface.get_at((5, 5))) == (30, 30, 30, 255)


def test_draw_grid_draws_grid_color():
    surface = pygame.Surface((100, 100))
    renderer = Renderer(surface)
    renderer.clear()
    renderer.draw_grid(Camera())
    assert tuple(surface.get_at((0, 10))) == (50, 50, 50, 255)
    assert tuple(surface.get_at((10, 10))) == (30, 30, 30, 255)


def test_draw_opaque_block_with_outline():
    surface = pygame.Surface((100, 100))
    renderer = Renderer(surface)
    renderer.clear()
    block = Block(BlockData(position=Vec2(10.0, 10.0), size=Vec2(20.0, 20.0), color=Vec4(1.0, 0.0, 0.0, 1.0)))
    renderer.draw_blocks([block], Camera())
    assert tuple(surface.get_at((15, 15))) == (255, 0, 0, 255)
    assert tuple(surface.get_at((10, 10))) == (255, 255, 255, 255)
    assert tuple(surface.get_at((50, 50))) == (30, 30, 30, 255)


def test_draw_translucent_block_blends():
    surface = pygame.Surface((100, 100))
    renderer = Renderer(surface)
    renderer.clear()
    block = Block(BlockData(position=Vec2(10.0, 10.0), size=Vec2(20.0, 20.0), color=Vec4(0.0, 0.0, 1.0, 0.5)))
    renderer.draw_blocks([block], Camera())
    red, green, blue, _ = surface.get_at((15, 15))
    assert 30 < blue < 255
    assert red < 30 and green < 30


def test_draw_blocks_uses_camera():
    surface = pygame.Surface((100, 100))
    renderer = Renderer(surface)
    renderer.clear()
    camera = Camera(CameraData(position=Vec2(100.0, 100.0), zoom=1.0))
    block = Block(BlockData(position=Vec2(110.0, 110.0), size=Vec2(20.0, 20.0), color=Vec4(0.0, 1.0, 0.0, 1.0)))
    renderer.draw_blocks([block], camera)
    assert tuple(surface.get_at((15, 15))) == (0, 255, 0, 255)