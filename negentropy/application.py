"""The diagram editor window: event loop, toolbar and workspace file handling."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

import pygame

from .block import Block
from .diagram_data import DiagramData, DiagramLoadError
from .event_handler import (
    MouseButton,
    MouseButtonDown,
    MouseButtonUp,
    MouseMotion,
    MouseWheel,
    handle_event,
)
from .paths import workspace_path
from .renderer import Renderer
from .vectors import Vec2

log = logging.getLogger(__name__)

TITLE = "Negentropy - Diagram Editor"
WINDOW_SIZE = (1280, 720)
DEFAULT_FILE = "Default.xml"
TOOLBAR_HEIGHT = 24
FRAME_RATE = 60

_TOOLBAR_BG = (45, 45, 48)
_BUTTON_BG = (70, 70, 75)
_TEXT_COLOR = (230, 230, 230)


@dataclass(frozen=True)
class _Button:
    label: str
    rect: pygame.Rect
    action: Callable[[], None]


class Application:
    """Holds one diagram and the list of diagram files in a workspace directory."""

    def __init__(self, workspace: str | os.PathLike[str] | None = None) -> None:
        self.workspace = Path(workspace) if workspace is not None else workspace_path()
        self.diagram = DiagramData(self.workspace / DEFAULT_FILE)
        self.workspace_files: list[str] = []
        self.show_properties = True
        self.running = False
        self.refresh_workspace_files()

    @property
    def blocks(self) -> list[Block]:
        return self.diagram.blocks

    def refresh_workspace_files(self) -> None:
        """Rescan the workspace for ``.xml`` files; raises OSError if it is unreadable."""
        self.workspace_files = sorted(
            entry.name
            for entry in self.workspace.iterdir()
            if entry.is_file() and entry.suffix == ".xml"
        )

    def add_block(self) -> Block:
        """Append a new block placed to the right of the existing ones."""
        block = Block()
        self.blocks.append(block)
        count = len(self.blocks)
        block.data.position = Vec2(100.0 + count * 150.0, 100.0)
        block.data.label = f"Block {count}"
        return block

    def delete_block(self, index: int) -> None:
        """Remove the block at ``index``; raises IndexError if there is none."""
        del self.blocks[index]

    def load(self, file_name: str) -> None:
        """Load ``file_name`` from the workspace; raises DiagramLoadError on failure."""
        self.diagram.load(self.workspace / file_name)

    def save(self) -> Path:
        """Write the diagram to the workspace's default file and return its path."""
        path = self.workspace / DEFAULT_FILE
        self.diagram.save(path)
        return path

    def run(self) -> None:
        """Open the window and run the event loop until the user quits."""
        log.info("Initializing pygame...")
        pygame.init()
        try:
            screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
            pygame.display.set_caption(TITLE)
            renderer = Renderer(screen)
            font = pygame.font.Font(None, 20)
            clock = pygame.time.Clock()
            log.info("Application initialized successfully")

            self.running = True
            while self.running:
                buttons = self._toolbar(font)
                for event in pygame.event.get():
                    self._process_event(event, buttons)
                    if not self.running:
                        break
                if not self.running:
                    break
                renderer.surface = pygame.display.get_surface()
                self._render_frame(renderer, font, buttons)
                clock.tick(FRAME_RATE)
        finally:
            log.info("Shutting down application...")
            pygame.quit()
            log.info("Application shutdown complete")

    def _stop(self) -> None:
        self.running = False

    def _toggle_properties(self) -> None:
        self.show_properties = not self.show_properties

    def _load_action(self, file_name: str) -> Callable[[], None]:
        def action() -> None:
            try:
                self.load(file_name)
            except DiagramLoadError as exc:
                log.error("%s", exc)

        return action

    def _toolbar(self, font: pygame.font.Font) -> list[_Button]:
        entries: list[tuple[str, Callable[[], None]]] = [
            ("Save", self.save),
            ("Add Block", self.add_block),
            ("Properties", self._toggle_properties),
        ]
        entries += [(f"Load {name}", self._load_action(name)) for name in self.workspace_files]
        entries.append(("Exit", self._stop))

        buttons = []
        x = 4
        for label, action in entries:
            width = font.size(label)[0] + 12
            buttons.append(_Button(label, pygame.Rect(x, 2, width, TOOLBAR_HEIGHT - 4), action))
            x += width + 4
        return buttons

    def _process_event(self, event: pygame.event.Event, buttons: Sequence[_Button]) -> None:
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_DELETE and self.blocks:
                # The block clicked last sits at the end of the list.
                self.delete_block(-1)
            return

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.pos[1] < TOOLBAR_HEIGHT:
                if event.button == MouseButton.LEFT:
                    hit = next((b for b in buttons if b.rect.collidepoint(event.pos)), None)
                    if hit is not None:
                        hit.action()
                return
            handle_event(MouseButtonDown(event.button, *event.pos), self.diagram.camera, self.blocks)
        elif event.type == pygame.MOUSEBUTTONUP:
            handle_event(MouseButtonUp(event.button, *event.pos), self.diagram.camera, self.blocks)
        elif event.type == pygame.MOUSEMOTION:
            handle_event(MouseMotion(*event.pos), self.diagram.camera, self.blocks)
        elif event.type == pygame.MOUSEWHEEL:
            mouse_x, mouse_y = pygame.mouse.get_pos()
            if mouse_y < TOOLBAR_HEIGHT:
                return
            handle_event(MouseWheel(event.y, mouse_x, mouse_y), self.diagram.camera, self.blocks)

    def _render_frame(
        self, renderer: Renderer, font: pygame.font.Font, buttons: Sequence[_Button]
    ) -> None:
        camera = self.diagram.camera
        renderer.clear()
        try:
            renderer.draw_grid(camera)
        except ValueError:
            pass  # zoomed out too far for a visible grid
        renderer.draw_blocks(self.blocks, camera)
        self._draw_labels(renderer.surface, font)
        self._draw_ui(renderer.surface, font, buttons)
        renderer.present()

    def _draw_labels(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        camera = self.diagram.camera
        for block in self.blocks:
            if not block.data.label:
                continue
            centre = camera.world_to_screen(block.data.position + block.data.size / 2.0)
            text = font.render(block.data.label, True, _TEXT_COLOR)
            surface.blit(text, text.get_rect(center=(int(centre.x), int(centre.y))))

    def _draw_ui(
        self, surface: pygame.Surface, font: pygame.font.Font, buttons: Sequence[_Button]
    ) -> None:
        pygame.draw.rect(surface, _TOOLBAR_BG, (0, 0, surface.get_width(), TOOLBAR_HEIGHT))
        for button in buttons:
            pygame.draw.rect(surface, _BUTTON_BG, button.rect)
            text = font.render(button.label, True, _TEXT_COLOR)
            surface.blit(text, text.get_rect(center=button.rect.center))

        if not self.show_properties:
            return
        position = self.diagram.camera.data.position
        lines = [
            f"Camera Position: ({position.x:.1f}, {position.y:.1f})",
            f"Blocks Count: {len(self.blocks)}",
        ]
        lines += [
            f"{i}: {block.data.label} [{block.data.type.value}]"
            for i, block in enumerate(self.blocks, start=1)
        ]
        y = TOOLBAR_HEIGHT + 6
        for line in lines:
            surface.blit(font.render(line, True, _TEXT_COLOR), (8, y))
            y += font.get_linesize()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the editor; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="negentropy", description=TITLE)
    parser.add_argument(
        "workspace",
        nargs="?",
        default=None,
        help="directory holding the diagram files (default: ./Workspace)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    try:
        Application(args.workspace).run()
        return 0
    except Exception as exc:  # noqa: BLE001 - top-level error report
        print(f"Error: {exc}", file=sys.stderr)
        return -1


if __name__ == "__main__":
    sys.exit(main())