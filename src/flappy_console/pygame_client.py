"""
pygame_client.py

Opens a character-cell window with pygame, feeds keyboard input and frame
timing into a Simulation, and draws the resulting cells every frame.
"""

import logging
from typing import Dict, Optional, Tuple

import pygame

from .console import CellBuffer, Color
from .constants import CELL_SIZE, RENDER_FPS, WINDOW_TITLE
from .data_models import Key
from .simulation import Simulation

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[int, Key] = {
    pygame.K_SPACE: Key.FLAP,
    pygame.K_p: Key.PLAY,
    pygame.K_q: Key.QUIT,
}


class ConsoleInitError(RuntimeError):
    """The pygame window or its font could not be created."""


def map_key(pygame_key: int) -> Optional[Key]:
    return KEY_BINDINGS.get(pygame_key)


class PygameConsole(CellBuffer):
    """A CellBuffer that knows how to draw itself onto a pygame surface."""

    def __init__(self, width: int, height: int, cell_size: int = CELL_SIZE):
        super().__init__(width, height)
        self.cell_size = cell_size
        self.screen: Optional[pygame.Surface] = None
        self.font: Optional[pygame.font.Font] = None
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    def open(self, title: str = WINDOW_TITLE):
        try:
            pygame.init()
            self.screen = pygame.display.set_mode(
                (self.width * self.cell_size, self.height * self.cell_size))
            pygame.display.set_caption(title)
            self.font = pygame.font.Font(None, int(self.cell_size * 1.4))
        except pygame.error as e:
            pygame.quit()
            raise ConsoleInitError(f"Could not open game window: {e}") from e
        logger.info("Opened %dx%d cell window", self.width, self.height)

    def close(self):
        pygame.quit()

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        surf = self._glyph_cache.get((glyph, fg))
        if surf is None:
            surf = self.font.render(glyph, True, fg)
            self._glyph_cache[(glyph, fg)] = surf
        return surf

    def present(self):
        """Paints every cell's background and glyph, then flips the display."""
        size = self.cell_size
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                rect = (x * size, y * size, size, size)
                self.screen.fill(cell.bg, rect)
                if cell.glyph != " ":
                    glyph = self._glyph(cell.glyph, cell.fg)
                    self.screen.blit(glyph, (
                        x * size + (size - glyph.get_width()) // 2,
                        y * size + (size - glyph.get_height()) // 2))
        pygame.display.flip()


class FlappyClient:
    def __init__(self, simulation: Simulation, cell_size: int = CELL_SIZE,
                 fps: int = RENDER_FPS):
        self.simulation = simulation
        self.fps = fps
        self.console = PygameConsole(
            simulation.config.screen_width, simulation.config.screen_height, cell_size)
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop. Raises ConsoleInitError if the window fails to open."""
        self.console.open()

        running = True
        try:
            while running and not self.console.quitting:
                frame_time_ms = float(self.clock.tick(self.fps))

                # Only the last bound key pressed this frame is kept
                key = None
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        key = map_key(event.key) or key

                self.simulation.tick(self.console, frame_time_ms, key)
                self.console.present()
        finally:
            self.console.close()
        logger.info("Client stopped. Final score: %d", self.simulation.score)
