"""
console.py: The glyph console the game draws on and reads keys from.

PygameConsole emulates a fixed-size character terminal in a pygame window.
The game only talks to the Console protocol, so tests can swap in a fake.
"""

import logging
from typing import Dict, Optional, Protocol, Tuple

import pygame

from .constants import BLACK, WHITE, CELL_SIZE, RENDER_FPS
from .data_models import Key

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

KEY_BINDINGS: Dict[int, Key] = {
    pygame.K_RETURN: Key.CONFIRM,
    pygame.K_q: Key.QUIT,
    pygame.K_SPACE: Key.FLAP,
}


class ConsoleInitError(RuntimeError):
    """Raised when the window or font cannot be created."""


class Console(Protocol):
    """What the game needs from its presentation and input layer."""

    @property
    def key(self) -> Optional[Key]: ...

    @property
    def frame_time_ms(self) -> float: ...

    @property
    def quitting(self) -> bool: ...

    def cls(self): ...

    def cls_bg(self, color: Color): ...

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str): ...

    def print(self, x: int, y: int, text: str): ...

    def print_centered(self, y: int, text: str): ...

    def request_quit(self): ...

    def poll(self): ...

    def present(self): ...

    def close(self): ...


class PygameConsole:
    """A width x height grid of character cells rendered with pygame."""

    def __init__(self, width: int, height: int, title: str,
                 cell_size: int = CELL_SIZE, fps: int = RENDER_FPS):
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.fps = fps

        try:
            pygame.init()
            self.screen = pygame.display.set_mode((width * cell_size, height * cell_size))
            pygame.display.set_caption(title)
            self.font = pygame.font.Font(None, cell_size + 4)
        except pygame.error as e:
            pygame.quit()
            raise ConsoleInitError(f"Could not open a {width}x{height} console: {e}") from e

        self.clock = pygame.time.Clock()
        self._glyphs: Dict[Tuple[str, Color], pygame.Surface] = {}
        self._key: Optional[Key] = None
        self._frame_time_ms = 0.0
        self._quitting = False
        logger.info("Console opened: %dx%d cells, '%s'", width, height, title)

    # -------- Input & Timing --------

    @property
    def key(self) -> Optional[Key]:
        return self._key

    @property
    def frame_time_ms(self) -> float:
        return self._frame_time_ms

    @property
    def quitting(self) -> bool:
        return self._quitting

    def request_quit(self):
        self._quitting = True

    def poll(self):
        """Waits for the next frame, then collects this frame's key and quit events."""
        self._frame_time_ms = float(self.clock.tick(self.fps))
        self._key = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.request_quit()
            elif event.type == pygame.KEYDOWN:
                # Only the most recent key of the frame counts
                self._key = KEY_BINDINGS.get(event.key, Key.OTHER)

    # -------- Drawing --------

    def cls(self):
        self.screen.fill(BLACK)

    def cls_bg(self, color: Color):
        self.screen.fill(color)

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        rect = pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
        self.screen.fill(bg, rect)
        surf = self._glyph(glyph, fg)
        self.screen.blit(surf, surf.get_rect(center=rect.center))

    def print(self, x: int, y: int, text: str):
        for offset, char in enumerate(text):
            self.set(x + offset, y, WHITE, BLACK, char)

    def print_centered(self, y: int, text: str):
        self.print((self.width - len(text)) // 2, y, text)

    def present(self):
        pygame.display.flip()

    def close(self):
        logger.info("Closing console")
        pygame.quit()

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        surf = self._glyphs.get((glyph, fg))
        if surf is None:
            surf = self.font.render(glyph, True, fg)
            self._glyphs[(glyph, fg)] = surf
        return surf


def main_loop(console: Console, state):
    """
    Drives state.tick once per rendered frame until a quit is requested.
    The console is closed however the loop ends.
    """
    try:
        while not console.quitting:
            console.poll()
            state.tick(console)
            console.present()
    finally:
        console.close()
