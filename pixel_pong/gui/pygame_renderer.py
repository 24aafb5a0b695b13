"""
PyGame renderer for Pixel Pong game
"""

import pygame

from pixel_pong.utils.config import GameConfig
from pixel_pong.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer drawing game units magnified by an integer scale"""

    def __init__(self, config: GameConfig | None = None, scale: int | None = None):
        """Initialize the PyGame renderer"""
        config = config or game_config
        self.scale = scale or config.SCALE
        self.width = int(config.FIELD_WIDTH * self.scale)
        self.height = int(config.FIELD_HEIGHT * self.scale)

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Pixel Pong")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = config.BACKGROUND_COLOR
        self.foreground_color: tuple[int, int, int] = config.FOREGROUND_COLOR

    def _to_screen(self, value: float) -> int:
        return int(round(value * self.scale))

    def clear(self, width: float, height: float) -> None:
        """Clear the field area with background color"""
        rect = pygame.Rect(0, 0, self._to_screen(width), self._to_screen(height))
        self.screen.fill(self.background_color, rect)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Draw a filled rectangle given in game units"""
        rect = pygame.Rect(
            self._to_screen(x),
            self._to_screen(y),
            max(1, self._to_screen(width)),
            max(1, self._to_screen(height)),
        )
        pygame.draw.rect(self.screen, self.foreground_color, rect)

    def present(self) -> None:
        """Flip the display"""
        pygame.display.flip()

    def update(self, fps: int) -> None:
        """Maintain frame rate, no catch-up on late frames"""
        self.clock.tick(fps)

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        pygame.quit()
