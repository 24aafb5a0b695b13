"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol


class RendererProtocol(Protocol):
    """
    Protocol for render surface implementations.

    The game loop only clears the frame and fills rectangles, so any
    backend able to do both can draw the game: Pygame, headless recorders, etc.
    """

    def clear(self, width: float, height: float) -> None:
        """
        Clear the frame.

        Args:
            width: Field width in game units
            height: Field height in game units
        """
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        """
        Fill a rectangle given in game units (top-left origin).
        """
        ...
