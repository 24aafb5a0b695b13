"""
Controller protocol - defines interface for paddles driven every tick
"""

from typing import Protocol

from pixel_pong.core.entities import Rect


class ControllerProtocol(Protocol):
    """
    Protocol for controllers the game loop updates once per tick (AI players).

    Human input does not go through this protocol: key events change the
    paddle velocity between ticks.
    """

    paddle: Rect

    def update(self) -> float | None:
        """
        Set the paddle velocity for the next tick.

        Returns:
            The vertical velocity set, or None if the paddle was left untouched
        """
        ...
