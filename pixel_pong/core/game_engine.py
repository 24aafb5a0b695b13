"""
Pixel Pong main game engine
"""

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

from pixel_pong.core.interfaces.controller import ControllerProtocol
from pixel_pong.core.interfaces.renderer import RendererProtocol
from pixel_pong.core.physics import PhysicsEngine

logger = logging.getLogger(__name__)


class GameEngine:
    """Runs one tick at a time: motion, drawing, AI, then scoring"""

    def __init__(
        self,
        physics_engine: PhysicsEngine | None = None,
        renderer: RendererProtocol | None = None,
        ai_players: Iterable[ControllerProtocol] = (),
    ):
        self.physics_engine = physics_engine or PhysicsEngine()
        self.renderer = renderer
        self.ai_players = list(ai_players)
        self.ticks = 0

    def tick(self) -> dict[str, Any]:
        """
        Updates the game by one tick

        Returns:
            Dict containing the events of the tick
        """
        physics = self.physics_engine
        events: dict[str, list] = {"bounces": [], "resets": []}

        if self.renderer is not None:
            self.renderer.clear(physics.field_width, physics.field_height)

        # Each rect is drawn right after it moved
        for rect in physics.registry:
            bounce = physics.advance(rect)
            if bounce is not None:
                events["bounces"].append({"rect": rect.name, "axis": bounce.value})
            if self.renderer is not None:
                self.renderer.fill_rect(rect.x, rect.y, rect.width, rect.height)

        for player in self.ai_players:
            player.update()

        side = physics.apply_scoring_rule()
        if side is not None:
            events["resets"].append({"side": side})

        self.ticks += 1
        return events

    def run(self, max_ticks: int) -> None:
        """Runs ticks back to back without any frame timing"""
        logger.info("Running %d headless ticks", max_ticks)
        for _ in range(max_ticks):
            self.tick()

    def simulate(self, n_ticks: int) -> np.ndarray:
        """Runs n ticks and returns the ball (x, y) after each of them"""
        ball = self.physics_engine.ball
        trajectory = np.empty((n_ticks, 2), dtype=np.float64)
        for i in range(n_ticks):
            self.tick()
            trajectory[i] = (ball.x, ball.y)
        return trajectory

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        state = self.physics_engine.get_game_state()
        state["ticks"] = self.ticks
        return state
