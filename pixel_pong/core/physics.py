"""
Physics system for Pixel Pong
"""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

from pixel_pong.core.entities import Rect
from pixel_pong.core.entities import RectRegistry
from pixel_pong.utils.config import GameConfig
from pixel_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class Bounce(Enum):
    """Velocity component flipped by a collision"""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def _bounces_horizontally(rect: Rect, other: Rect) -> bool:
    """True if rect would cross a vertical side of other on its next step"""
    if not (rect.top < other.bottom and rect.bottom > other.top):
        return False
    from_left = rect.right < other.left and rect.right + rect.vx >= other.left
    from_right = rect.left > other.right and rect.left + rect.vx <= other.right
    return from_left or from_right


def _bounces_vertically(rect: Rect, other: Rect) -> bool:
    """True if rect would cross a horizontal side of other on its next step"""
    if not (rect.left < other.right and rect.right > other.left):
        return False
    from_above = rect.bottom < other.top and rect.bottom + rect.vy >= other.top
    from_below = rect.top > other.bottom and rect.top + rect.vy <= other.bottom
    return from_above or from_below


def advance(rect: Rect, rects: Iterable[Rect]) -> Bounce | None:
    """
    Moves a rect by one tick, bouncing off the first rect it is about to hit

    The collision test is predictive: it checks whether the next displacement
    would cross a side of another rect, using the velocity before moving.
    Only the first collision found is resolved.

    Args:
        rect: Rect to move
        rects: Every rect of the game, rect itself included

    Returns:
        The bounce that occurred, or None
    """
    bounce = None
    for other in rects:
        if other is rect:
            continue
        if _bounces_horizontally(rect, other):
            rect.vx = -rect.vx
            bounce = Bounce.HORIZONTAL
            break
        if _bounces_vertically(rect, other):
            rect.vy = -rect.vy
            bounce = Bounce.VERTICAL
            break

    rect.x += rect.vx
    rect.y += rect.vy
    return bounce


class PhysicsEngine:
    """Playfield owner: builds the rects and applies the game rules"""

    def __init__(self, config: GameConfig | None = None):
        self.config = config or game_config
        self.field_width = self.config.FIELD_WIDTH
        self.field_height = self.config.FIELD_HEIGHT
        self.registry = RectRegistry()

        # Insertion order matters: later rects see earlier ones already moved
        cfg = self.config
        self.player1 = self._create(
            cfg.PADDLE1_X, cfg.PADDLE_Y, cfg.PADDLE_WIDTH, cfg.PADDLE_HEIGHT, name="player1"
        )
        self.player2 = self._create(
            cfg.PADDLE2_X, cfg.PADDLE_Y, cfg.PADDLE_WIDTH, cfg.PADDLE_HEIGHT, name="player2"
        )
        vx, vy = cfg.ball_start_velocity
        self.ball = self._create(
            cfg.BALL_START_X, cfg.BALL_START_Y, cfg.BALL_SIZE, cfg.BALL_SIZE, vx, vy, name="ball"
        )

        # Static walls
        self.top_wall = self._create(
            0, 0, self.field_width, cfg.WALL_THICKNESS, name="top_wall"
        )
        self.bottom_wall = self._create(
            0, cfg.bottom_wall_y, self.field_width, cfg.WALL_THICKNESS, name="bottom_wall"
        )

    def _create(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        vx: float = 0.0,
        vy: float = 0.0,
        name: str = "",
    ) -> Rect:
        rect = Rect(x, y, width, height, vx, vy, name=name)
        self.registry.add(rect)
        return rect

    def advance(self, rect: Rect) -> Bounce | None:
        """Moves one rect against every other rect of the registry"""
        bounce = advance(rect, self.registry)
        if bounce is not None:
            logger.debug("%s bounced (%s)", rect.name, bounce.value)
        return bounce

    def step(self) -> list[dict[str, str]]:
        """Advances every rect in registry order, returns bounce events"""
        bounces = []
        for rect in self.registry:
            bounce = self.advance(rect)
            if bounce is not None:
                bounces.append({"rect": rect.name, "axis": bounce.value})
        return bounces

    def reset_ball(self) -> None:
        """Puts the ball back at its start position, velocity is kept"""
        self.ball.x = self.config.BALL_START_X
        self.ball.y = self.config.BALL_START_Y

    def apply_scoring_rule(self) -> str | None:
        """Resets the ball if it left the field, returns the side it exited"""
        side = None
        if self.ball.right > self.field_width:
            side = "right"
        elif self.ball.left < 0:
            side = "left"

        if side is not None:
            logger.debug("Ball exited on the %s side, resetting", side)
            self.reset_ball()
        return side

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return {
            "ball_position": (self.ball.x, self.ball.y),
            "ball_velocity": (self.ball.vx, self.ball.vy),
            "player1_position": (self.player1.x, self.player1.y),
            "player2_position": (self.player2.x, self.player2.y),
            "player1_velocity": self.player1.vy,
            "player2_velocity": self.player2.vy,
            "field_bounds": (0, self.field_width, 0, self.field_height),
        }
