"""
Human player implementation for Pixel Pong
"""

import pygame

from pixel_pong.core.entities import Rect
from pixel_pong.utils.config import GameConfig
from pixel_pong.utils.config import game_config


class KeyboardController:
    """Keyboard-driven paddle: up/down keys set its vertical velocity"""

    def __init__(self, paddle: Rect, config: GameConfig | None = None):
        """
        Initialize the controller

        Args:
            paddle: Paddle whose velocity is driven by the keys
            config: Game configuration (key codes and paddle speed)
        """
        config = config or game_config
        self.paddle = paddle
        self.speed = config.paddle_step
        self.up_key = config.KEY_UP
        self.down_key = config.KEY_DOWN

    def key_down(self, key: int) -> None:
        """Starts moving on an up/down key press, other keys are ignored"""
        if key == self.up_key:
            self.paddle.vy = -self.speed
        if key == self.down_key:
            self.paddle.vy = self.speed

    def key_up(self, key: int) -> None:
        """Stops the paddle whatever key was released"""
        self.paddle.vy = 0.0

    def handle_event(self, event: pygame.event.Event) -> None:
        """Dispatch a pygame keyboard event"""
        if event.type == pygame.KEYDOWN:
            self.key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.key_up(event.key)

    def is_moving(self) -> bool:
        return self.paddle.vy != 0
