"""
Pixel Pong game configuration with Pydantic validation
"""

from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator


class GameConfig(BaseModel):
    """Fixed game constants, validated once and frozen"""

    # Constants are not meant to change while the game runs
    model_config = {"frozen": True}

    # Timing
    FPS: int = Field(default=60, gt=0, description="Ticks per second")

    # Field dimensions
    FIELD_WIDTH: float = Field(default=240, gt=0, description="Field width in units")
    FIELD_HEIGHT: float = Field(default=160, gt=0, description="Field height in units")

    # Ball
    BALL_SPEED: float = Field(default=100.0, gt=0, description="Ball speed in units/sec")
    BALL_SIZE: float = Field(default=6, gt=0, description="Ball side length")
    BALL_START_X: float = Field(default=117, description="Ball start x (top-left)")
    BALL_START_Y: float = Field(default=77, description="Ball start y (top-left)")
    BALL_VY_FACTOR: float = Field(
        default=0.6, description="Initial vertical velocity relative to BALL_SPEED"
    )

    # Paddles
    PADDLE_SPEED: float = Field(default=100.0, gt=0, description="Paddle speed in units/sec")
    PADDLE_WIDTH: float = Field(default=5, gt=0, description="Paddle width")
    PADDLE_HEIGHT: float = Field(default=30, gt=0, description="Paddle height")
    PADDLE1_X: float = Field(default=5, ge=0, description="Left paddle x")
    PADDLE2_X: float = Field(default=230, ge=0, description="Right paddle x")
    PADDLE_Y: float = Field(default=65, ge=0, description="Paddles start y")

    # Walls
    WALL_THICKNESS: float = Field(default=1, gt=0, description="Top/bottom wall height")

    # Display
    SCALE: int = Field(default=4, gt=0, description="Window pixels per field unit")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: tuple[int, int, int] = Field(
        default=(255, 255, 255), description="RGB color"
    )

    # Controls
    KEY_UP: int = Field(default=pygame.K_UP, description="Key code moving the paddle up")
    KEY_DOWN: int = Field(default=pygame.K_DOWN, description="Key code moving the paddle down")

    @model_validator(mode="after")
    def validate_layout(self) -> "GameConfig":
        """Validate that paddles, ball and walls fit inside the field"""
        for name in ("PADDLE1_X", "PADDLE2_X"):
            if getattr(self, name) + self.PADDLE_WIDTH > self.FIELD_WIDTH:
                raise ValueError(f"{name} puts the paddle outside the field")
        if self.PADDLE_Y + self.PADDLE_HEIGHT > self.FIELD_HEIGHT:
            raise ValueError("PADDLE_Y puts the paddles outside the field")

        if not (
            0 <= self.BALL_START_X <= self.FIELD_WIDTH - self.BALL_SIZE
            and 0 <= self.BALL_START_Y <= self.FIELD_HEIGHT - self.BALL_SIZE
        ):
            raise ValueError("Ball start position must be inside the field")

        if 2 * self.WALL_THICKNESS >= self.FIELD_HEIGHT:
            raise ValueError("WALL_THICKNESS leaves no room between the walls")

        return self

    @property
    def paddle_step(self) -> float:
        """Paddle displacement per tick"""
        return self.PADDLE_SPEED / self.FPS

    @property
    def ball_start_velocity(self) -> tuple[float, float]:
        """Initial ball velocity per tick, heading left"""
        step = self.BALL_SPEED / self.FPS
        return (-1 * step, self.BALL_VY_FACTOR * step)

    @property
    def bottom_wall_y(self) -> float:
        return self.FIELD_HEIGHT - self.WALL_THICKNESS

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary"""
        return self.model_dump()


# Global configuration instance with validation
game_config = GameConfig()
