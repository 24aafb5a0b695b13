"""
Predictive AI for Pixel Pong
"""

from pixel_pong.core.entities import Rect
from pixel_pong.utils.config import GameConfig
from pixel_pong.utils.config import game_config


def predict_intercept(paddle: Rect, ball: Rect) -> float | None:
    """
    Extrapolates the ball trajectory to the paddle x coordinate

    Wall bounces on the way are ignored. Returns None when the ball has no
    horizontal motion, since no intercept can be computed.
    """
    if ball.vx == 0:
        return None
    return (ball.vy / ball.vx) * (paddle.x - ball.x) + ball.y


def update_ai(paddle: Rect, ball: Rect, speed: float) -> float | None:
    """
    Steers the paddle toward the predicted intercept

    Up if the prediction falls in the paddle top third, down if in the bottom
    third, stop otherwise. The paddle is left untouched when the ball has no
    horizontal velocity.

    Returns:
        The vertical velocity set, or None if the update was skipped
    """
    prediction = predict_intercept(paddle, ball)
    if prediction is None:
        return None

    if prediction < paddle.top + paddle.height * 1 / 3:
        paddle.vy = -speed
    elif prediction > paddle.top + paddle.height * 2 / 3:
        paddle.vy = speed
    else:
        paddle.vy = 0.0
    return paddle.vy


class PredictiveAI:
    """Computer player following the ball predicted intercept"""

    def __init__(self, paddle: Rect, ball: Rect, config: GameConfig | None = None):
        self.paddle = paddle
        self.ball = ball
        self.speed = (config or game_config).paddle_step

    def update(self) -> float | None:
        return update_ai(self.paddle, self.ball, self.speed)
