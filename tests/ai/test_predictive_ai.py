"""
Tests for the predictive AI player
"""

import pytest

from pixel_pong.ai.predictive_ai import PredictiveAI, predict_intercept, update_ai
from pixel_pong.core.entities import Rect
from pixel_pong.utils.config import GameConfig, game_config

SPEED = 100 / 60


@pytest.fixture
def paddle():
    """Right paddle, thirds at y=75 and y=85"""
    return Rect(230, 65, 5, 30, name="player2")


class TestPrediction:
    """Test the linear intercept prediction"""

    def test_flat_trajectory(self, paddle):
        ball = Rect(117, 77, 6, 6, vx=1, vy=0)
        assert predict_intercept(paddle, ball) == 77

    def test_sloped_trajectory(self, paddle):
        """Prediction ignores walls on the way"""
        ball = Rect(130, 77, 6, 6, vx=1, vy=1)
        assert predict_intercept(paddle, ball) == 177

    def test_ball_moving_away(self, paddle):
        ball = Rect(130, 77, 6, 6, vx=-1, vy=1)
        assert predict_intercept(paddle, ball) == -23

    def test_no_horizontal_motion(self, paddle):
        ball = Rect(130, 77, 6, 6, vx=0, vy=1)
        assert predict_intercept(paddle, ball) is None


class TestUpdateAI:
    """Test paddle steering decisions"""

    @pytest.mark.parametrize(
        "ball_y,expected",
        [
            (50, -SPEED),  # top third
            (74.9, -SPEED),
            (75, 0.0),  # middle third
            (80, 0.0),
            (85, 0.0),
            (85.1, SPEED),  # bottom third
            (140, SPEED),
        ],
    )
    def test_thirds(self, paddle, ball_y, expected):
        ball = Rect(117, ball_y, 6, 6, vx=1, vy=0)

        velocity = update_ai(paddle, ball, SPEED)

        assert velocity == expected
        assert paddle.vy == expected

    def test_skip_when_ball_has_no_vx(self, paddle):
        """Paddle keeps its velocity when no prediction is possible"""
        paddle.vy = SPEED
        ball = Rect(117, 10, 6, 6, vx=0, vy=2)

        assert update_ai(paddle, ball, SPEED) is None
        assert paddle.vy == SPEED

    @pytest.mark.parametrize("vx", [-3.0, -1.0, -0.01, 0.01, 1.0, 3.0])
    @pytest.mark.parametrize("vy", [-2.0, 0.0, 0.5, 2.0])
    @pytest.mark.parametrize("ball_x", [0.0, 117.0, 229.0])
    def test_velocity_is_always_allowed(self, paddle, vx, vy, ball_x):
        """AI only ever sets -speed, 0 or +speed"""
        ball = Rect(ball_x, 77, 6, 6, vx=vx, vy=vy)

        update_ai(paddle, ball, SPEED)

        assert paddle.vy in (-SPEED, 0.0, SPEED)

    def test_does_not_move_paddle(self, paddle):
        ball = Rect(117, 10, 6, 6, vx=1, vy=0)
        update_ai(paddle, ball, SPEED)
        assert (paddle.x, paddle.y) == (230, 65)


class TestPredictiveAI:
    """Test the controller wrapper"""

    def test_uses_config_paddle_step(self, paddle):
        ball = Rect(117, 10, 6, 6, vx=1, vy=0)
        ai = PredictiveAI(paddle, ball)

        assert ai.update() == pytest.approx(-game_config.paddle_step)

    def test_custom_config(self, paddle):
        config = GameConfig(PADDLE_SPEED=120, FPS=30)
        ball = Rect(117, 140, 6, 6, vx=1, vy=0)
        ai = PredictiveAI(paddle, ball, config)

        assert ai.update() == pytest.approx(4.0)
