"""
Tests for the pygame renderer and application, using the SDL dummy video driver
"""

import pygame
import pytest

from pixel_pong.gui.game_app import PongApp, parse_args
from pixel_pong.gui.human_player import KeyboardController
from pixel_pong.gui.pygame_renderer import PygameRenderer


@pytest.fixture
def headless_display(monkeypatch):
    """Run pygame without a real window"""
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


class TestPygameRenderer:
    """Test drawing through the renderer"""

    def test_window_size_follows_scale(self, headless_display):
        renderer = PygameRenderer(scale=2)
        assert renderer.screen.get_size() == (480, 320)

    def test_fill_rect_is_scaled(self, headless_display):
        """Rects are drawn in game units times the scale"""
        renderer = PygameRenderer(scale=2)
        renderer.clear(240, 160)
        renderer.fill_rect(5, 65, 5, 30)

        assert tuple(renderer.screen.get_at((12, 140)))[:3] == (255, 255, 255)
        assert tuple(renderer.screen.get_at((8, 140)))[:3] == (0, 0, 0)
        assert tuple(renderer.screen.get_at((12, 120)))[:3] == (0, 0, 0)

    def test_clear_erases_previous_frame(self, headless_display):
        renderer = PygameRenderer(scale=1)
        renderer.fill_rect(100, 100, 10, 10)
        renderer.clear(240, 160)

        assert tuple(renderer.screen.get_at((105, 105)))[:3] == (0, 0, 0)


class TestPongApp:
    """Test the application wiring"""

    def test_default_mode(self, headless_display):
        """Keyboard drives the left paddle, AI the right one"""
        app = PongApp(scale=1)
        physics = app.game_engine.physics_engine

        assert isinstance(app.input_controller, KeyboardController)
        assert app.input_controller.paddle is physics.player1
        assert [ai.paddle for ai in app.game_engine.ai_players] == [physics.player2]

    def test_demo_mode(self, headless_display):
        app = PongApp(demo=True, scale=1)
        physics = app.game_engine.physics_engine

        assert app.input_controller is None
        assert [ai.paddle for ai in app.game_engine.ai_players] == [
            physics.player1,
            physics.player2,
        ]

    def test_run_stops_after_max_ticks(self, headless_display):
        app = PongApp(scale=1)
        app.run(max_ticks=3)

        assert app.game_engine.ticks == 3
        assert not app.running

    def test_quit_event_stops_loop(self, headless_display):
        app = PongApp(scale=1)
        pygame.event.post(pygame.event.Event(pygame.QUIT))

        app.run(max_ticks=100)

        assert app.game_engine.ticks == 0

    def test_key_events_reach_paddle(self, headless_display):
        app = PongApp(scale=1)
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN))

        app.handle_events()

        assert app.game_engine.physics_engine.player1.vy > 0


def test_parse_args():
    args = parse_args(["--demo", "--scale", "3", "--max-ticks", "10", "--verbose"])
    assert args.demo
    assert args.scale == 3
    assert args.max_ticks == 10
    assert args.verbose

    defaults = parse_args([])
    assert not defaults.demo
    assert defaults.scale is None
    assert defaults.max_ticks is None
