"""
Main game application with PyGame GUI
"""

import argparse
import logging
import sys
import traceback

import pygame

from pixel_pong.ai.predictive_ai import PredictiveAI
from pixel_pong.core.game_engine import GameEngine
from pixel_pong.core.physics import PhysicsEngine
from pixel_pong.gui.human_player import KeyboardController
from pixel_pong.gui.pygame_renderer import PygameRenderer
from pixel_pong.utils.config import GameConfig
from pixel_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class PongApp:
    """Pixel Pong application: window, input and the fixed-rate loop"""

    def __init__(
        self, config: GameConfig | None = None, demo: bool = False, scale: int | None = None
    ) -> None:
        """Initialize the application"""
        self.config = config or game_config
        self.renderer = PygameRenderer(self.config, scale=scale)

        physics = PhysicsEngine(self.config)
        ai_players = [PredictiveAI(physics.player2, physics.ball, self.config)]
        if demo:
            # AI vs AI: nobody drives the left paddle from the keyboard
            ai_players.insert(0, PredictiveAI(physics.player1, physics.ball, self.config))
            self.input_controller = None
        else:
            self.input_controller = KeyboardController(physics.player1, self.config)

        self.game_engine = GameEngine(physics, self.renderer, ai_players)
        self.running = True

    def handle_events(self) -> None:
        """Process pending pygame events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif self.input_controller is not None:
                self.input_controller.handle_event(event)

    def run(self, max_ticks: int | None = None) -> None:
        """Main application loop"""
        logger.info("Starting Pixel Pong at %d FPS", self.config.FPS)
        while self.running:
            self.handle_events()
            if not self.running:
                break

            self.game_engine.tick()
            self.renderer.present()
            self.renderer.update(self.config.FPS)

            if max_ticks is not None and self.game_engine.ticks >= max_ticks:
                self.running = False

        logger.info("Stopped after %d ticks", self.game_engine.ticks)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pixel Pong")
    parser.add_argument("--demo", action="store_true", help="AI controls both paddles")
    parser.add_argument("--scale", type=int, default=None, help="Window pixels per field unit")
    parser.add_argument(
        "--max-ticks", type=int, default=None, help="Quit after this many ticks"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = PongApp(demo=args.demo, scale=args.scale)
        app.run(max_ticks=args.max_ticks)
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
        sys.exit(1)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
