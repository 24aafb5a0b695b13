"""
Core module of Pixel Pong game
"""

from pixel_pong.core.entities import Rect
from pixel_pong.core.entities import RectRegistry
from pixel_pong.core.game_engine import GameEngine
from pixel_pong.core.physics import Bounce
from pixel_pong.core.physics import PhysicsEngine
from pixel_pong.core.physics import advance

__all__ = [
    "Rect",
    "RectRegistry",
    "Bounce",
    "PhysicsEngine",
    "GameEngine",
    "advance",
]
