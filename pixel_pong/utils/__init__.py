"""
Pixel Pong utilities
"""

from pixel_pong.utils.config import GameConfig
from pixel_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
