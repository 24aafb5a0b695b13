"""
Graphical interface for Pixel Pong
"""

from pixel_pong.gui.human_player import KeyboardController
from pixel_pong.gui.pygame_renderer import PygameRenderer

__all__ = ["KeyboardController", "PygameRenderer"]
