"""
Collaborator protocols of the core
"""

from pixel_pong.core.interfaces.controller import ControllerProtocol
from pixel_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["ControllerProtocol", "RendererProtocol"]
