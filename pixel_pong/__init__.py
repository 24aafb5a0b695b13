"""
Pixel Pong: a tiny rectangle-physics Pong
"""

__version__ = "0.1.0"
