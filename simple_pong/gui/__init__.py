"""
GUI module for Simple Pong - PyGame interface
"""

from simple_pong.gui.game_app import PongApp, create_app, main
from simple_pong.gui.human_player import HumanPlayer
from simple_pong.gui.pygame_renderer import PygameRenderer, detect_display_size

__all__ = [
    "PygameRenderer",
    "detect_display_size",
    "HumanPlayer",
    "PongApp",
    "create_app",
    "main",
]
