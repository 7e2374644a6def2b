"""
Simple Pong utilities
"""

from simple_pong.utils.config import GameConfig
from simple_pong.utils.config import KeyBindings
from simple_pong.utils.config import ScreenConfig
from simple_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig", "KeyBindings", "ScreenConfig"]
