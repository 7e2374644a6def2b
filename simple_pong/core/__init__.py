"""
Core module of Simple Pong game
"""

from simple_pong.core.entities import Ball
from simple_pong.core.entities import KeyState
from simple_pong.core.entities import Paddle
from simple_pong.core.entities import Rect
from simple_pong.core.entities import Side
from simple_pong.core.match import Match

__all__ = [
    "Ball",
    "KeyState",
    "Match",
    "Paddle",
    "Rect",
    "Side",
]
