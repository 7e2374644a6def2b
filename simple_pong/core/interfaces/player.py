"""
Player protocol - defines where the player paddle gets its input from
"""

from typing import Protocol

from simple_pong.core.entities import KeyState


class PlayerProtocol(Protocol):
    """
    Protocol for anything that can drive the player paddle.

    The keyboard player polls pygame; tests use scripted players.
    """

    def get_key_state(self) -> KeyState:
        """
        Get the directional keys held for the current tick.

        Returns:
            KeyState with the up and down flags
        """
        ...
