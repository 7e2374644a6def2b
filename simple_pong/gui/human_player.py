"""
Keyboard player for Simple Pong
"""

from collections.abc import Mapping

import pygame

from simple_pong.core.entities import KeyState
from simple_pong.utils.config import KeyBindings


class HumanPlayer:
    """Player that drives the right paddle with the keyboard"""

    def __init__(self, bindings: KeyBindings | None = None):
        """
        Initialize human player

        Args:
            bindings: Up/down key codes, arrow keys by default
        """
        self.bindings = bindings or KeyBindings()
        self.current_keys = KeyState()

    def update_from_keys(self, keys_pressed: Mapping[int, bool]) -> KeyState:
        """Update the held directions from a key code -> pressed mapping"""
        self.current_keys = KeyState(
            up=bool(keys_pressed.get(self.bindings.up, False)),
            down=bool(keys_pressed.get(self.bindings.down, False)),
        )
        return self.current_keys

    def get_key_state(self) -> KeyState:
        """Poll the keyboard once for this tick"""
        pressed = pygame.key.get_pressed()
        keys = {key: pressed[key] for key in (self.bindings.up, self.bindings.down)}
        return self.update_from_keys(keys)
