"""
Protocols for the collaborators of the frame loop
"""

from simple_pong.core.interfaces.player import PlayerProtocol
from simple_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["PlayerProtocol", "RendererProtocol"]
