"""
Renderer protocol - defines interface for drawing and frame pacing backends
"""

from typing import Any, Protocol


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The match never talks to the renderer; the frame loop hands it the
    match state once per frame after the update.
    """

    def render_frame(self, state: dict[str, Any]) -> None:
        """
        Render a single frame of the match.

        Args:
            state: Match snapshot as returned by Match.get_game_state()
        """
        ...

    def handle_events(self) -> dict[str, Any]:
        """
        Process window events.

        Returns:
            Dictionary with event data ({"quit": bool})
        """
        ...

    def update(self) -> None:
        """Present the frame and wait for the next tick"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...

    def is_active(self) -> bool:
        """Check if renderer is still active (window not closed)"""
        ...
