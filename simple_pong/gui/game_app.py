"""
Main game application with PyGame GUI
"""

import logging
import sys

import pygame

from simple_pong.core.interfaces import PlayerProtocol, RendererProtocol
from simple_pong.core.match import Match
from simple_pong.gui.human_player import HumanPlayer
from simple_pong.gui.pygame_renderer import PygameRenderer, detect_display_size
from simple_pong.utils.config import ScreenConfig, game_config

logger = logging.getLogger(__name__)


class PongApp:
    """Frame loop: one match update, then one draw, per frame"""

    def __init__(self, match: Match, renderer: RendererProtocol, player: PlayerProtocol):
        self.match = match
        self.renderer = renderer
        self.player = player
        self.running = True
        self.frame_count = 0

    def step(self) -> None:
        """Runs a single frame"""
        events = self.renderer.handle_events()
        if events.get("quit"):
            self.running = False
            return

        self.match.update(self.player.get_key_state())
        self.renderer.render_frame(self.match.get_game_state())
        self.renderer.update()
        self.frame_count += 1

    def run(self, max_frames: int | None = None) -> None:
        """Main application loop"""
        screen = self.match.screen
        logger.info("Starting Pong on a %dx%d screen", screen.width, screen.height)

        try:
            while self.running and self.renderer.is_active():
                if max_frames is not None and self.frame_count >= max_frames:
                    break
                self.step()
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        logger.info(
            "Closing Pong after %d frames (player %d, computer %d, high score %d)",
            self.frame_count,
            self.match.player_score,
            self.match.computer_score,
            self.match.high_score,
        )
        self.renderer.cleanup()


def create_app() -> PongApp:
    """Builds the screen, the match and the PyGame collaborators"""
    width, height = detect_display_size()
    screen = ScreenConfig.from_display_size(width, height, game_config.WINDOWED_SCALE)
    logger.debug("Detected %dx%d display, using %dx%d", width, height, screen.width, screen.height)

    renderer = PygameRenderer(screen)
    return PongApp(Match(screen), renderer, HumanPlayer())


def main() -> None:
    """Main entry point"""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        app = create_app()
        app.run()
    except KeyboardInterrupt:
        logger.info("User interruption")
    except pygame.error:
        logger.critical("Fatal display error", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
