"""
PyGame renderer for Simple Pong
"""

from typing import Any

import pygame

from simple_pong.utils.config import ScreenConfig
from simple_pong.utils.config import game_config


def detect_display_size() -> tuple[int, int]:
    """Returns the resolution of the primary monitor"""
    pygame.display.init()
    sizes = pygame.display.get_desktop_sizes()
    if not sizes:
        raise pygame.error("No display detected")
    return sizes[0]


class PygameRenderer:
    """PyGame-based renderer for Simple Pong"""

    def __init__(self, screen: ScreenConfig, fullscreen: bool | None = None):
        """Initialize the PyGame renderer"""
        self.width = screen.width
        self.height = screen.height
        self.fullscreen = game_config.FULLSCREEN if fullscreen is None else fullscreen

        # Initialize PyGame
        pygame.init()

        # The logical size stays fixed, SCALED stretches it over the monitor
        flags = pygame.FULLSCREEN | pygame.SCALED if self.fullscreen else 0
        self.screen = pygame.display.set_mode((self.width, self.height), flags)
        pygame.display.set_caption(game_config.WINDOW_TITLE)

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = game_config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = game_config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = game_config.PADDLE_COLOR
        self.text_color: tuple[int, int, int] = game_config.TEXT_COLOR

        self.font = pygame.font.Font(None, game_config.FONT_SIZE)
        self.active = True

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_paddle(self, rect: tuple[int, int, int, int]) -> None:
        """Draw a paddle as a filled rectangle"""
        pygame.draw.rect(self.screen, self.paddle_color, pygame.Rect(rect))

    def draw_ball(self, center: tuple[float, float], radius: float) -> None:
        """Draw the ball as a filled circle"""
        pygame.draw.circle(self.screen, self.ball_color, center, radius)

    def draw_text(self, text: str, position: tuple[int, int]) -> None:
        text_surface = self.font.render(text, True, self.text_color)
        self.screen.blit(text_surface, position)

    def draw_scores(self, player_score: int, computer_score: int, high_score: int) -> None:
        """Draw the three score lines"""
        lines = [
            f"Player Score: {player_score}",
            f"Computer Score: {computer_score}",
            f"High Score: {high_score}",
        ]
        for line, y in zip(lines, game_config.SCORE_TEXT_Y):
            self.draw_text(line, (game_config.SCORE_TEXT_X, y))

    def render_frame(self, state: dict[str, Any]) -> None:
        """Render a complete frame from a match snapshot"""
        self.clear_screen()

        self.draw_paddle(state["player_paddle_rect"])
        self.draw_paddle(state["computer_paddle_rect"])
        self.draw_ball(state["ball_center"], state["ball_radius"])

        self.draw_scores(state["player_score"], state["computer_score"], state["high_score"])

    def handle_events(self) -> dict[str, Any]:
        """Handle PyGame events"""
        events: dict[str, Any] = {"quit": False}

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events["quit"] = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                events["quit"] = True

        if events["quit"]:
            self.active = False

        return events

    def update(self) -> None:
        """Update display and control frame rate"""
        pygame.display.flip()
        self.clock.tick(game_config.FPS)

    def is_active(self) -> bool:
        return self.active

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        self.active = False
        pygame.quit()
