"""
Match orchestration for Simple Pong: per-tick update, collisions and scoring
"""

import logging
import math
from typing import Any

from simple_pong.core.entities import Ball, KeyState, Paddle, Side
from simple_pong.utils.config import ScreenConfig, game_config

logger = logging.getLogger(__name__)


class Match:
    """Owns both paddles, the ball and the scores, and advances them one tick at a time"""

    def __init__(self, screen: ScreenConfig):
        self.screen = screen

        paddle_y = (screen.height - game_config.PADDLE_HEIGHT) // 2
        self.player_paddle = Paddle(
            screen.width - game_config.PLAYER_PADDLE_MARGIN, paddle_y, Side.RIGHT, screen
        )
        self.computer_paddle = Paddle(game_config.COMPUTER_PADDLE_X, paddle_y, Side.LEFT, screen)

        self.ball_speed = game_config.BALL_SPEED
        self.ball = Ball(screen.width // 2, screen.height // 2, self.ball_speed, self.ball_speed)

        self.player_score = 0
        self.computer_score = 0
        self.high_score = 0
        self.tick_count = 0

    def update(self, keys: KeyState) -> dict[str, list]:
        """
        Advances the match by one tick.

        The order matters: each step sees the state left by the previous ones.

        Args:
            keys: Directional keys held by the player this tick

        Returns:
            Dictionary with the events of the tick:
            {
                "goals": [...],
                "wall_bounces": [...],
                "paddle_hits": [...]
            }
        """
        events: dict[str, list] = {"goals": [], "wall_bounces": [], "paddle_hits": []}
        self.tick_count += 1

        self.player_paddle.move_on_key_press(keys)

        # Computer paddle AI (slower than the player paddle)
        self.computer_paddle.move_to_follow_ball(self.ball.rect.center_y, game_config.ai_speed)

        self.ball.move()

        self.collide_with_wall(events)
        if self.collide_with_player_paddle():
            events["paddle_hits"].append({"side": self.player_paddle.side.value})
        if self.collide_with_computer_paddle():
            events["paddle_hits"].append(
                {"side": self.computer_paddle.side.value, "ball_speed": self.ball_speed}
            )

        return events

    def collide_with_wall(self, events: dict[str, list] | None = None) -> str | None:
        """
        Handles goals and top/bottom bounces.

        Returns the name of the wall that was hit, or None.
        """
        ball = self.ball.rect
        wall: str | None = None

        if ball.right >= self.screen.width:
            # Ball went past the player
            self.computer_score += 1
            wall = "right_goal"
            logger.debug("Computer scores (%d)", self.computer_score)
            self._record_goal(events, self.computer_paddle.side)
            self.reset()
        elif ball.x <= 0:
            # Ball went past the computer
            self.player_score += 1
            wall = "left_goal"
            logger.debug("Player scores (%d)", self.player_score)
            if self.player_score > self.high_score:
                self.high_score = self.player_score
                logger.info("New high score: %d", self.high_score)
            self._record_goal(events, self.player_paddle.side)
            self.reset()
        elif ball.y <= 0:
            # Vertical bounces always use the base speed, never the ramped one
            self.ball.dydt = game_config.BALL_SPEED
            wall = "top"
            self._record_bounce(events, wall)
        elif ball.bottom >= self.screen.height:
            self.ball.dydt = -game_config.BALL_SPEED
            wall = "bottom"
            self._record_bounce(events, wall)

        return wall

    def _record_bounce(self, events: dict[str, list] | None, wall: str) -> None:
        if events is not None:
            events["wall_bounces"].append(wall)

    def _record_goal(self, events: dict[str, list] | None, scorer: Side) -> None:
        if events is None:
            return
        events["goals"].append(
            {
                "scorer": scorer.value,
                "score": (self.player_score, self.computer_score),
                "high_score": self.high_score,
            }
        )

    def collide_with_player_paddle(self) -> bool:
        """Reverses the ball when it overlaps the player paddle"""
        ball = self.ball.rect
        paddle = self.player_paddle.rect

        if ball.right >= paddle.x and ball.bottom >= paddle.y and ball.y <= paddle.bottom:
            # No push-out: an overlap on the next tick reverses it again
            self.ball.dxdt = -self.ball.dxdt
            return True
        return False

    def collide_with_computer_paddle(self) -> bool:
        """Reverses the ball when it overlaps the computer paddle and ramps up its speed"""
        ball = self.ball.rect
        paddle = self.computer_paddle.rect

        if ball.x <= paddle.right and ball.bottom >= paddle.y and ball.y <= paddle.bottom:
            self.ball.dxdt = -self.ball.dxdt

            self.ball_speed += game_config.BALL_SPEED_INCREMENT
            self.ball.dxdt = math.copysign(self.ball_speed, self.ball.dxdt)
            # Always sent downwards, whatever the incoming direction
            self.ball.dydt = self.ball_speed
            return True
        return False

    def reset(self) -> None:
        """Recentres the ball and restores the base speed after a goal"""
        self.ball.rect.x = (self.screen.width - self.ball.rect.w) // 2
        self.ball.rect.y = (self.screen.height - self.ball.rect.h) // 2

        # Overwritten just below: every serve goes right and down
        self.ball.dxdt = -self.ball.dxdt

        self.ball_speed = game_config.BALL_SPEED
        self.ball.dxdt = self.ball_speed
        self.ball.dydt = self.ball_speed

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete match state"""
        return {
            "ball_rect": self.ball.get_rect(),
            "ball_center": self.ball.get_center(),
            "ball_radius": self.ball.radius,
            "ball_velocity": (self.ball.dxdt, self.ball.dydt),
            "ball_speed": self.ball_speed,
            "player_paddle_rect": self.player_paddle.get_rect(),
            "computer_paddle_rect": self.computer_paddle.get_rect(),
            "player_score": self.player_score,
            "computer_score": self.computer_score,
            "high_score": self.high_score,
            "tick": self.tick_count,
            "field_bounds": (0, self.screen.width, 0, self.screen.height),
        }
