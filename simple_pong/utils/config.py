"""
Simple Pong configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator


@dataclass
class KeyBindings:
    """Keys driving the player paddle"""

    up: int = pygame.K_UP
    down: int = pygame.K_DOWN


class GameConfig(BaseModel):
    """Fixed gameplay constants with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Ball physics (units per tick)
    BALL_SPEED: float = Field(default=3.0, gt=0, description="Base ball speed")
    BALL_SPEED_INCREMENT: float = Field(
        default=1.0, ge=0, description="Speed added on each computer paddle hit"
    )
    BALL_SIZE: int = Field(default=15, gt=0, description="Ball bounding box side in pixels")

    # Paddles
    PADDLE_SPEED: float = Field(default=6.0, gt=0, description="Player paddle step per tick")
    AI_SPEED_OFFSET: int = Field(default=3, ge=0, description="AI step = paddle speed - offset")
    PADDLE_WIDTH: int = Field(default=15, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: int = Field(default=100, gt=0, description="Paddle height in pixels")
    PLAYER_PADDLE_MARGIN: int = Field(
        default=40, ge=0, description="Player paddle distance from the right edge"
    )
    COMPUTER_PADDLE_X: int = Field(default=25, ge=0, description="Computer paddle left edge")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    FULLSCREEN: bool = Field(default=True, description="Stretch the screen to the monitor")
    WINDOWED_SCALE: int = Field(default=2, gt=0, description="Monitor size divisor")
    WINDOW_TITLE: str = Field(default="Pong", description="Window caption")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    FONT_SIZE: int = Field(default=18, gt=0, description="Score font size")
    SCORE_TEXT_X: int = Field(default=10, ge=0, description="Score lines left offset")
    SCORE_TEXT_Y: tuple[int, int, int] = Field(
        default=(10, 30, 50), description="Player, computer and high score line offsets"
    )

    @model_validator(mode="after")
    def validate_ai_speed(self) -> "GameConfig":
        """Validate that the AI paddle still moves"""
        if self.ai_speed <= 0:
            raise ValueError(
                f"AI_SPEED_OFFSET ({self.AI_SPEED_OFFSET}) must leave a positive AI speed "
                f"(PADDLE_SPEED is {self.PADDLE_SPEED})"
            )
        return self

    @property
    def paddle_step(self) -> int:
        """Player paddle displacement per tick"""
        return int(self.PADDLE_SPEED)

    @property
    def ai_speed(self) -> int:
        """Computer paddle displacement per tick"""
        return int(self.PADDLE_SPEED - self.AI_SPEED_OFFSET)


class ScreenConfig(BaseModel):
    """
    Logical screen size, computed once at startup.

    Every component that needs the play-field bounds receives this object;
    it is frozen so the size cannot change for the rest of the run.
    """

    model_config = {"frozen": True}

    width: int = Field(gt=0, description="Screen width in pixels")
    height: int = Field(gt=0, description="Screen height in pixels")

    @classmethod
    def from_display_size(cls, width: int, height: int, scale: int = 1) -> "ScreenConfig":
        """Build the screen from a monitor resolution, divided by the windowed scale"""
        return cls(width=width // scale, height=height // scale)


# Global configuration instance with validation
game_config = GameConfig()


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values, recording each previous value before it is replaced"""
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    # Reject the whole override before touching the shared instance
    GameConfig.model_validate({**game_config.model_dump(), **kwargs})

    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        _change_values(game_config, {}, **old_values)
