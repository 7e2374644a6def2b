"""
Simple Pong game entities: rectangle, paddles, ball
"""

from dataclasses import dataclass
from enum import Enum

from simple_pong.utils.config import ScreenConfig
from simple_pong.utils.config import game_config


class Side(Enum):
    """Side of the field a paddle defends"""

    LEFT = "left"  # Computer
    RIGHT = "right"  # Player


@dataclass
class Rect:
    """Axis-aligned rectangle with integer top-left corner and size"""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def center_y(self) -> int:
        return self.y + self.h // 2

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)


@dataclass
class KeyState:
    """Directional keys held during a tick"""

    up: bool = False
    down: bool = False


class Paddle:
    """Vertical paddle, moved by the keyboard or by following the ball"""

    def __init__(
        self,
        x: int,
        y: int,
        side: Side,
        screen: ScreenConfig,
        width: int | None = None,
        height: int | None = None,
    ):
        self.rect = Rect(
            x,
            y,
            width if width is not None else game_config.PADDLE_WIDTH,
            height if height is not None else game_config.PADDLE_HEIGHT,
        )
        self.side = side
        self.screen = screen

    def move_on_key_press(self, keys: KeyState) -> None:
        """
        Moves the paddle one step per held key.

        A direction is only taken while the paddle has not reached that edge.
        There is no clamp, so the last step may overshoot the edge when the
        step does not divide the remaining distance.
        """
        step = game_config.paddle_step

        if keys.down and self.rect.bottom < self.screen.height:
            self.rect.y += step

        if keys.up and self.rect.y > 0:
            self.rect.y -= step

    def move_to_follow_ball(self, target_y: int, speed: int) -> None:
        """Moves the paddle centre towards target_y, then clamps to the screen"""
        center = self.rect.center_y

        if center < target_y:
            self.rect.y += speed
        elif center > target_y:
            self.rect.y -= speed

        self.constrain_position()

    def constrain_position(self) -> None:
        """Ensures the paddle stays within the screen"""
        if self.rect.y < 0:
            self.rect.y = 0
        if self.rect.bottom > self.screen.height:
            self.rect.y = self.screen.height - self.rect.h

    def get_rect(self) -> tuple[int, int, int, int]:
        """Returns the collision rectangle (x, y, width, height)"""
        return self.rect.to_tuple()


class Ball:
    """Game ball: a square bounding box and a velocity in units per tick"""

    def __init__(self, x: int, y: int, dxdt: float, dydt: float, size: int | None = None):
        size = size if size is not None else game_config.BALL_SIZE
        self.rect = Rect(x, y, size, size)
        self.dxdt = dxdt
        self.dydt = dydt

    def move(self) -> None:
        """Advances the ball by one tick, truncating to whole pixels every time"""
        self.rect.x += int(self.dxdt)
        self.rect.y += int(self.dydt)

    @property
    def radius(self) -> float:
        return self.rect.w / 2

    def get_center(self) -> tuple[float, float]:
        """Returns the centre of the bounding box"""
        return (self.rect.x + self.rect.w / 2, self.rect.y + self.rect.h / 2)

    def get_rect(self) -> tuple[int, int, int, int]:
        """Returns the bounding box (x, y, width, height)"""
        return self.rect.to_tuple()
