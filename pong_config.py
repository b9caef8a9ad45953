import math
from dataclasses import dataclass

FONT_NAME = "arial"

BG = (7, 19, 42)            # #07132a
PLAYER_COLOR = (34, 211, 238)   # #22d3ee
COMPUTER_COLOR = (179, 234, 246)  # #b3eaf6
BALL_COLOR = (219, 238, 246)    # #dbeef6
SCORE_COLOR = (240, 240, 240)
DIM = (120, 120, 140)


def blend(color, alpha, base=BG):
    return tuple(int(round(b + (c - b) * alpha)) for c, b in zip(color, base))


# translucent white over the background
NET_COLOR = blend((255, 255, 255), 0.08)
BALL_OUTLINE = blend((255, 255, 255), 0.04)

NET_WIDTH = 2
NET_SEGMENT = 16

UP_KEYS = ("arrowup", "up")
DOWN_KEYS = ("arrowdown", "down")
PAUSE_KEYS = ("p",)
RESET_KEYS = ("r",)


@dataclass
class GameConfig:
    width: int = 800
    height: int = 600
    paddle_w: int = 12
    paddle_h: int = 100
    paddle_padding: int = 10
    player_speed: float = 6
    computer_speed: float = 5
    ball_radius: float = 8
    ball_speed: float = 5
    max_ball_speed: float = 12
    speed_increase: float = 0.5
    dead_zone: float = 6
    max_bounce_angle: float = math.pi / 3
    serve_angle: float = math.pi / 6
    fps: int = 60

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"surface size must be positive, got {self.width}x{self.height}")
        if self.paddle_w <= 0 or self.paddle_h <= 0:
            raise ValueError(f"paddle size must be positive, got {self.paddle_w}x{self.paddle_h}")
        if self.paddle_h > self.height:
            raise ValueError(f"paddle height {self.paddle_h} does not fit a surface {self.height} high")
        if 2 * (self.paddle_padding + self.paddle_w) > self.width:
            raise ValueError("paddles overlap horizontally")
        if self.ball_radius <= 0:
            raise ValueError(f"ball radius must be positive, got {self.ball_radius}")
        if min(self.player_speed, self.computer_speed, self.ball_speed, self.speed_increase) < 0:
            raise ValueError("speeds must not be negative")
        if self.ball_speed > self.max_ball_speed:
            raise ValueError(f"base ball speed {self.ball_speed} exceeds max {self.max_ball_speed}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @property
    def frame_ms(self):
        return 1000.0 / self.fps
