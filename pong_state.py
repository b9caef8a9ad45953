from dataclasses import dataclass, field
from typing import Optional

from pong_config import GameConfig
from pong_geometry import clamp


@dataclass
class Paddle:
    x: float
    y: float
    width: float
    height: float
    speed: float
    dy: float = 0  # vertical intent, -1 up / 0 / +1 down

    @property
    def center_y(self):
        return self.y + self.height / 2

    def move(self, dy, surface_h):
        self.y = clamp(self.y + dy, 0, surface_h - self.height)


@dataclass
class Ball:
    x: float
    y: float
    radius: float
    speed: float
    dx: float
    dy: float


@dataclass
class Score:
    player: int = 0
    computer: int = 0

    def reset(self):
        self.player = 0
        self.computer = 0


@dataclass
class InputState:
    up: bool = False
    down: bool = False
    # latest pointer target for the player paddle's top edge, consumed once per tick
    pointer_y: Optional[float] = None


@dataclass
class RunState:
    paused: bool = False
    last_time: Optional[float] = None
    last_delta: float = 0.0
    ticks: int = 0


@dataclass
class GameState:
    config: GameConfig
    player: Paddle
    computer: Paddle
    ball: Ball
    score: Score = field(default_factory=Score)
    input: InputState = field(default_factory=InputState)
    run: RunState = field(default_factory=RunState)

    @property
    def width(self):
        return self.config.width

    @property
    def height(self):
        return self.config.height


def new_game(config=None):
    """Build the paddles and ball at their starting positions.

    The ball sits at the center moving right at base speed; call
    ``pong_physics.serve`` to give it a random starting angle.
    """
    cfg = config or GameConfig()
    top = (cfg.height - cfg.paddle_h) / 2
    player = Paddle(cfg.paddle_padding, top, cfg.paddle_w, cfg.paddle_h, cfg.player_speed)
    computer = Paddle(cfg.width - cfg.paddle_w - cfg.paddle_padding, top,
                      cfg.paddle_w, cfg.paddle_h, cfg.computer_speed)
    ball = Ball(cfg.width / 2, cfg.height / 2, cfg.ball_radius, cfg.ball_speed, cfg.ball_speed, 0.0)
    return GameState(cfg, player, computer, ball)
